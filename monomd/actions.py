"""
# Mono-Markdown: actions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Actions, and the queue holding them until rendering.
"""

from typing import Callable, NamedTuple, Optional

UNDISCOVERED = -1


class Action(NamedTuple):
    """
    A unit of output mutation.

    - `index`: the index before whose character `insertion` is emitted
      (`len(md)` to emit after the last character).
    - `insertion`: literal text to be emitted.
    - `transformation`: function applied to the text of `claimed_range`,
      whose result replaces `insertion` (resolved before rendering).
    - `claimed_range`: half-open `(start, end)` of characters superseded by this action.
    - `is_block`: whether the action delimits a block-level construct.
    - `discovery`: order in which the action was queued.
    """
    index: int
    insertion: str = ''
    transformation: Optional[Callable[[str], str]] = None
    claimed_range: Optional[tuple[int, int]] = None
    is_block: bool = False
    discovery: int = UNDISCOVERED


class ActionQueue:
    """
    Object storing the actions anchored at each index of a document.

    There is one slot per character plus a final slot for actions after the last character.
    Every queued action is stamped with a discovery number,
    and the actions at an index are rendered last-discovered first.
    The reverse-discovery order stands in for an explicit stack of opened constructs:
    whatever was found later (a paragraph around a heading, say) wraps what was found earlier.
    """
    _actions_from_index: list[list['Action']]
    _discovery_count: int

    def __init__(self, length: int):
        self._actions_from_index = [[] for _ in range(length + 1)]
        self._discovery_count = 0

    def __len__(self) -> int:
        return len(self._actions_from_index)

    def append(self, action: 'Action') -> 'Action':
        action = self._discover(action)
        self._actions_from_index[action.index].append(action)

        return action

    def prepend(self, action: 'Action') -> 'Action':
        action = self._discover(action)
        self._actions_from_index[action.index].insert(0, action)

        return action

    def actions_at(self, index: int) -> list['Action']:
        return list(self._actions_from_index[index])

    def rendering_order_at(self, index: int) -> list['Action']:
        return sorted(self._actions_from_index[index], key=lambda action: action.discovery, reverse=True)

    def _discover(self, action: 'Action') -> 'Action':
        if not 0 <= action.index < len(self._actions_from_index):
            raise IndexError(f'error: action index {action.index} outside of queue')

        action = action._replace(discovery=self._discovery_count)
        self._discovery_count += 1

        return action
