"""
# Mono-Markdown: tags.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Tags, the scanners recognising Mono-Markdown constructs.
"""

import copy
import string
from typing import Callable, Optional

from monomd.actions import Action
from monomd.bases import Tag
from monomd.constants import ESCAPE_CHARACTER, FENCE
from monomd.exceptions import MissingAttributeException
from monomd.utilities import is_contiguous


class GenericPairedTag(Tag):
    """
    A tag for constructs delimited by an opening trigger and a closing trigger.

    Syntax:
    ````
    «opening_trigger»«content»«closing_trigger»
    ````

    Closing triggers default to the opening triggers.
    When they do and there are several variants (e.g. `*` and `_`),
    a construct only closes on the variant it was opened with, so `*x_` stays open.
    With `on_newline`, the opening trigger must start a line and the construct is block-level.

    On closing, either
    - two insertions are emitted, each claiming its own delimiter only
      (the content is left for later tags), or
    - one transformation is emitted claiming the whole construct.
    A construct that never closes claims nothing.

    Triggers are matched against a trailing window of consumed characters.
    The window is emptied where a claimed run was skipped,
    after a construct opens (the closing trigger cannot overlap the opening one),
    and after an escaped character (it cannot take part in a trigger).

    A transformation claims its whole construct, so it never encloses characters claimed before:
    an open construct is abandoned where a claimed run was skipped.
    Whether the character after a skipped run starts a line is read off the document given to `begin`.
    """
    UNKNOWN_NONZERO_COLUMN = 1

    _triggers: list[str]
    _closing_triggers: list[str]
    _closing_triggers_follow_opening: bool
    _on_newline: bool
    _insertion: Optional[tuple[str, str]]
    _transformation: Optional[Callable[[str], str]]
    _escaping_enabled: bool
    _window_size: int

    _md: str
    _window: str
    _last_index: int
    _column: int
    _is_escaped: bool
    _is_opened: bool
    _opened_with: Optional[str]
    _opened_index: int

    def __init__(self, id_: str, triggers: list[str], closing_triggers: Optional[list[str]] = None,
                 on_newline: bool = False, insertion: Optional[tuple[str, str]] = None,
                 transformation: Optional[Callable[[str], str]] = None, escaping_enabled: bool = True):
        super().__init__(id_)

        if len(triggers) == 0:
            raise MissingAttributeException('triggers')
        if closing_triggers is not None and len(closing_triggers) == 0:
            raise MissingAttributeException('closing_triggers')
        if insertion is None and transformation is None:
            raise MissingAttributeException('insertion')

        self._triggers = list(triggers)
        self._closing_triggers_follow_opening = closing_triggers is None
        if closing_triggers is None:
            self._closing_triggers = list(triggers)
        else:
            self._closing_triggers = list(closing_triggers)
        self._on_newline = on_newline
        self._insertion = insertion
        self._transformation = transformation
        self._escaping_enabled = escaping_enabled
        self._window_size = max(len(self._triggers[0]), len(self._closing_triggers[0]))

        self.reset()

    @property
    def triggers(self) -> list[str]:
        return copy.copy(self._triggers)

    @property
    def closing_triggers(self) -> list[str]:
        return copy.copy(self._closing_triggers)

    @property
    def window_size(self) -> int:
        return self._window_size

    def add_trigger(self, trigger: str):
        """
        Register a further opening trigger (and closing trigger, if those follow the opening ones).
        """
        self._triggers.append(trigger)
        if self._closing_triggers_follow_opening:
            self._closing_triggers.append(trigger)

        self._window_size = max(len(trigger) for trigger in [*self._triggers, *self._closing_triggers])

    def begin(self, md: str):
        super().begin(md)
        self._md = md

    def reset(self):
        self._md = ''
        self._window = ''
        self._last_index = -1
        self._column = 0
        self._is_escaped = False
        self._is_opened = False
        self._opened_with = None
        self._opened_index = -1

    def consume(self, index: int, character: str) -> list['Action']:
        if not is_contiguous(index, self._last_index):
            self._resume_after_skipped_run(index)
        self._last_index = index

        self._window = (self._window + character)[-self._window_size:]
        column = self._column
        if character == '\n':
            self._column = 0
        else:
            self._column += 1

        if self._is_escaped:
            self._is_escaped = False
            self._window = ''
            return []

        if self._escaping_enabled and character == ESCAPE_CHARACTER:
            self._is_escaped = True
            return []

        if not self._is_opened:
            self._open(index, column)
            return []

        return self._close(index)

    def _resume_after_skipped_run(self, index: int):
        self._window = ''
        self._is_escaped = False

        if self._is_opened and self._transformation is not None:
            self._is_opened = False
            self._opened_with = None

        # Only a zero column is ever tested
        if self.starts_line(index):
            self._column = 0
        else:
            self._column = GenericPairedTag.UNKNOWN_NONZERO_COLUMN

    def starts_line(self, index: int) -> bool:
        """
        Whether the character at an index starts a line of the document given to `begin`.

        Without a document, only index 0 is known to start a line.
        """
        return index == 0 or self._md[index - 1:index] == '\n'

    def _open(self, index: int, column: int):
        trigger = GenericPairedTag.match_trigger(self._window, self._triggers)
        if trigger is None:
            return

        trigger_column = column + 1 - len(trigger)
        if self._on_newline and trigger_column != 0:
            return

        self._is_opened = True
        self._opened_with = trigger
        self._opened_index = index + 1 - len(trigger)
        self._window = ''

    def _close(self, index: int) -> list['Action']:
        closing_trigger = GenericPairedTag.match_trigger(self._window, self._closing_triggers)
        if closing_trigger is None:
            return []

        if (
            self._closing_triggers_follow_opening
            and len(self._triggers) > 1
            and closing_trigger != self._opened_with
        ):
            return []

        self._is_opened = False
        self._window = ''

        opened_index = self._opened_index
        closing_index = index + 1 - len(closing_trigger)

        if self._transformation is not None:
            return [
                Action(
                    index=opened_index,
                    transformation=self._transformation,
                    claimed_range=(opened_index, index + 1),
                    is_block=self._on_newline,
                ),
            ]

        opening_insertion, closing_insertion = self._insertion
        return [
            Action(
                index=opened_index,
                insertion=opening_insertion,
                claimed_range=(opened_index, opened_index + len(self._opened_with)),
                is_block=self._on_newline,
            ),
            Action(
                index=closing_index,
                insertion=closing_insertion,
                claimed_range=(closing_index, index + 1),
                is_block=self._on_newline,
            ),
        ]

    @staticmethod
    def match_trigger(window: str, triggers: list[str]) -> Optional[str]:
        """
        Return the longest trigger ending the window, if any.
        """
        matching_triggers = [trigger for trigger in triggers if window.endswith(trigger)]

        return max(matching_triggers, key=len, default=None)


class FencedCodeTag(Tag):
    """
    A tag for fenced code blocks.

    Syntax:
    ````
    ```«hint»
    «body»
    ```
    ````

    States:
    - `new`: looking for the opening fence.
    - `hint`: reading the rest of the opening line into «hint».
    - `body`: looking for the closing fence.

    The block is opaque: one block-level transformation action claims all of it, fences included.
    The transformation registered for the stripped «hint» is used if there is one,
    otherwise the one registered for `default`.
    An unterminated block claims nothing, nor does a block interrupted by a skipped claimed run.
    """
    DEFAULT_HINT = 'default'

    _transformation_from_hint: dict[str, Callable[[str], str]]
    _state: str
    _window: str
    _last_index: int
    _hint: str
    _start_index: int

    def __init__(self, id_: str, transformation_from_hint: dict[str, Callable[[str], str]]):
        super().__init__(id_)

        if FencedCodeTag.DEFAULT_HINT not in transformation_from_hint:
            raise MissingAttributeException(f'transformation_from_hint[{FencedCodeTag.DEFAULT_HINT!r}]')

        self._transformation_from_hint = copy.copy(transformation_from_hint)

        self.reset()

    @property
    def hints(self) -> list[str]:
        return list(self._transformation_from_hint)

    def register_transformation(self, hint: str, transformation: Callable[[str], str]):
        self._transformation_from_hint[hint] = transformation

    def select_transformation(self, hint: str) -> Callable[[str], str]:
        try:
            return self._transformation_from_hint[hint.strip()]
        except KeyError:
            return self._transformation_from_hint[FencedCodeTag.DEFAULT_HINT]

    def reset(self):
        self._state = 'new'
        self._window = ''
        self._last_index = -1
        self._hint = ''
        self._start_index = -1

    def consume(self, index: int, character: str) -> list['Action']:
        if not is_contiguous(index, self._last_index):
            self._window = ''
            self._state = 'new'
        self._last_index = index

        self._window = (self._window + character)[-len(FENCE):]

        if self._state == 'new':
            if self._window == FENCE:
                self._state = 'hint'
                self._hint = ''
                self._start_index = index + 1 - len(FENCE)
                self._window = ''

        elif self._state == 'hint':
            if character == '\n':
                self._state = 'body'
                self._window = ''
            else:
                self._hint += character

        elif self._state == 'body':
            if self._window == FENCE:
                self._state = 'new'
                self._window = ''
                return [
                    Action(
                        index=self._start_index,
                        transformation=self.select_transformation(self._hint),
                        claimed_range=(self._start_index, index + 1),
                        is_block=True,
                    ),
                ]

        return []


class LinkTag(Tag):
    """
    A tag for inline links.

    Syntax:
    ````
    [«text»](«uri»)
    ````

    One transformation action claims the whole link.
    A `]` not directly followed by `(` abandons the link,
    and the character after it is not looked at again, so `[a][b](c)` has no link.
    A link is also abandoned where a claimed run was skipped, so ``[`x`](uri)`` has no link.
    Escapes are honoured up to `](`, but «uri» simply runs to the first `)`.
    """
    _transformation: Callable[[str], str]
    _previous_character: str
    _last_index: int
    _is_escaped: bool
    _is_text_opened: bool
    _is_uri_opened: bool
    _opened_index: int

    def __init__(self, id_: str, transformation: Callable[[str], str]):
        super().__init__(id_)
        self._transformation = transformation

        self.reset()

    def reset(self):
        self._previous_character = ''
        self._last_index = -1
        self._is_escaped = False
        self._is_text_opened = False
        self._is_uri_opened = False
        self._opened_index = -1

    def consume(self, index: int, character: str) -> list['Action']:
        if not is_contiguous(index, self._last_index):
            self._previous_character = ''
            self._is_escaped = False
            self._is_text_opened = False
            self._is_uri_opened = False
        self._last_index = index

        previous_character = self._previous_character
        self._previous_character = character

        if self._is_uri_opened:
            if character == ')':
                self._is_uri_opened = False
                return [
                    Action(
                        index=self._opened_index,
                        transformation=self._transformation,
                        claimed_range=(self._opened_index, index + 1),
                    ),
                ]
            return []

        if self._is_escaped:
            self._is_escaped = False
            self._previous_character = ''
            return []

        if character == ESCAPE_CHARACTER:
            self._is_escaped = True
            return []

        if self._is_text_opened:
            if previous_character == ']':
                self._is_text_opened = False
                self._is_uri_opened = character == '('
            return []

        if character == '[':
            self._is_text_opened = True
            self._opened_index = index

        return []


class EscapeTag(Tag):
    """
    A tag for backslash escapes.

    Syntax:
    ````
    \\«punctuation»
    ````

    To be placed after every tag that honours escapes:
    by then, those tags have already declined to treat the escaped character as a trigger,
    and all that is left is to claim the backslash so that only the escaped character is emitted.
    Only ASCII punctuation can be escaped; before anything else, a backslash is literal.
    """
    ESCAPABLE_CHARACTERS = string.punctuation

    _last_index: int
    _escape_index: Optional[int]

    def __init__(self, id_: str):
        super().__init__(id_)

        self.reset()

    def reset(self):
        self._last_index = -1
        self._escape_index = None

    def consume(self, index: int, character: str) -> list['Action']:
        if not is_contiguous(index, self._last_index):
            self._escape_index = None
        self._last_index = index

        escape_index = self._escape_index
        if escape_index is not None:
            self._escape_index = None
            if character in EscapeTag.ESCAPABLE_CHARACTERS:
                return [Action(index=escape_index, claimed_range=(escape_index, escape_index + 1))]
            return []

        if character == ESCAPE_CHARACTER:
            self._escape_index = index

        return []
