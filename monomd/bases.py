"""
# Mono-Markdown: bases.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Base class for tags.
"""

import abc

from monomd.actions import Action


class Tag(abc.ABC):
    """
    Interface for a tag, the scanner recognising one markup construct.

    A tag is fed the document one character at a time, in ascending index order,
    with characters already claimed by earlier tags left out entirely.
    `consume(index, character)` returns the actions for a construct completed by that character
    (usually none).

    Tags hold scanning state, so `begin(md)` (or at least `reset()`)
    must be called before a tag sees a new document.
    """
    _id: str

    def __init__(self, id_: str):
        self._id = id_

    @property
    def id_(self) -> str:
        return self._id

    def begin(self, md: str):
        """
        Prepare for a pass over a document, forgetting all scanning state.

        Tags needing to look at the document itself (e.g. across skipped characters) keep it here.
        """
        self.reset()

    @abc.abstractmethod
    def reset(self):
        """
        Forget all scanning state.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def consume(self, index: int, character: str) -> list['Action']:
        """
        Consume the character at an index, returning the actions for any completed construct.
        """
        raise NotImplementedError
