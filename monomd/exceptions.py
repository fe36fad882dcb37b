"""
# Mono-Markdown: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.
"""


class MissingAttributeException(Exception):
    _missing_attribute: str

    def __init__(self, missing_attribute: str):
        super().__init__(f'error: missing mandatory attribute `{missing_attribute}`')
        self._missing_attribute = missing_attribute

    @property
    def missing_attribute(self) -> str:
        return self._missing_attribute


class TransformationException(Exception):
    """
    Raised when a transformation fails on the range captured by a tag.

    The original exception is chained as `__cause__`.
    """
    _tag_id: str
    _claimed_range: tuple[int, int]

    def __init__(self, tag_id: str, claimed_range: tuple[int, int]):
        start, end = claimed_range
        super().__init__(f'error: transformation for #{tag_id} failed on range [{start}, {end})')
        self._tag_id = tag_id
        self._claimed_range = claimed_range

    @property
    def tag_id(self) -> str:
        return self._tag_id

    @property
    def claimed_range(self) -> tuple[int, int]:
        return self._claimed_range
