"""
# Mono-Markdown: catalog.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

The standard catalog of tags.

Order is precedence: each tag sees only the characters left unclaimed by the tags before it.
"""

from typing import Callable, Optional

from monomd.bases import Tag
from monomd.constants import (
    BLOCKQUOTE_SHELL,
    BOLD_ITALIC_SHELL,
    BOLD_SHELL,
    HEADING_SHELL_FROM_LEVEL,
    ITALIC_SHELL,
)
from monomd.tags import EscapeTag, FencedCodeTag, GenericPairedTag, LinkTag
from monomd.transformations import (
    build_code_block_transformation,
    build_inline_code_transformation,
    build_link_transformation,
)

HEADING_LEVELS = (4, 3, 2, 1)


def build_heading_tag(level: int) -> 'GenericPairedTag':
    return GenericPairedTag(
        f'heading-{level}',
        triggers=['#' * level + ' '],
        closing_triggers=['\n'],
        on_newline=True,
        insertion=HEADING_SHELL_FROM_LEVEL[level],
    )


def build_standard_tags(
    code_transformation_from_hint: Optional[dict[str, Callable[[str], str]]] = None,
) -> list['Tag']:
    """
    Build a fresh list of the standard tags.

    Tags hold scanning state, so every conversion should get its own list.
    `code_transformation_from_hint` registers extra transformations for fenced code blocks,
    keyed by hint (`default` replaces the standard one).
    """
    transformation_from_hint = {FencedCodeTag.DEFAULT_HINT: build_code_block_transformation()}
    if code_transformation_from_hint is not None:
        transformation_from_hint.update(code_transformation_from_hint)

    return [
        FencedCodeTag('fenced-code', transformation_from_hint),
        # Opaque: content escaped, not scanned for emphasis
        GenericPairedTag('inline-code', triggers=['`'], transformation=build_inline_code_transformation()),
        *[build_heading_tag(level) for level in HEADING_LEVELS],
        GenericPairedTag(
            'blockquote',
            triggers=['> '],
            closing_triggers=['\n'],
            on_newline=True,
            insertion=BLOCKQUOTE_SHELL,
        ),
        LinkTag('link', build_link_transformation()),
        GenericPairedTag('bold-italic', triggers=['***', '___'], insertion=BOLD_ITALIC_SHELL),
        GenericPairedTag('bold', triggers=['**', '__'], insertion=BOLD_SHELL),
        GenericPairedTag('italic', triggers=['*', '_'], insertion=ITALIC_SHELL),
        EscapeTag('escape'),
    ]
