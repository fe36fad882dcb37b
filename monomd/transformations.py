"""
# Mono-Markdown: transformations.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Transformations, the sub-renderers applied to ranges captured by tags.

A transformation takes the exact captured text (delimiters included) and returns HTML.
It may raise; the failure then aborts the whole conversion.
"""

from typing import Callable

from monomd.constants import CODE_BLOCK_SHELL, INLINE_CODE_SHELL, LINK_CLASS
from monomd.utilities import escape_attribute_value_html, escape_html


def extract_fenced_body(captured: str) -> str:
    """
    Extract the body of a fenced code block.

    The body is everything between the first and the last line break,
    which drops the opening fence with its hint and the closing fence.
    """
    first_line_break_index = captured.find('\n')
    last_line_break_index = captured.rfind('\n')
    if first_line_break_index == last_line_break_index:
        return ''

    return captured[first_line_break_index + 1:last_line_break_index]


def build_code_block_transformation(shell: tuple[str, str] = CODE_BLOCK_SHELL) -> Callable[[str], str]:
    opening_markup, closing_markup = shell

    def transformation(captured: str) -> str:
        body = extract_fenced_body(captured)
        return f'{opening_markup}{escape_html(body)}{closing_markup}'

    return transformation


def build_inline_code_transformation(shell: tuple[str, str] = INLINE_CODE_SHELL,
                                     delimiter_length: int = 1) -> Callable[[str], str]:
    """
    Build the transformation for inline code.

    Inline code is opaque rather than a plain wrapper pair:
    its content is HTML-escaped and never reaches later tags, so `` `*a*` `` keeps its asterisks.
    """
    opening_markup, closing_markup = shell

    def transformation(captured: str) -> str:
        content = captured[delimiter_length:len(captured) - delimiter_length]
        return f'{opening_markup}{escape_html(content)}{closing_markup}'

    return transformation


def build_link_transformation(link_class: str = LINK_CLASS) -> Callable[[str], str]:
    """
    Build the transformation for `[«text»](«uri»)`.

    The captured text is split on the first `](`;
    «text» is emitted as is, «uri» is escaped for the `href` attribute.
    """
    def transformation(captured: str) -> str:
        if not (captured.startswith('[') and captured.endswith(')')):
            raise ValueError(f'error: malformed link `{captured}`')

        text, separator, uri = captured[1:-1].partition('](')
        if separator == '':
            raise ValueError(f'error: malformed link `{captured}` (missing `](`)')

        href = escape_attribute_value_html(uri)

        return f'<a class="{link_class}" href="{href}">{text}</a>'

    return transformation
