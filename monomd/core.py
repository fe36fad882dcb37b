"""
# Mono-Markdown: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core conversion logic.

Conversion runs in three stages over the unmodified Markdown:
1. Tags (see `catalog.py`) are run one after the other over the whole document,
   each skipping characters claimed by those before it.
   Their actions are queued by index, transformations being resolved on the spot.
2. Paragraphs are synthesised for the text outside of block-level constructs.
3. The document is rendered in one pass, emitting queued actions before each character,
   and the character itself unless claimed.

Indices never shift, since rendering walks the original text.
Re-converting the output is not expected to give the same output.
"""

from typing import Optional

from monomd.actions import Action, ActionQueue
from monomd.bases import Tag
from monomd.catalog import build_standard_tags
from monomd.constants import DOCUMENT_SHELL, PARAGRAPH_SHELL, VERBOSE_MODE_DIVIDER_SYMBOL_COUNT
from monomd.exceptions import MissingAttributeException, TransformationException


def resolve_transformation(tag: 'Tag', action: 'Action', md: str) -> 'Action':
    """
    Replace a transformation action by an insertion of its result.
    """
    if action.claimed_range is None:
        raise MissingAttributeException('claimed_range')

    start, end = action.claimed_range
    try:
        insertion = action.transformation(md[start:end])
    except Exception as exception:
        raise TransformationException(tag.id_, action.claimed_range) from exception

    return Action(index=start, insertion=insertion, claimed_range=action.claimed_range, is_block=action.is_block)


def print_tag_actions(tag: 'Tag', queued_actions: list['Action']):
    print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' BEFORE #{tag.id_}')
    if len(queued_actions) == 0:
        print('(no actions)')
    for action in queued_actions:
        print(f'{action.index}: {action.insertion!r} claiming {action.claimed_range}')
    print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' AFTER #{tag.id_}')
    print('\n\n\n\n')


def apply_tags(tags: list['Tag'], md: str, skip: list[bool], blocks: list[bool], action_queue: 'ActionQueue',
               verbose_mode_enabled: bool = False):
    """
    Run each tag over the whole document, in order, and queue the resulting actions.

    Each tag is begun on the document (which resets it) before its pass.
    Claimed characters are marked in `skip` and are never shown to subsequent tags.
    Where a tag returns block-level actions, the span they claim between them
    (e.g. a whole heading line) is marked in `blocks`.
    """
    for tag in tags:
        tag.begin(md)
        queued_actions = []

        for index, character in enumerate(md):
            if skip[index]:
                continue

            actions = tag.consume(index, character)
            if len(actions) == 0:
                continue

            block_start = len(md)
            block_end = 0
            has_block = False

            for action in actions:
                if action.claimed_range is not None:
                    start, end = action.claimed_range
                    for claimed_index in range(start, end):
                        skip[claimed_index] = True
                    block_start = min(block_start, start)
                    block_end = max(block_end, end)

                if action.is_block:
                    has_block = True

                if action.transformation is not None:
                    action = resolve_transformation(tag, action, md)

                queued_actions.append(action_queue.append(action))

            if has_block:
                for block_index in range(block_start, block_end):
                    blocks[block_index] = True

        if verbose_mode_enabled:
            print_tag_actions(tag, queued_actions)


def apply_paragraphs(action_queue: 'ActionQueue', blocks: list[bool], md: str,
                     paragraph_shell: tuple[str, str] = PARAGRAPH_SHELL):
    """
    Wrap text outside of block-level constructs in paragraphs.

    A run of text ends at a block-level construct, at a blank line (`\\n\\n`), or at the end of the document.
    The paragraph spans the run with surrounding whitespace trimmed off;
    a run of whitespace only gets no paragraph.
    """
    opening_markup, closing_markup = paragraph_shell
    length = len(md)

    index = 0
    while index < length:
        if blocks[index]:
            index += 1
            continue

        end = index + 1
        while end < length and not blocks[end] and md[end - 1:end + 1] != '\n\n':
            end += 1

        paragraph_start = index
        while paragraph_start < end and md[paragraph_start].isspace():
            paragraph_start += 1

        if paragraph_start < end:
            paragraph_end = end
            while md[paragraph_end - 1].isspace():
                paragraph_end -= 1

            action_queue.prepend(Action(index=paragraph_start, insertion=opening_markup))
            action_queue.append(Action(index=paragraph_end, insertion=closing_markup))

        index = end


def render(md: str, action_queue: 'ActionQueue', skip: list[bool],
           document_shell: tuple[str, str] = DOCUMENT_SHELL) -> str:
    """
    Render the document, emitting the actions at each index (last discovered first)
    before the character at that index, and the character itself unless claimed.
    """
    opening_markup, closing_markup = document_shell
    pieces = [opening_markup]

    for index, character in enumerate(md):
        for action in action_queue.rendering_order_at(index):
            pieces.append(action.insertion)

        if not skip[index]:
            pieces.append(character)

    for action in action_queue.rendering_order_at(len(md)):
        pieces.append(action.insertion)

    pieces.append(closing_markup)

    return ''.join(pieces)


def md_to_html(md: str, tags: Optional[list['Tag']] = None, verbose_mode_enabled: bool = False) -> str:
    """
    Convert Mono-Markdown to HTML.

    If `tags` is not supplied, a fresh standard catalog is used;
    otherwise the supplied tags are reset before use (see `apply_tags`).
    Raises `TransformationException` if a transformation fails, in which case there is no output.
    """
    if tags is None:
        tags = build_standard_tags()

    skip = [False] * len(md)
    blocks = [False] * len(md)
    action_queue = ActionQueue(len(md))

    apply_tags(tags, md, skip, blocks, action_queue, verbose_mode_enabled)
    apply_paragraphs(action_queue, blocks, md)

    return render(md, action_queue, skip)
