"""
# Mono-Markdown: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

FENCE = '```'
ESCAPE_CHARACTER = '\\'

DOCUMENT_SHELL = ('<div>\n', '\n</div>')
PARAGRAPH_SHELL = ('<p class="leading-5 [&:not(:first-child)]:mt-5">', '</p>')
HEADING_SHELL_FROM_LEVEL = {
    1: (
        '<h1 class="scroll-m-20 text-center text-4xl font-extrabold tracking-tight text-balance mt-6 first:mt-0">',
        '</h1>\n',
    ),
    2: (
        '<h2 class="scroll-m-20 border-b pb-2 text-3xl font-semibold tracking-tight mt-6 first:mt-0">',
        '</h2>\n',
    ),
    3: (
        '<h3 class="scroll-m-20 text-2xl font-semibold tracking-tight mt-5 first:mt-0">',
        '</h3>\n',
    ),
    4: (
        '<h4 class="scroll-m-20 text-xl font-semibold tracking-tight mt-5 first:mt-0">',
        '</h4>\n',
    ),
}
BLOCKQUOTE_SHELL = ('<blockquote class="mt-5 border-l-2 pl-2 italic">', '</blockquote>\n')
BOLD_ITALIC_SHELL = ('<b><i>', '</i></b>')
BOLD_SHELL = ('<b>', '</b>')
ITALIC_SHELL = ('<i>', '</i>')
INLINE_CODE_SHELL = (
    '<code class="bg-muted relative rounded px-[0.3rem] py-[0.2rem] font-mono text-sm font-semibold">',
    '</code>',
)
CODE_BLOCK_SHELL = (
    '<div class="bg-muted relative rounded mt-5 first:mt-0"><pre class="font-mono text-sm p-[0.5rem]"><code>',
    '</code></pre></div>',
)
LINK_CLASS = 'font-medium text-primary underline underline-offset-4'
