"""
# Mono-Markdown: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import os
import re
import sys

from monomd._version import __version__
from monomd.constants import COMMAND_LINE_ERROR_EXIT_CODE, GENERIC_ERROR_EXIT_CODE
from monomd.core import md_to_html
from monomd.exceptions import TransformationException

DESCRIPTION = '''
    Convert Mono-Markdown to HTML.
'''
MD_FILE_NAME_HELP = '''
    name of Markdown file to be converted
    (can be abbreviated as `file` or `file.` for increased productivity)
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints the actions queued by every tag)
'''


def extract_md_name(md_file_name_argument: str) -> str:
    """
    Extract name-without-extension from a Markdown file name argument.

    Here, Markdown file name argument may be of the form `«md_name».md`, `«md_name».`, or `«md_name»`.
    The path is normalised by resolving `./` and `../`.
    """
    md_file_name_argument = os.path.normpath(md_file_name_argument)
    md_name = re.sub(pattern=r'[.](md)? \Z', repl='', string=md_file_name_argument, flags=re.VERBOSE)

    return md_name


def parse_command_line_arguments() -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(description=DESCRIPTION)
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        'md_file_name_arguments',
        default=[],
        help=MD_FILE_NAME_HELP,
        metavar='file.md',
        nargs='*',
    )

    return argument_parser.parse_args()


def generate_html_file(md_file_name_argument: str, verbose_mode_enabled: bool):
    md_name = extract_md_name(md_file_name_argument)
    md_file_name = f'{md_name}.md'
    try:
        with open(md_file_name, 'r', encoding='utf-8') as md_file:
            md = md_file.read()
    except FileNotFoundError:
        print(f'error: argument `{md_file_name_argument}`: file `{md_file_name}` not found', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

    try:
        html = md_to_html(md, verbose_mode_enabled=verbose_mode_enabled)
    except TransformationException as transformation_exception:
        print(f'{transformation_exception} in `{md_file_name}`: {transformation_exception.__cause__}',
              file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)

    html_file_name = f'{md_name}.html'
    try:
        with open(html_file_name, 'w', encoding='utf-8') as html_file:
            html_file.write(html)
        print(f'success: wrote to `{html_file_name}`')
    except IOError:
        print(f'error: cannot write to `{html_file_name}`', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)


def main():
    parsed_arguments = parse_command_line_arguments()
    md_file_name_arguments = parsed_arguments.md_file_name_arguments
    verbose_mode_enabled = parsed_arguments.verbose_mode_enabled

    for md_file_name_argument in md_file_name_arguments:
        generate_html_file(md_file_name_argument, verbose_mode_enabled)


if __name__ == '__main__':
    main()
