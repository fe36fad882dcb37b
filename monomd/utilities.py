"""
# Mono-Markdown: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""

import re


def escape_html(string: str) -> str:
    """
    Escape a string for use as HTML text content.

    Only `&`, `<`, and `>` are escaped; quotes are left alone.
    """
    string = re.sub(pattern='&', repl='&amp;', string=string)
    string = re.sub(pattern='<', repl='&lt;', string=string)
    string = re.sub(pattern='>', repl='&gt;', string=string)

    return string


def escape_attribute_value_html(value: str) -> str:
    """
    Escape an attribute value that will be delimited by double quotes.

    Ampersands already starting a character reference are left alone. For speed:
    - Entity names are any run of up to 31 letters
      (the longest, `CounterClockwiseContourIntegral`, has 31).
    - Decimal code points are any run of up to 7 digits.
    - Hexadecimal code points are any run of up to 6 digits.
    """
    value = re.sub(
        pattern='''
            [&]
            (?!
                (?:
                    [a-zA-Z]{1,31}
                        |
                    [#] (?: [0-9]{1,7} | [xX] [0-9a-fA-F]{1,6} )
                )
                [;]
            )
        ''',
        repl='&amp;',
        string=value,
        flags=re.VERBOSE,
    )
    value = re.sub(pattern='<', repl='&lt;', string=value)
    value = re.sub(pattern='>', repl='&gt;', string=value)
    value = re.sub(pattern='"', repl='&quot;', string=value)

    return value


def is_contiguous(index: int, last_index: int) -> bool:
    """
    Whether `index` directly follows `last_index`.

    Tags are not shown characters already claimed by an earlier tag,
    so a tag sees a jump in index wherever such a claimed run was skipped.
    """
    return index == last_index + 1
