"""
# Mono-Markdown: test_transformations.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `transformations.py`.
"""

import unittest

from monomd.transformations import (
    build_code_block_transformation,
    build_inline_code_transformation,
    build_link_transformation,
    extract_fenced_body,
)


class TestTransformations(unittest.TestCase):
    def test_extract_fenced_body(self):
        self.assertEqual(extract_fenced_body('```py\nx\ny\n```'), 'x\ny')
        self.assertEqual(extract_fenced_body('```\n\n```'), '')
        self.assertEqual(extract_fenced_body('```\n```'), '')

    def test_build_code_block_transformation(self):
        code_block_transformation = build_code_block_transformation(('<pre>', '</pre>'))

        self.assertEqual(code_block_transformation('```html\n<a href="x">\n```'), '<pre>&lt;a href="x"&gt;</pre>')

    def test_build_inline_code_transformation(self):
        self.assertEqual(build_inline_code_transformation(('<code>', '</code>'))('`a&b`'), '<code>a&amp;b</code>')
        self.assertEqual(
            build_inline_code_transformation(('<code>', '</code>'), delimiter_length=2)('``a``'),
            '<code>a</code>',
        )

    def test_build_link_transformation(self):
        link_transformation = build_link_transformation('c')

        self.assertEqual(
            link_transformation('[text](http://x?a=1&b=2)'),
            '<a class="c" href="http://x?a=1&amp;b=2">text</a>',
        )
        self.assertEqual(link_transformation('[a](b](c)'), '<a class="c" href="b](c">a</a>')
        self.assertEqual(link_transformation('[](")'), '<a class="c" href="&quot;"></a>')

        with self.assertRaises(ValueError):
            link_transformation('text')
        with self.assertRaises(ValueError):
            link_transformation('[text)')


if __name__ == '__main__':
    unittest.main()
