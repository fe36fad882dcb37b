"""
# Mono-Markdown: test_catalog.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `catalog.py`.
"""

import unittest

from monomd.catalog import build_heading_tag, build_standard_tags
from monomd.tags import EscapeTag, FencedCodeTag


class TestCatalog(unittest.TestCase):
    def test_build_heading_tag(self):
        heading_tag = build_heading_tag(3)

        self.assertEqual(heading_tag.id_, 'heading-3')
        self.assertEqual(heading_tag.triggers, ['### '])
        self.assertEqual(heading_tag.closing_triggers, ['\n'])
        self.assertEqual(heading_tag.window_size, 4)

    def test_build_standard_tags(self):
        self.assertEqual(
            [tag.id_ for tag in build_standard_tags()],
            [
                'fenced-code',
                'inline-code',
                'heading-4',
                'heading-3',
                'heading-2',
                'heading-1',
                'blockquote',
                'link',
                'bold-italic',
                'bold',
                'italic',
                'escape',
            ],
        )
        self.assertIsInstance(build_standard_tags()[0], FencedCodeTag)
        self.assertIsInstance(build_standard_tags()[-1], EscapeTag)

    def test_build_standard_tags_fresh(self):
        first_tags = build_standard_tags()
        second_tags = build_standard_tags()

        for first_tag, second_tag in zip(first_tags, second_tags):
            self.assertIsNot(first_tag, second_tag)

    def test_build_standard_tags_code_transformations(self):
        fenced_code_tag = build_standard_tags({'lang': str.upper})[0]

        self.assertEqual(fenced_code_tag.hints, ['default', 'lang'])
        self.assertIs(fenced_code_tag.select_transformation('lang'), str.upper)
        self.assertEqual(build_standard_tags()[0].hints, ['default'])


if __name__ == '__main__':
    unittest.main()
