"""
# Mono-Markdown: __init__.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Mono-Markdown: a small Markdown dialect converted to HTML by a character-level tag scanner.
"""
