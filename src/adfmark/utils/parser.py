"""Markdown parsing using markdown-it-py.

The parser uses the GitHub Flavored Markdown preset of markdown-it-py: CommonMark plus tables, strikethrough,
raw HTML and autolinking of URLs that carry a scheme.
"""

import threading

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from adfmark.constants import MARKDOWN_PARSER_PRESET


def create_parser() -> MarkdownIt:
    """Create a configured markdown-it parser."""
    md = MarkdownIt(MARKDOWN_PARSER_PRESET)
    # NOTE: only autolink URLs with an explicit scheme; words such as `setup.py` must stay plain text.
    md.linkify.set({'fuzzy_link': False, 'fuzzy_email': False})
    return md


# One parser per thread: the linkify matcher caches the text it scanned last.
_local = threading.local()


def get_parser() -> MarkdownIt:
    """Get or create the parser instance of the current thread."""
    parser = getattr(_local, 'parser', None)
    if parser is None:
        parser = _local.parser = create_parser()
    return parser


def parse_markdown(text: str) -> SyntaxTreeNode:
    """Parse markdown text into a syntax tree.

    Args:
        text: Markdown text to parse

    Returns:
        Root SyntaxTreeNode of the tree
    """
    tokens = get_parser().parse(text)
    return SyntaxTreeNode(tokens)
