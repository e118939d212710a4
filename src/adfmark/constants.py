from enum import Enum

LOGGER_NAME = 'adfmark'
"""Application logger name identifier."""

CONFIG_FILE_FILE_NAME = 'config.yaml'
"""Default configuration file name."""

CONFIG_FILE_ENV_VAR = 'ADFMARK_CONFIG_FILE'
"""Environment variable holding an explicit path to the configuration file."""

ADF_VERSION = 1
"""The ADF format version sent to and returned by the Jira REST API."""

MARKDOWN_PARSER_PRESET = 'gfm-like'
"""The markdown-it-py preset used to tokenize GitHub Flavored Markdown."""

HEADING_MIN_LEVEL = 1
"""Smallest heading level accepted by ADF."""

HEADING_MAX_LEVEL = 6
"""Largest heading level accepted by ADF."""

UNSUPPORTED_MARKDOWN_WARNING = 'Unsupported markdown element: {name}'
"""Warning emitted once per markdown block type that has no ADF counterpart."""

UNSUPPORTED_ADF_WARNING = 'Unsupported ADF node: {name}'
"""Warning emitted once per ADF node type rendered through the fallback."""

MARKDOWN_BLOCK_TYPE_NAMES = {
    'hr': 'thematic break',
    'html_block': 'html block',
    'code_block': 'indented code block',
}
"""Human-readable names of markdown-it block types, used in warnings. Other types have `_` replaced by spaces."""


class NodeType(Enum):
    """ADF node types understood by the converter."""

    DOC = 'doc'
    PARAGRAPH = 'paragraph'
    HEADING = 'heading'
    CODE_BLOCK = 'codeBlock'
    BULLET_LIST = 'bulletList'
    ORDERED_LIST = 'orderedList'
    LIST_ITEM = 'listItem'
    BLOCKQUOTE = 'blockquote'
    TEXT = 'text'
    HARD_BREAK = 'hardBreak'


class MarkType(Enum):
    """ADF text marks understood by the converter."""

    STRONG = 'strong'
    EM = 'em'
    CODE = 'code'
    LINK = 'link'
