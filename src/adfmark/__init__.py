"""Conversion between GitHub Flavored Markdown and the Atlassian Document Format (ADF)."""

from adfmark.logging_config import setup_logging
from adfmark.utils.adf_to_markdown import adf_to_markdown
from adfmark.utils.detection import is_adf_json, parse_adf_json, rich_text_to_adf
from adfmark.utils.markdown_to_adf import markdown_to_adf
from adfmark.utils.plain_text import adf_to_text, text_to_adf

encode = markdown_to_adf
decode = adf_to_markdown
encode_plain = text_to_adf
decode_plain = adf_to_text

__all__ = [
    'adf_to_markdown',
    'adf_to_text',
    'decode',
    'decode_plain',
    'encode',
    'encode_plain',
    'is_adf_json',
    'markdown_to_adf',
    'parse_adf_json',
    'rich_text_to_adf',
    'setup_logging',
    'text_to_adf',
]
