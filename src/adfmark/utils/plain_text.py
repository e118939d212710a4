import re
from typing import Any

from adfmark.models import (
    CodeBlock,
    ContainerNode,
    Document,
    HardBreak,
    Node,
    Paragraph,
    Text,
    UnknownNode,
)

PARAGRAPH_SEPARATOR = re.compile(r'\n{2,}')


def text_to_adf(text: str) -> dict:
    """Wrap plain text in an ADF document without interpreting any markdown syntax.

    A blank line starts a new paragraph and a single newline becomes a hardBreak node. Empty paragraphs, including
    the ones produced by leading or trailing blank lines, are dropped.

    Args:
        text: plain text as typed by a user

    Returns:
        ADF document structure
    """

    paragraphs: list[Node] = []

    for chunk in PARAGRAPH_SEPARATOR.split(text.replace('\r\n', '\n')):
        if not chunk:
            continue

        content: list[Node] = []
        for index, line in enumerate(chunk.split('\n')):
            if index > 0:
                content.append(HardBreak())
            if line:
                content.append(Text(line))

        paragraphs.append(Paragraph(content=content))

    return Document(content=paragraphs).as_dict()


def adf_to_text(value: Any) -> str:
    """Extract plain text from an ADF document.

    Block nodes are separated by a blank line, hardBreak nodes become a single newline and marks are ignored.

    Args:
        value: ADF document structure, or None

    Returns:
        The text of the document, or an empty string when there is nothing to extract
    """

    if not isinstance(value, dict):
        return ''
    return _content_to_text(Document.from_dict(value).content)


def _is_block(node: Node) -> bool:
    if isinstance(node, UnknownNode):
        return any(_is_block(child) for child in node.content)
    return isinstance(node, (ContainerNode, CodeBlock))


def _content_to_text(content: list[Node]) -> str:
    parts = []
    for index, node in enumerate(content):
        if index > 0 and _is_block(node):
            parts.append('\n\n')
        parts.append(_node_to_text(node))
    return ''.join(parts)


def _node_to_text(node: Node) -> str:
    match node:
        case Text():
            return node.text
        case HardBreak():
            return '\n'
        case CodeBlock():
            return node.text
        case ContainerNode() | UnknownNode():
            return _content_to_text(node.content)
        case _:
            return ''
