import logging
from typing import Any

from adfmark.constants import LOGGER_NAME, UNSUPPORTED_ADF_WARNING
from adfmark.models import (
    Blockquote,
    BulletList,
    CodeBlock,
    ContainerNode,
    Document,
    HardBreak,
    Heading,
    ListItem,
    Node,
    OrderedList,
    Paragraph,
    Text,
    UnknownNode,
)
from adfmark.utils.marks import apply_marks

logger = logging.getLogger(LOGGER_NAME)


def adf_to_markdown(value: Any, track_warnings: bool = False) -> str | tuple[str, list[str]]:
    """Convert Atlassian Document Format (ADF) to Markdown.

    Top-level blocks are rendered independently and separated by a blank line. Nodes of unknown types are rendered
    on a best-effort basis from their content; the conversion never fails.

    Args:
        value: ADF document structure. None, non-dictionaries and documents without content give an empty string.
        track_warnings: If True, returns tuple of (markdown, warnings)

    Returns:
        Markdown string, or tuple of (markdown, warning messages) if track_warnings=True
    """

    unsupported_types: set[str] = set()
    document = Document.from_dict(value)

    parts = [part for node in document.content if (part := _render_block(node, unsupported_types))]
    markdown = '\n\n'.join(parts)

    if unsupported_types:
        logger.debug(f'Rendered unsupported ADF nodes as inline content: {sorted(unsupported_types)}')

    if track_warnings:
        warnings = [UNSUPPORTED_ADF_WARNING.format(name=name) for name in sorted(unsupported_types)]
        return markdown, warnings
    return markdown


def _render_blocks(content: list[Node], unsupported_types: set[str]) -> str:
    return '\n\n'.join(part for node in content if (part := _render_block(node, unsupported_types)))


def _render_block(node: Node, unsupported_types: set[str]) -> str:
    match node:
        case Paragraph():
            return _render_inline(node.content, unsupported_types)

        case Heading():
            return '#' * node.level + ' ' + _render_inline(node.content, unsupported_types)

        case CodeBlock():
            return f'```{node.language or ""}\n{node.text}\n```'

        case BulletList():
            return '\n'.join(
                _render_list_item(item, '- ', unsupported_types) for item in _list_items(node)
            )

        case OrderedList():
            return '\n'.join(
                _render_list_item(item, f'{position}. ', unsupported_types)
                for position, item in enumerate(_list_items(node), start=1)
            )

        case ListItem():
            return _render_list_item(node, '', unsupported_types)

        case Blockquote():
            quoted = _render_blocks(node.content, unsupported_types)
            return '\n'.join(f'> {line}' if line else '>' for line in quoted.split('\n'))

        case Text() | HardBreak():
            return _render_inline([node], unsupported_types)

        case UnknownNode():
            unsupported_types.add(node.type or 'unknown')
            if any(_is_block(child) for child in node.content):
                return _render_blocks(node.content, unsupported_types)
            return _render_inline(node.content, unsupported_types)

        case _:
            return ''


def _is_block(node: Node) -> bool:
    return isinstance(node, (ContainerNode, CodeBlock))


def _list_items(node: BulletList | OrderedList) -> list[ListItem]:
    return [item for item in node.content if isinstance(item, ListItem)]


def _render_list_item(item: ListItem, marker: str, unsupported_types: set[str]) -> str:
    """Render a list item as one line of its blocks, followed by any nested list.

    Lines after the first one are indented by the width of the marker so nested lists and line breaks stay inside
    the item.
    """

    inline_parts = []
    nested_lists = []

    for child in item.content:
        rendered = _render_block(child, unsupported_types)
        if not rendered:
            continue
        if isinstance(child, (BulletList, OrderedList)):
            nested_lists.append(rendered)
        else:
            inline_parts.append(rendered)

    lines = '\n'.join([marker + ' '.join(inline_parts), *nested_lists]).split('\n')
    indent = ' ' * len(marker)
    return '\n'.join([lines[0], *(indent + line if line else line for line in lines[1:])])


def _render_inline(content: list[Node], unsupported_types: set[str]) -> str:
    """Render inline content: text with its marks and hardBreak nodes as single newlines."""

    parts = []

    for node in content:
        match node:
            case Text():
                if node.text:
                    parts.append(apply_marks(node.text, node.marks) if node.marks else node.text)
            case HardBreak():
                parts.append('\n')
            case UnknownNode():
                unsupported_types.add(node.type or 'unknown')
                parts.append(_render_inline(node.content, unsupported_types))
            case _:
                parts.append(_render_block(node, unsupported_types))

    return ''.join(parts)
