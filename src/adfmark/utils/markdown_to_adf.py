import logging

from markdown_it.tree import SyntaxTreeNode

from adfmark.constants import (
    LOGGER_NAME,
    MARKDOWN_BLOCK_TYPE_NAMES,
    UNSUPPORTED_MARKDOWN_WARNING,
    MarkType,
)
from adfmark.models import (
    Blockquote,
    BulletList,
    CodeBlock,
    Document,
    HardBreak,
    Heading,
    ListItem,
    Mark,
    Node,
    OrderedList,
    Paragraph,
    Text,
)
from adfmark.utils.marks import consolidate_text_nodes, extend_marks
from adfmark.utils.parser import parse_markdown

logger = logging.getLogger(LOGGER_NAME)


def markdown_to_adf(markdown: str) -> tuple[dict, list[str]]:
    """Convert markdown text to ADF (Atlassian Document Format).

    Uses markdown-it-py with the GitHub Flavored Markdown (GFM) preset to parse markdown into a syntax tree, then
    converts the tree to an ADF structure. Conversion is best effort: block elements without an ADF counterpart are
    dropped and reported as warnings instead of failing the conversion.

    Args:
        markdown: Markdown or plain text string

    Returns:
        Tuple of (ADF document, warning messages). Warnings are deduplicated per element type and sorted.
    """

    if not markdown or not markdown.strip():
        return Document().as_dict(), []

    tree = parse_markdown(markdown)

    unsupported_types: set[str] = set()
    content = _convert_blocks(tree.children, unsupported_types)

    warnings = [UNSUPPORTED_MARKDOWN_WARNING.format(name=name) for name in sorted(unsupported_types)]
    return Document(content=content).as_dict(), warnings


def _block_type_name(node: SyntaxTreeNode) -> str:
    return MARKDOWN_BLOCK_TYPE_NAMES.get(node.type, node.type.replace('_', ' ').strip())


def _convert_blocks(nodes: list[SyntaxTreeNode], unsupported_types: set[str]) -> list[Node]:
    content = []
    for node in nodes:
        block = _convert_block(node, unsupported_types)
        if block is not None:
            content.append(block)
    return content


def _convert_block(node: SyntaxTreeNode, unsupported_types: set[str]) -> Node | None:
    """Convert a single block of the syntax tree. Returns None when the block produces no ADF node."""

    match node.type:
        case 'paragraph':
            paragraph_content = _convert_inline_content(node)
            return Paragraph(content=paragraph_content) if paragraph_content else None

        case 'heading':
            heading_content = _convert_inline_content(node)
            if not heading_content:
                return None
            return Heading(content=heading_content, level=int(node.tag[1]))

        case 'fence':
            code = node.content
            if code.endswith('\n'):
                code = code[:-1]
            info = node.info.strip()
            return CodeBlock(text=code, language=info.split()[0] if info else None)

        case 'bullet_list' | 'ordered_list':
            items = [
                ListItem(content=_convert_blocks(child.children, unsupported_types))
                for child in node.children
                if child.type == 'list_item'
            ]
            if node.type == 'ordered_list':
                return OrderedList(content=items)
            return BulletList(content=items)

        case 'blockquote':
            return Blockquote(content=_convert_blocks(node.children, unsupported_types))

        case _:
            type_name = _block_type_name(node)
            if type_name not in unsupported_types:
                logger.debug(f'Skipping unsupported markdown element: {type_name}')
                unsupported_types.add(type_name)
            return None


def _convert_inline_content(node: SyntaxTreeNode) -> list[Node]:
    """Convert the inline children of a paragraph or heading to consolidated ADF text and hardBreak nodes."""

    content: list[Node] = []
    for child in node.children:
        content.extend(_convert_inline(child, ()))
    return consolidate_text_nodes(content)


def _convert_inline_children(node: SyntaxTreeNode, marks: tuple[Mark, ...]) -> list[Node]:
    content: list[Node] = []
    for child in node.children:
        content.extend(_convert_inline(child, marks))
    return content


def _convert_inline(node: SyntaxTreeNode, marks: tuple[Mark, ...]) -> list[Node]:
    """Convert one inline node of the syntax tree.

    Args:
        node: inline node
        marks: marks of the enclosing inline nodes, outermost first. Never mutated; nested calls receive an
            extended copy.

    Returns:
        List of ADF inline nodes
    """

    match node.type:
        case 'text' | 'text_special':
            return [Text(text=node.content, marks=marks)] if node.content else []

        case 'softbreak' | 'hardbreak':
            return [HardBreak()]

        case 'em':
            return _convert_inline_children(node, extend_marks(marks, Mark(MarkType.EM)))

        case 'strong':
            return _convert_inline_children(node, extend_marks(marks, Mark(MarkType.STRONG)))

        case 'code_inline':
            if not node.content:
                return []
            return [Text(text=node.content, marks=extend_marks(marks, Mark(MarkType.CODE)))]

        case 'link':
            href = node.attrs.get('href', '')
            return _convert_inline_children(node, extend_marks(marks, Mark.link(str(href))))

        case _:
            return _convert_inline_children(node, marks)
