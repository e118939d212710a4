"""Typed model of the Atlassian Document Format (ADF).

Every recognized node type has its own dataclass; `UnknownNode` holds any other shape found in externally sourced
documents so they can still be rendered on a best-effort basis. `as_dict()` produces exactly the JSON shape accepted
by the Jira REST API and always builds new dictionaries, so a model never shares structure with its serialized form.
"""

import copy
from dataclasses import dataclass, field
import logging
import math
from typing import Any, ClassVar

from adfmark.constants import (
    ADF_VERSION,
    HEADING_MAX_LEVEL,
    HEADING_MIN_LEVEL,
    LOGGER_NAME,
    MarkType,
    NodeType,
)

logger = logging.getLogger(LOGGER_NAME)


def freeze(value: Any) -> Any:
    """Turns nested dictionaries and lists into hashable, order-independent tuples."""

    if isinstance(value, dict):
        return tuple(sorted(((str(k), freeze(v)) for k, v in value.items()), key=lambda item: item[0]))
    if isinstance(value, (list, tuple)):
        return tuple(freeze(v) for v in value)
    return value


@dataclass(frozen=True)
class Mark:
    """A formatting annotation attached to a text node."""

    type: MarkType
    attrs: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def link(cls, href: str) -> 'Mark':
        return cls(MarkType.LINK, {'href': href})

    @property
    def href(self) -> str | None:
        href = self.attrs.get('href')
        return href if isinstance(href, str) else None

    def key(self) -> tuple:
        """Identity used to compare marks: the type and the recursively compared attributes."""
        return self.type.value, freeze(self.attrs)

    # attrs is a dict, so the generated field hash cannot be used
    def __hash__(self) -> int:
        return hash(self.key())

    def as_dict(self) -> dict:
        mark: dict[str, Any] = {'type': self.type.value}
        if self.attrs:
            mark['attrs'] = copy.deepcopy(self.attrs)
        return mark

    @classmethod
    def from_dict(cls, data: Any) -> 'Mark | None':
        if not isinstance(data, dict):
            return None

        try:
            mark_type = MarkType(data.get('type'))
        except ValueError:
            logger.debug(f'Ignoring unsupported ADF mark: {data.get("type")}')
            return None

        attrs = data.get('attrs')
        attrs = copy.deepcopy(attrs) if isinstance(attrs, dict) else {}

        if mark_type == MarkType.LINK and not isinstance(attrs.get('href'), str):
            return None

        return cls(mark_type, attrs if mark_type == MarkType.LINK else {})


@dataclass
class Node:
    """Base class of every ADF node."""

    def as_dict(self) -> dict:
        raise NotImplementedError


@dataclass
class Text(Node):
    text: str
    marks: tuple[Mark, ...] = ()

    def as_dict(self) -> dict:
        node: dict[str, Any] = {'type': NodeType.TEXT.value, 'text': self.text}
        if self.marks:
            node['marks'] = [mark.as_dict() for mark in self.marks]
        return node


@dataclass
class HardBreak(Node):
    def as_dict(self) -> dict:
        return {'type': NodeType.HARD_BREAK.value}


@dataclass
class ContainerNode(Node):
    """A node whose only payload is an ordered list of children."""

    node_type: ClassVar[NodeType]

    content: list[Node] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {
            'type': self.node_type.value,
            'content': [child.as_dict() for child in self.content],
        }


@dataclass
class Paragraph(ContainerNode):
    node_type = NodeType.PARAGRAPH


@dataclass
class Heading(ContainerNode):
    node_type = NodeType.HEADING

    level: int = HEADING_MIN_LEVEL

    def as_dict(self) -> dict:
        node = super().as_dict()
        node['attrs'] = {'level': self.level}
        return node


@dataclass
class CodeBlock(Node):
    """A fenced code block. Its content is a single run of unmarked text."""

    text: str = ''
    language: str | None = None

    def as_dict(self) -> dict:
        node: dict[str, Any] = {
            'type': NodeType.CODE_BLOCK.value,
            'content': [{'type': NodeType.TEXT.value, 'text': self.text}] if self.text else [],
        }
        if self.language:
            node['attrs'] = {'language': self.language}
        return node


@dataclass
class BulletList(ContainerNode):
    node_type = NodeType.BULLET_LIST


@dataclass
class OrderedList(ContainerNode):
    node_type = NodeType.ORDERED_LIST


@dataclass
class ListItem(ContainerNode):
    node_type = NodeType.LIST_ITEM


@dataclass
class Blockquote(ContainerNode):
    node_type = NodeType.BLOCKQUOTE


@dataclass
class UnknownNode(Node):
    """A node of a type the converter does not understand, kept as it was received."""

    type: str
    content: list[Node] = field(default_factory=list)
    attrs: dict[str, Any] = field(default_factory=dict)
    raw: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict:
        return copy.deepcopy(self.raw)


@dataclass
class Document:
    content: list[Node] = field(default_factory=list)
    version: int = ADF_VERSION

    def as_dict(self) -> dict:
        return {
            'type': NodeType.DOC.value,
            'version': self.version,
            'content': [node.as_dict() for node in self.content],
        }

    @classmethod
    def from_dict(cls, data: Any) -> 'Document':
        """Builds a document from an externally sourced value without ever failing.

        Anything that is not a dictionary, or has no list of children, becomes an empty document.
        """

        if not isinstance(data, dict):
            return cls()

        version = data.get('version')
        return cls(
            content=content_from_dict(data.get('content')),
            version=version if isinstance(version, int) and not isinstance(version, bool) else ADF_VERSION,
        )


def heading_level(value: Any) -> int:
    """Reads a heading level encoded either as an integer or as a float.

    Missing or wrongly typed values fall back to level 1; out of range values are clamped.
    """

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return HEADING_MIN_LEVEL
    if isinstance(value, float) and not math.isfinite(value):
        return HEADING_MIN_LEVEL
    return max(HEADING_MIN_LEVEL, min(HEADING_MAX_LEVEL, int(value)))


def content_from_dict(value: Any) -> list[Node]:
    if not isinstance(value, list):
        return []

    content = []
    for item in value:
        node = node_from_dict(item)
        if node is not None:
            content.append(node)
    return content


def node_from_dict(data: Any) -> Node | None:
    """Builds the typed node for one ADF dictionary. Returns None for values that are not nodes at all."""

    if not isinstance(data, dict):
        return None

    attrs = data.get('attrs')
    if not isinstance(attrs, dict):
        attrs = {}

    node_type = data.get('type')
    content = content_from_dict(data.get('content'))

    match node_type:
        case NodeType.TEXT.value:
            text = data.get('text')
            marks = data.get('marks')
            parsed_marks = [Mark.from_dict(mark) for mark in marks] if isinstance(marks, list) else []
            return Text(
                text=text if isinstance(text, str) else '',
                marks=tuple(mark for mark in parsed_marks if mark is not None),
            )
        case NodeType.HARD_BREAK.value:
            return HardBreak()
        case NodeType.PARAGRAPH.value:
            return Paragraph(content=content)
        case NodeType.HEADING.value:
            return Heading(content=content, level=heading_level(attrs.get('level')))
        case NodeType.CODE_BLOCK.value:
            language = attrs.get('language')
            return CodeBlock(
                text=''.join(child.text for child in content if isinstance(child, Text)),
                language=language if isinstance(language, str) and language else None,
            )
        case NodeType.BULLET_LIST.value:
            return BulletList(content=content)
        case NodeType.ORDERED_LIST.value:
            return OrderedList(content=content)
        case NodeType.LIST_ITEM.value:
            return ListItem(content=content)
        case NodeType.BLOCKQUOTE.value:
            return Blockquote(content=content)
        case _:
            return UnknownNode(
                type=str(node_type) if node_type is not None else '',
                content=content,
                attrs=copy.deepcopy(attrs),
                raw=copy.deepcopy(data),
            )
