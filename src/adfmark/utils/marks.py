"""Inline mark algebra shared by the encoder and the decoder."""

from collections import Counter
import re

from adfmark.constants import MarkType
from adfmark.models import Mark, Node, Text

BACKTICK_RUN = re.compile(r'`+')


def extend_marks(marks: tuple[Mark, ...], mark: Mark) -> tuple[Mark, ...]:
    """Returns a new mark stack with `mark` applied last. The given stack is left untouched."""
    return (*marks, mark)


def marks_equal(a: tuple[Mark, ...] | list[Mark], b: tuple[Mark, ...] | list[Mark]) -> bool:
    """Two mark lists are equal when they hold the same marks, whatever the order they are stored in."""

    if len(a) != len(b):
        return False
    return Counter(mark.key() for mark in a) == Counter(mark.key() for mark in b)


def consolidate_text_nodes(nodes: list[Node]) -> list[Node]:
    """Merges adjacent text nodes that carry equal marks, in a single left to right pass.

    Args:
        nodes: inline nodes produced for one block

    Returns:
        A new list; the nodes passed in are not modified.
    """

    result: list[Node] = []

    for node in nodes:
        previous = result[-1] if result else None
        if (
            isinstance(node, Text)
            and isinstance(previous, Text)
            and marks_equal(previous.marks, node.marks)
        ):
            result[-1] = Text(text=previous.text + node.text, marks=previous.marks)
        else:
            result.append(node)

    return result


def apply_marks(text: str, marks: tuple[Mark, ...] | list[Mark]) -> str:
    """Wraps text with the markdown syntax of its marks.

    The wrapping order does not depend on the order the marks are stored in: inline code is innermost, then
    emphasis, then strong emphasis, and a link wraps everything. Emphasis together with strong emphasis is written
    as a single `***` wrap.
    """

    mark_types = {mark.type for mark in marks}
    href = next((mark.href for mark in marks if mark.type == MarkType.LINK and mark.href is not None), None)

    result = text

    if MarkType.CODE in mark_types:
        result = code_span(result)

    if MarkType.EM in mark_types and MarkType.STRONG in mark_types:
        result = f'***{result}***'
    elif MarkType.EM in mark_types:
        result = f'*{result}*'
    elif MarkType.STRONG in mark_types:
        result = f'**{result}**'

    if href is not None:
        result = f'[{result}]({href})'

    return result


def code_span(text: str) -> str:
    """Wraps text in an inline code span that reads back as exactly the same text.

    The fence is one backtick longer than the longest backtick run inside the text. Text that starts or ends with a
    backtick, or is surrounded by spaces, is padded with one space on each side, which the parser strips again.
    """

    longest_run = max((len(run) for run in BACKTICK_RUN.findall(text)), default=0)
    fence = '`' * (longest_run + 1)

    if text.startswith('`') or text.endswith('`') or (text.startswith(' ') and text.endswith(' ') and text.strip(' ')):
        text = f' {text} '

    return f'{fence}{text}{fence}'
