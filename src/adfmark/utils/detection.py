"""Detection of rich text fields that already hold a serialized ADF document.

Content converted upstream is passed around as a JSON string. Such strings must reach the API unchanged instead of
being converted a second time as if they were text typed by a user.
"""

import json
import logging

from adfmark.constants import LOGGER_NAME, NodeType
from adfmark.exceptions import InvalidDocumentException
from adfmark.utils.markdown_to_adf import markdown_to_adf
from adfmark.utils.plain_text import text_to_adf

logger = logging.getLogger(LOGGER_NAME)


def parse_adf_json(value: str) -> dict:
    """Parse a serialized ADF document.

    Args:
        value: JSON string

    Returns:
        The parsed document

    Raises:
        InvalidDocumentException: if the string is not JSON or does not hold an ADF document
    """

    try:
        document = json.loads(value)
    except (TypeError, ValueError) as e:
        raise InvalidDocumentException('The value is not valid JSON.', extra={'error': str(e)}) from e

    if not isinstance(document, dict) or document.get('type') != NodeType.DOC.value:
        raise InvalidDocumentException('The value is not an ADF document.')

    if not isinstance(document.get('content'), list):
        raise InvalidDocumentException(
            'The ADF document has no content list.', extra={'content': document.get('content')}
        )

    return document


def is_adf_json(value: str) -> bool:
    if not value.lstrip().startswith('{'):
        return False
    try:
        parse_adf_json(value)
    except InvalidDocumentException:
        return False
    return True


def rich_text_to_adf(value: str, markdown: bool = True) -> tuple[dict, list[str]]:
    """Prepare the value of a rich text field for the API.

    Args:
        value: a serialized ADF document, or text entered by a user
        markdown: if True the text is interpreted as markdown, otherwise as plain text

    Returns:
        Tuple of (ADF document, warning messages)
    """

    if value.lstrip().startswith('{'):
        try:
            document = parse_adf_json(value)
        except InvalidDocumentException as e:
            logger.debug(f'Rich text value is not a serialized ADF document: {e}')
        else:
            logger.debug('Rich text value is already a serialized ADF document')
            return document, []

    if markdown:
        return markdown_to_adf(value)
    return text_to_adf(value), []
