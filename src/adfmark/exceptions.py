from typing import Any


class AdfmarkException(Exception):
    """General exception, whenever a specific reason can't be determined."""

    extra: dict[str, Any] = {}

    def __init__(self, *args, **kwargs):
        self.extra = kwargs.pop('extra', self.extra)
        super().__init__(*args)


class InvalidDocumentException(AdfmarkException):
    """A serialized value is not an ADF document."""


class ConfigurationException(AdfmarkException):
    pass
