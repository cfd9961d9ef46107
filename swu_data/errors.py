"""
SWU Data exception hierarchy.

Every error here is fatal to a run: the pipeline never writes partial output.
"""

import pathlib
from typing import Iterable, Union


class SwuDataError(Exception):
    """Base exception for all SWU Data errors."""


class UnknownEnumValue(SwuDataError):
    """Raised when an upstream label has no matching enumeration member."""

    def __init__(self, enum_name: str, label: str):
        self.enum_name = enum_name
        self.label = label
        super().__init__(f"Unknown {enum_name}: {label!r}")


class UnknownArtFormat(SwuDataError):
    """Raised when no preferred image format is available for an artwork."""

    def __init__(self, available: Iterable[str]):
        self.available = list(available)
        super().__init__(f"Unknown art format: {self.available}")


class MissingRequiredField(SwuDataError):
    """Raised when the upstream record violates the expected schema."""

    def __init__(self, field: str, detail: str = "missing"):
        self.field = field
        self.detail = detail
        super().__init__(f"Required field {field!r}: {detail}")


class DuplicateCard(SwuDataError):
    """Raised when two normalized cards share a set code and number."""

    def __init__(self, set_code: str, number: int):
        self.set_code = set_code
        self.number = number
        super().__init__(f"Duplicate card {set_code} #{number}")


class TransportFailure(SwuDataError):
    """Raised when the upstream server answers with a non-success status."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")


class MalformedInput(SwuDataError):
    """Raised when a cards file cannot be read back as a list of cards."""

    def __init__(self, path: Union[str, pathlib.Path], detail: str):
        self.path = str(path)
        self.detail = detail
        super().__init__(f"Malformed card data in {self.path}: {detail}")
