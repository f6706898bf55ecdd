"""Header types and the header registry."""

from .base import HeaderError, HeaderInterface, MalformedHeaderError
from .registry import HeaderRegistry, default_registry
from .types import Date, GenericHeader, MessageId, MimeVersion, Subject

__all__ = [
    "HeaderError",
    "HeaderInterface",
    "MalformedHeaderError",
    "HeaderRegistry",
    "default_registry",
    "Date",
    "GenericHeader",
    "MessageId",
    "MimeVersion",
    "Subject",
]
