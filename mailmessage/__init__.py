"""Immutable RFC 5322 message values and their wire text conversion."""

from .headers import (
    Date,
    GenericHeader,
    HeaderError,
    HeaderInterface,
    HeaderRegistry,
    MalformedHeaderError,
    MessageId,
    MimeVersion,
    Subject,
    default_registry,
)
from .models import Body, EmptyBody, Message, TextBody
from .services import HeaderLine

__all__ = [
    "Body",
    "EmptyBody",
    "TextBody",
    "Message",
    "HeaderLine",
    "HeaderError",
    "HeaderInterface",
    "HeaderRegistry",
    "MalformedHeaderError",
    "default_registry",
    "Date",
    "GenericHeader",
    "MessageId",
    "MimeVersion",
    "Subject",
]
