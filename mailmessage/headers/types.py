"""Concrete header types."""

import logging
from datetime import datetime
from email.utils import format_datetime, parsedate_to_datetime
from typing import Optional

from mailmessage.utils.message_id import normalize_message_id
from mailmessage.utils.text import decode_encoded_words
from .base import HeaderInterface, validate_header_name, validate_header_value

logger = logging.getLogger(__name__)


class GenericHeader(HeaderInterface):
    """Header of any name holding its value as given."""

    def __init__(self, name: str, value: str):
        self._name = validate_header_name(name)
        self._value = validate_header_value(value)

    def get_name(self) -> str:
        return self._name

    def get_value(self) -> str:
        return self._value


class _NamedHeader(HeaderInterface):
    """Header whose name is fixed by its type."""

    NAME = ""

    def __init__(self, value: str):
        self._value = validate_header_value(value)

    def get_name(self) -> str:
        return self.NAME

    def get_value(self) -> str:
        return self._value

    def __repr__(self):
        return f"{type(self).__name__}({self._value!r})"


class Subject(_NamedHeader):
    """Subject header."""

    NAME = "Subject"

    @property
    def decoded(self) -> str:
        """Subject text with RFC 2047 encoded words decoded."""
        return decode_encoded_words(self._value)


class MessageId(_NamedHeader):
    """Message-ID header. Rendered on one line."""

    NAME = "Message-ID"
    foldable = False

    @property
    def normalized(self) -> str:
        """
        Message-ID in <id@domain> form.

        Returns the raw value unchanged when it cannot be normalized.
        """
        try:
            return normalize_message_id(self._value)
        except ValueError:
            logger.debug("Message-ID %r is malformed, keeping raw value", self._value)
            return self._value


class Date(_NamedHeader):
    """Date header. Rendered on one line."""

    NAME = "Date"
    foldable = False

    @classmethod
    def from_datetime(cls, moment: datetime) -> "Date":
        """Build a Date header from an aware or naive datetime."""
        return cls(format_datetime(moment))

    @property
    def as_datetime(self) -> Optional[datetime]:
        """Parsed date, or None if the value is not an RFC 5322 date."""
        try:
            return parsedate_to_datetime(self._value)
        except (TypeError, ValueError, IndexError):
            return None


class MimeVersion(_NamedHeader):
    """MIME-Version header, '1.0' unless stated otherwise."""

    NAME = "MIME-Version"

    def __init__(self, value: str = "1.0"):
        super().__init__(value)
