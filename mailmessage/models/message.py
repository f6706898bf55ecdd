"""Immutable email message value."""

import logging
from types import MappingProxyType
from typing import Mapping, Optional

from mailmessage.headers.base import HeaderInterface
from mailmessage.headers.registry import HeaderRegistry
from mailmessage.headers.types import MimeVersion
from mailmessage.services.header_line import HeaderLine
from mailmessage.utils.text import CRLF, DEFAULT_LINE_LENGTH
from .body import Body, EmptyBody, TextBody

logger = logging.getLogger(__name__)

# Serialization visits header names in this order, then any names added later.
WELL_KNOWN_HEADERS = (
    "return-path",
    "received",
    "dkim-signature",
    "domainkey-signature",
    "sender",
    "message-id",
    "date",
    "subject",
    "from",
    "reply-to",
    "to",
    "cc",
    "bcc",
    "mime-version",
    "content-type",
    "content-transfer-encoding",
)


class Message:
    """
    RFC 5322 message: ordered headers plus a body.

    Messages are immutable. Every ``with*`` method returns a new Message
    and leaves the original untouched. Header names are matched
    case-insensitively and stored lower-cased.

    Attributes are exposed through accessors only:
        get_headers(): read-only mapping of name -> tuple of headers
        get_body(): the Body
    """

    def __init__(self):
        headers: dict[str, tuple[HeaderInterface, ...]] = {name: () for name in WELL_KNOWN_HEADERS}
        headers["mime-version"] = (MimeVersion(),)
        self._headers = headers
        self._body: Body = EmptyBody()

    @classmethod
    def _blank(cls) -> "Message":
        # well-known names in order, none filled
        return cls()._copy(headers={name: () for name in WELL_KNOWN_HEADERS})

    def _copy(self, headers: Optional[dict] = None, body: Optional[Body] = None) -> "Message":
        clone = type(self).__new__(type(self))
        clone._headers = dict(self._headers) if headers is None else headers
        clone._body = self._body if body is None else body
        return clone

    def get_headers(self) -> Mapping[str, tuple[HeaderInterface, ...]]:
        return MappingProxyType(self._headers)

    def has_header(self, name: str) -> bool:
        return bool(self._headers.get(name.lower()))

    def get_header(self, name: str) -> list[HeaderInterface]:
        """Headers stored under name, in order; [] if there are none."""
        return list(self._headers.get(name.lower(), ()))

    def with_header(self, header: HeaderInterface) -> "Message":
        """Return a copy where header replaces all headers of its name."""
        headers = dict(self._headers)
        headers[header.get_name().lower()] = (header,)
        return self._copy(headers=headers)

    def with_added_header(self, header: HeaderInterface) -> "Message":
        """Return a copy with header appended after existing headers of its name."""
        name = header.get_name().lower()
        headers = dict(self._headers)
        headers[name] = headers.get(name, ()) + (header,)
        return self._copy(headers=headers)

    def without_header(self, name: str) -> "Message":
        """Return a copy with every header of name removed, key included."""
        headers = dict(self._headers)
        headers.pop(name.lower(), None)
        return self._copy(headers=headers)

    def with_body(self, body: Body) -> "Message":
        return self._copy(body=body)

    def get_body(self) -> Body:
        return self._body

    def to_string(self, line_length: int = DEFAULT_LINE_LENGTH) -> str:
        """
        Serialize to wire text.

        Args:
            line_length: Preferred maximum length of a physical header line

        Returns:
            Header lines, an empty line, then the body, joined with CRLF
        """
        blocks = [
            CRLF.join(str(HeaderLine(header, line_length)) for header in headers)
            for headers in self._headers.values()
            if headers
        ]
        return CRLF.join(blocks + ["", self._body.to_string()])

    def __str__(self) -> str:
        return self.to_string()

    def __eq__(self, other):
        if not isinstance(other, Message):
            return NotImplemented
        return self._filled_headers() == other._filled_headers() and self._body == other._body

    __hash__ = None

    def __repr__(self):
        names = ", ".join(self._filled_headers())
        return f"Message(headers=[{names}], body={self._body!r})"

    def _filled_headers(self) -> dict[str, tuple[HeaderInterface, ...]]:
        return {name: headers for name, headers in self._headers.items() if headers}

    @classmethod
    def from_string(cls, text: str, registry: Optional[HeaderRegistry] = None) -> "Message":
        """
        Parse wire text into a Message.

        Only CRLF ends a line. Lines starting with a space continue the
        previous header line and are joined to it as-is. The first empty
        line ends the headers; everything after it is the body. Text with
        no empty line is all headers and yields an empty body. Only headers
        present in the text are kept; the default MIME-Version is not added.

        Args:
            text: Raw message text
            registry: Header types to build from (default: default_registry)

        Returns:
            Parsed Message

        Raises:
            MalformedHeaderError: If a header line cannot be parsed
        """
        message = cls._blank()
        lines = text.split(CRLF)
        index = 0
        count = len(lines)

        while index < count:
            line = lines[index]

            if line == "":
                logger.debug("Header section ends at line %d", index + 1)
                return message.with_body(TextBody(CRLF.join(lines[index + 1 :])))

            while index + 1 < count and lines[index + 1].startswith(" "):
                index += 1
                line += lines[index]

            message = message.with_added_header(HeaderLine.from_string(line, registry).get_header())
            index += 1

        logger.debug("Message text has no body separator, parsed headers only")
        return message

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        encoding: str = "utf-8",
        registry: Optional[HeaderRegistry] = None,
    ) -> "Message":
        """Decode data with encoding and parse it with from_string."""
        return cls.from_string(data.decode(encoding), registry)
