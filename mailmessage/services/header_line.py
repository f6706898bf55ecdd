"""Conversion between header instances and header line text."""

from typing import Optional

from mailmessage.headers.base import HeaderInterface, MalformedHeaderError
from mailmessage.headers.registry import HeaderRegistry, default_registry
from mailmessage.utils.text import DEFAULT_LINE_LENGTH


class HeaderLine:
    """
    One header as wire text.

    ``str(HeaderLine(header))`` renders ``Name: value`` folded to the line
    length; ``HeaderLine.from_string(line)`` parses an unfolded logical line.
    """

    def __init__(self, header: HeaderInterface, line_length: int = DEFAULT_LINE_LENGTH):
        self._header = header
        self._line_length = line_length

    def get_header(self) -> HeaderInterface:
        return self._header

    def __str__(self) -> str:
        line = f"{self._header.get_name()}: {self._header.get_value()}"
        return self._header.fold(line, self._line_length)

    @classmethod
    def from_string(cls, line: str, registry: Optional[HeaderRegistry] = None) -> "HeaderLine":
        """
        Parse one logical header line.

        Args:
            line: 'Name: value' text with continuation lines already joined
            registry: Header types to build from (default: default_registry)

        Returns:
            HeaderLine wrapping the parsed header

        Raises:
            MalformedHeaderError: If the line has no ':' or an invalid name
        """
        name, separator, value = line.partition(":")
        if not separator:
            raise MalformedHeaderError(f"Header line has no ':' delimiter: {line!r}")

        registry = registry or default_registry
        return cls(registry.create(name.strip(), value.lstrip()))
