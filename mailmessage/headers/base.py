"""Header interface and header errors."""

from abc import ABC, abstractmethod

from mailmessage.utils.text import DEFAULT_LINE_LENGTH, fold_header_line


class HeaderError(Exception):
    """Base exception for header errors."""

    pass


class MalformedHeaderError(HeaderError):
    """Raised when header text cannot be split into a valid name and value."""

    pass


def validate_header_name(name: str) -> str:
    """
    Check that name is a usable header field name.

    Field names are printable US-ASCII without spaces or ':'.

    Raises:
        MalformedHeaderError: If the name is empty or has illegal characters
    """
    if not name:
        raise MalformedHeaderError("Header name is empty")

    for char in name:
        if char == ":" or not 33 <= ord(char) <= 126:
            raise MalformedHeaderError(f"Invalid character {char!r} in header name {name!r}")

    return name


def validate_header_value(value: str) -> str:
    """
    Check a header value and drop its leading whitespace.

    Parsing removes whitespace after the ':', so values are stored without
    it and render back to the same text.

    Raises:
        MalformedHeaderError: If the value contains CR or LF
    """
    if "\r" in value or "\n" in value:
        raise MalformedHeaderError(f"Header value contains a line break: {value!r}")

    return value.lstrip(" \t")


class HeaderInterface(ABC):
    """
    One header occurrence: a name plus its value.

    Concrete header types decide how their value is stored and where a
    rendered line may be folded. Two headers are equal when their names
    match case-insensitively and their values match exactly.
    """

    foldable = True

    @abstractmethod
    def get_name(self) -> str:
        """Header name as it appears on the wire, e.g. 'Subject'."""
        pass

    @abstractmethod
    def get_value(self) -> str:
        """Raw header value, without the name and the ': ' separator."""
        pass

    def fold(self, line: str, line_length: int = DEFAULT_LINE_LENGTH) -> str:
        """
        Fold a rendered line of this header.

        Args:
            line: Unfolded 'Name: value' text
            line_length: Preferred maximum physical line length

        Returns:
            The line with CRLF + space continuations where needed
        """
        if not self.foldable:
            return line
        return fold_header_line(line, line_length)

    def __eq__(self, other):
        if not isinstance(other, HeaderInterface):
            return NotImplemented
        return (self.get_name().lower(), self.get_value()) == (
            other.get_name().lower(),
            other.get_value(),
        )

    def __hash__(self):
        return hash((self.get_name().lower(), self.get_value()))

    def __repr__(self):
        return f"{type(self).__name__}({self.get_name()!r}, {self.get_value()!r})"
