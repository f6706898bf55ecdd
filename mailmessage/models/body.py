"""Message body values."""

from abc import ABC, abstractmethod


class Body(ABC):
    """
    Opaque message body.

    The body text is carried as-is; transfer encodings are not applied.
    """

    @abstractmethod
    def to_string(self) -> str:
        pass

    def to_bytes(self, encoding: str = "utf-8") -> bytes:
        return self.to_string().encode(encoding)

    def __str__(self) -> str:
        return self.to_string()

    def __eq__(self, other):
        if not isinstance(other, Body):
            return NotImplemented
        return self.to_string() == other.to_string()

    def __hash__(self):
        return hash(self.to_string())


class EmptyBody(Body):
    """Body of a message that has none."""

    def to_string(self) -> str:
        return ""

    def __repr__(self):
        return "EmptyBody()"


class TextBody(Body):
    """Body holding raw message text."""

    def __init__(self, content: str):
        self._content = content

    @classmethod
    def from_bytes(cls, data: bytes, encoding: str = "utf-8") -> "TextBody":
        """
        Build a body from raw bytes.

        Args:
            data: Raw body bytes
            encoding: Character set used to decode data

        Raises:
            UnicodeDecodeError: If data is not valid in encoding
        """
        return cls(data.decode(encoding))

    def to_string(self) -> str:
        return self._content

    def __repr__(self):
        return f"TextBody({self._content!r})"
