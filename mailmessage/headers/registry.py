"""Header name to header type lookup."""

import logging
from typing import Callable

from .base import HeaderError, HeaderInterface, validate_header_name
from .types import Date, GenericHeader, MessageId, MimeVersion, Subject

logger = logging.getLogger(__name__)

HeaderFactory = Callable[[str], HeaderInterface]


class HeaderRegistry:
    """
    Selects the header type to build for a header name.

    Names without a registered factory fall back to GenericHeader, which
    keeps the name as given.
    """

    def __init__(self, factories: dict[str, HeaderFactory] | None = None):
        self._factories: dict[str, HeaderFactory] = {}
        for name, factory in (factories or {}).items():
            self.register(name, factory)

    def register(self, name: str, factory: HeaderFactory) -> None:
        """
        Register a factory for a header name.

        Args:
            name: Header name, any case
            factory: Callable taking the raw value and returning a header
        """
        self._factories[name.lower()] = factory

    def names(self) -> list[str]:
        """Lower-cased names with a registered factory."""
        return list(self._factories)

    def create(self, name: str, value: str) -> HeaderInterface:
        """
        Build a header instance for name and raw value.

        Raises:
            MalformedHeaderError: If name is not a valid header name
            HeaderError: If the registered factory builds a header of another name
        """
        validate_header_name(name)
        factory = self._factories.get(name.lower())

        if factory is None:
            logger.debug("No header type registered for %r, using GenericHeader", name)
            return GenericHeader(name, value)

        header = factory(value)
        if header.get_name().lower() != name.lower():
            raise HeaderError(f"Factory for {name!r} built a {header.get_name()!r} header")

        return header


default_registry = HeaderRegistry(
    {
        "subject": Subject,
        "message-id": MessageId,
        "date": Date,
        "mime-version": MimeVersion,
    }
)
