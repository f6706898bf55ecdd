"""Message and body value types"""

from .body import Body, EmptyBody, TextBody
from .message import WELL_KNOWN_HEADERS, Message

__all__ = ["Body", "EmptyBody", "TextBody", "Message", "WELL_KNOWN_HEADERS"]
