"""Utility functions"""

from .message_id import normalize_message_id
from .text import CRLF, DEFAULT_LINE_LENGTH, decode_encoded_words, fold_header_line, truncate_value

__all__ = [
    "CRLF",
    "DEFAULT_LINE_LENGTH",
    "normalize_message_id",
    "decode_encoded_words",
    "fold_header_line",
    "truncate_value",
]
