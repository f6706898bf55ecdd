"""Header text helpers: folding, encoded-word decoding, display truncation."""

from email.header import decode_header

CRLF = "\r\n"
DEFAULT_LINE_LENGTH = 78


def fold_header_line(line: str, line_length: int = DEFAULT_LINE_LENGTH) -> str:
    """
    Fold a rendered ``Name: value`` line at existing spaces.

    Each break replaces one space with CRLF followed by that space, so
    concatenating the physical lines gives back ``line`` unchanged.

    Args:
        line: Unfolded header line
        line_length: Preferred maximum physical line length

    Returns:
        The line, folded with CRLF where it exceeds line_length

    Examples:
        >>> fold_header_line("Subject: one two three", 14)
        'Subject: one\\r\\n two three'
    """
    if len(line) <= line_length:
        return line

    physical_lines = []
    current = ""
    for index, chunk in enumerate(line.split(" ")):
        if index == 0:
            current = chunk
            continue

        candidate = f"{current} {chunk}"
        # never break between the header name and its first word
        if len(candidate) > line_length and current.strip() and (physical_lines or index > 1):
            physical_lines.append(current)
            current = f" {chunk}"
        else:
            current = candidate

    physical_lines.append(current)
    return CRLF.join(physical_lines)


def decode_encoded_words(header_value: str) -> str:
    """
    Decode RFC 2047 encoded words into a Unicode string.

    Args:
        header_value: Raw header value (may contain =?charset?X?...?= words)

    Returns:
        Decoded Unicode string

    Examples:
        >>> decode_encoded_words("=?UTF-8?B?5Lit5paH?=")
        '中文'
    """
    if not header_value:
        return ""

    decoded_parts = []
    for content, encoding in decode_header(header_value):
        if not isinstance(content, bytes):
            decoded_parts.append(content)
            continue

        try:
            decoded_parts.append(content.decode(encoding or "ascii"))
        except (UnicodeDecodeError, LookupError):
            decoded_parts.append(content.decode("utf-8", errors="replace"))

    return "".join(decoded_parts)


def truncate_value(value: str | None, max_length: int = 60) -> str:
    """
    Shorten a header value for display, ending it with '...' when cut.

    Examples:
        >>> truncate_value("Short value")
        'Short value'
        >>> truncate_value("abcdefghij", 8)
        'abcde...'
    """
    if not value:
        return ""

    if len(value) <= max_length:
        return value

    return value[: max_length - 3] + "..."
