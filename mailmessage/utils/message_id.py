"""Message-ID normalization."""


def normalize_message_id(message_id: str) -> str:
    """
    Normalize a Message-ID to the bracketed form.

    Args:
        message_id: Raw Message-ID, with or without angle brackets

    Returns:
        Message-ID in format <id@domain>

    Raises:
        ValueError: If message_id is empty or has no domain part

    Examples:
        >>> normalize_message_id("abc@domain.com")
        '<abc@domain.com>'
        >>> normalize_message_id(" <abc@domain.com> ")
        '<abc@domain.com>'
    """
    if not message_id or not message_id.strip():
        raise ValueError("Message-ID is empty")

    identifier = message_id.strip().removeprefix("<").removesuffix(">")
    local, _, domain = identifier.partition("@")

    if not local or not domain:
        raise ValueError(f"Invalid Message-ID format: {message_id}")

    return f"<{identifier}>"
