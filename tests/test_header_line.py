"""Tests for HeaderLine parsing and rendering."""

import pytest

from mailmessage.headers.base import HeaderError, MalformedHeaderError
from mailmessage.headers.registry import HeaderRegistry
from mailmessage.headers.types import GenericHeader, MessageId, Subject
from mailmessage.services.header_line import HeaderLine


class TestHeaderLineFromString:
    """Test parsing one logical header line."""

    def test_splits_on_first_colon(self):
        """Test only the first ':' separates name and value."""
        header = HeaderLine.from_string("X-Time: 12:30:00").get_header()

        assert header.get_name() == "X-Time"
        assert header.get_value() == "12:30:00"

    def test_trims_name_and_leading_value_space(self):
        """Test whitespace around the name and before the value is removed."""
        header = HeaderLine.from_string("To :   a@example.com").get_header()

        assert header.get_name() == "To"
        assert header.get_value() == "a@example.com"

    def test_empty_value(self):
        """Test a header with nothing after ':' has an empty value."""
        assert HeaderLine.from_string("X-Empty:").get_header().get_value() == ""

    def test_registered_type_is_used(self):
        """Test registered names build typed headers."""
        header = HeaderLine.from_string("Message-ID: <id@example.com>").get_header()
        assert isinstance(header, MessageId)

    def test_unknown_name_falls_back_to_generic(self):
        """Test unregistered names build GenericHeader."""
        header = HeaderLine.from_string("X-Mailer: test").get_header()
        assert isinstance(header, GenericHeader)

    def test_custom_registry(self):
        """Test a caller-supplied registry is consulted."""
        registry = HeaderRegistry({"x-topic": lambda value: GenericHeader("X-Topic", value.upper())})
        header = HeaderLine.from_string("X-Topic: hello", registry).get_header()

        assert header.get_name() == "X-Topic"
        assert header.get_value() == "HELLO"

    def test_registry_cannot_rename_header(self):
        """Test a factory building a header of another name is refused."""
        registry = HeaderRegistry({"x-topic": Subject})

        with pytest.raises(HeaderError):
            HeaderLine.from_string("X-Topic: hello", registry)

    def test_missing_colon_raises(self):
        """Test a line without ':' is malformed."""
        with pytest.raises(MalformedHeaderError):
            HeaderLine.from_string("no delimiter here")

    def test_empty_name_raises(self):
        """Test a line starting with ':' is malformed."""
        with pytest.raises(MalformedHeaderError):
            HeaderLine.from_string(": value")

    def test_name_with_space_raises(self):
        """Test header names cannot contain spaces."""
        with pytest.raises(MalformedHeaderError):
            HeaderLine.from_string("Bad Name: value")


class TestHeaderLineRender:
    """Test rendering a header to wire text."""

    def test_short_header(self):
        """Test a short header renders on one line."""
        assert str(HeaderLine(GenericHeader("X-Test", "value"))) == "X-Test: value"

    def test_long_header_folds_at_spaces(self):
        """Test continuation lines start with a single space."""
        value = " ".join(f"word{i}" for i in range(20))
        rendered = str(HeaderLine(Subject(value), line_length=40))
        lines = rendered.split("\r\n")

        assert len(lines) > 1
        assert all(line.startswith(" ") for line in lines[1:])
        assert all(len(line) <= 40 for line in lines)
        assert "".join(lines) == f"Subject: {value}"

    def test_long_word_is_not_split(self):
        """Test a single word longer than the limit stays whole."""
        token = "x" * 100
        assert str(HeaderLine(GenericHeader("X-Token", token))) == f"X-Token: {token}"

    def test_message_id_is_never_folded(self):
        """Test Message-ID renders on one line regardless of length."""
        value = "<" + "a" * 50 + " " + "b" * 50 + "@example.com>"
        assert "\r\n" not in str(HeaderLine(MessageId(value)))

    def test_rendered_line_parses_back(self):
        """Test a folded rendering unfolds to the same header."""
        header = GenericHeader("X-Note", " ".join(["alpha", "beta", "gamma"] * 10))
        rendered = str(HeaderLine(header, line_length=30))

        assert HeaderLine.from_string(rendered.replace("\r\n", "")).get_header() == header
