import pytest

from linkinfo.services.document_decoder import (
    decode_body,
    load_document,
    parse_document,
    sniff_document,
)

PNG_HEADER = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR"


class TestDecodeBody:
    """Unit tests for the decode fallback"""

    def test_defaults_to_utf8(self):
        assert decode_body("café".encode("utf-8")) == "café"

    def test_uses_declared_encoding(self):
        assert decode_body("café".encode("latin-1"), "latin-1") == "café"

    def test_falls_back_to_ascii_for_unknown_codec(self):
        assert decode_body(b"<title>Plain</title>", "x-no-such-codec") == "<title>Plain</title>"

    def test_falls_back_to_ascii_when_declared_encoding_fails(self):
        # Valid ASCII but an odd number of bytes for UTF-16
        assert decode_body(b"abc", "utf-16-le") == "abc"

    def test_gives_up_on_binary(self):
        assert decode_body(PNG_HEADER) is None

    def test_gives_up_when_neither_encoding_fits(self):
        assert decode_body("café".encode("latin-1"), "utf-8") is None


class TestParseDocument:
    """Unit tests for the parse fallback"""

    def test_parses_with_declared_encoding(self):
        soup = parse_document("<html><head><title>Café</title></head></html>", "latin-1")

        assert soup is not None
        assert soup.title.get_text() == "Café"

    def test_retries_with_utf8_when_text_does_not_fit_declared_encoding(self):
        soup = parse_document("<html><head><title>Café</title></head></html>", "ascii")

        assert soup is not None
        assert soup.title.get_text() == "Café"

    def test_retries_with_utf8_for_unknown_codec(self):
        soup = parse_document("<title>Plain</title>", "x-no-such-codec")

        assert soup is not None
        assert soup.title.get_text() == "Plain"


class TestLoadDocument:
    """Unit tests for decode then parse"""

    def test_loads_html(self):
        soup = load_document(b"<html><head><title>Hello</title></head></html>", "utf-8")

        assert soup.title.get_text() == "Hello"

    @pytest.mark.parametrize("encoding", ["latin-1", "latin1", "ISO-8859-1", "iso8859-1", "cp1252", "windows-1252"])
    def test_keeps_accented_text_for_every_charset_label(self, encoding):
        body = "<html><head><title>Café ü</title></head></html>".encode(encoding)

        soup = load_document(body, encoding)

        assert soup.title.get_text() == "Café ü"

    def test_binary_body_is_absent(self):
        assert load_document(PNG_HEADER, None) is None

    @pytest.mark.parametrize("body", [b"", b"   \r\n\t "])
    def test_empty_body_is_absent(self, body):
        assert load_document(body, "utf-8") is None


class TestSniffDocument:
    """Unit tests for the direct loader"""

    def test_detects_meta_charset(self):
        body = '<html><head><meta charset="iso-8859-1"><title>Café</title></head></html>'.encode("latin-1")

        soup = sniff_document(body)

        assert soup.title.get_text() == "Café"

    def test_empty_body_is_absent(self):
        assert sniff_document(b"") is None
