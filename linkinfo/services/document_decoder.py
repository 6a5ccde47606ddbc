"""
Turns a fetched body into a parsed document.

Pages frequently mislabel their encoding, so both the decode step and the
parse step get a second chance before the document is given up on. Giving up
is not an error: callers carry on with the response metadata alone.
"""

import logging
from typing import Optional

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup


logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"
HTML_PARSER = "lxml"


def decode_body(content: bytes, encoding: Optional[str] = None) -> Optional[str]:
    """
    Decode a response body with its declared encoding, falling back to ASCII.

    Args:
        content: Raw response body
        encoding: Declared charset of the response, UTF-8 when missing

    Returns:
        The decoded text, or None when neither encoding fits the bytes
    """
    encoding = encoding or DEFAULT_ENCODING
    try:
        return content.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        logger.debug(f"Body does not decode as {encoding}, retrying as ASCII: {e}")

    try:
        return content.decode("ascii")
    except UnicodeDecodeError:
        logger.warning(f"Body decodes neither as {encoding} nor as ASCII, treating document as absent")
        return None


def _parse(text: str, encoding: str) -> BeautifulSoup:
    # The text must be representable in the charset it is parsed under
    text.encode(encoding)
    return BeautifulSoup(text, HTML_PARSER)


def parse_document(text: str, encoding: Optional[str] = None) -> Optional[BeautifulSoup]:
    """Parse decoded text under the declared encoding, retrying with UTF-8 forced"""
    encoding = encoding or DEFAULT_ENCODING
    try:
        return _parse(text, encoding)
    except (UnicodeError, LookupError, ParserRejectedMarkup) as e:
        logger.debug(f"Parsing with {encoding} failed, retrying with {DEFAULT_ENCODING}: {e}")

    try:
        return BeautifulSoup(text.encode(DEFAULT_ENCODING), HTML_PARSER, from_encoding=DEFAULT_ENCODING)
    except (UnicodeError, ParserRejectedMarkup) as e:
        logger.warning(f"Parsing failed with {DEFAULT_ENCODING} forced, treating document as absent: {e}")
        return None


def load_document(content: bytes, encoding: Optional[str] = None) -> Optional[BeautifulSoup]:
    """Decode then parse a body, returning None when every fallback is exhausted"""
    text = decode_body(content, encoding)
    if text is None:
        return None
    if not text.strip():
        logger.warning("Empty body, nothing to parse")
        return None
    return parse_document(text, encoding)


def sniff_document(content: bytes) -> Optional[BeautifulSoup]:
    """
    Hand raw bytes straight to the parser and let it detect the encoding from
    byte-order marks and <meta charset> declarations.
    """
    if not content:
        logger.warning("Empty body, nothing to parse")
        return None
    try:
        return BeautifulSoup(content, HTML_PARSER)
    except ParserRejectedMarkup as e:
        logger.warning(f"Parser rejected the document: {e}")
        return None
