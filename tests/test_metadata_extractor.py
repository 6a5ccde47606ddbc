import pytest
from bs4 import BeautifulSoup

from linkinfo.core.enums import ContentKind
from linkinfo.core.models import ImageSize, MetadataRecord
from linkinfo.services.metadata_extractor import MetadataExtractor, extract_metadata
from linkinfo.services.web_fetcher import FetchResult

URL = "https://example.com/page"


def document(head: str, body: str = "") -> BeautifulSoup:
    return BeautifulSoup(f"<html><head>{head}</head><body>{body}</body></html>", "lxml")


def response(status_code: int = 200, mime_type: str = "text/html") -> FetchResult:
    return FetchResult(url=URL, status_code=status_code, mime_type=mime_type)


class TestExtractMetadata:
    """Unit tests for the extraction fallback chain"""

    def test_full_page(self, html_page):
        """Test that every field is filled in from a well tagged page."""
        # Arrange
        soup = BeautifulSoup(html_page, "lxml")

        # Act
        record = extract_metadata(URL, soup, response())

        # Assert
        assert record.original_address == URL
        assert record.resolved_address == URL
        assert record.content_type == ContentKind.ARTICLE
        assert record.title == "Open Graph Title"
        assert record.description == "Open Graph Description"
        assert record.site_name == "Example Site"
        assert record.author == "Jane Doe"
        assert record.image_address == "https://example.com/images/cover.jpg"
        assert record.image_size == ImageSize(1200, 630)
        assert record.favicon_address == "https://example.com/favicon.ico"
        assert record.response_status == 200

    def test_og_title_beats_title_tag(self):
        record = extract_metadata(URL, document('<title>Y</title><meta property="og:title" content="X">'))

        assert record.title == "X"

    def test_title_tag_fallback(self):
        record = extract_metadata(URL, document("<title>Y</title>"))

        assert record.title == "Y"

    def test_og_url_overrides_resolved_address(self):
        record = extract_metadata(URL, document('<meta property="og:url" content="https://example.com/canonical">'))

        assert record.original_address == URL
        assert record.resolved_address == "https://example.com/canonical"

    def test_unparseable_og_url_keeps_original(self):
        record = extract_metadata(URL, document('<meta property="og:url" content="not a url">'))

        assert record.resolved_address == URL

    def test_relative_favicon_is_resolved(self):
        record = extract_metadata("https://ex.com/page", document('<link rel="icon" href="/f.ico">'))

        assert record.favicon_address == "https://ex.com/f.ico"

    @pytest.mark.parametrize("width,height", [("0", "630"), ("1200", "-5"), ("abc", "630")])
    def test_invalid_image_size_is_absent(self, width, height):
        head = f"""
            <meta property="og:image:width" content="{width}">
            <meta property="og:image:height" content="{height}">
        """
        record = extract_metadata(URL, document(head))

        assert record.image_size is None

    def test_keywords_from_script(self):
        body = '<script type="text/javascript">var keyword = ["a","b","c"];</script>'

        record = extract_metadata(URL, document("", body))

        assert record.keywords == '"a","b","c"'

    def test_publish_date_and_section(self):
        head = """
            <meta property="article:published_time" content="2021-11-26T08:00:00+08:00">
            <meta property="article:section" content="Headlines">
        """
        record = extract_metadata(URL, document(head))

        assert record.publish_date == "2021-11-26T08:00:00+08:00"
        assert record.section == "Headlines"

    def test_og_type_alias(self):
        record = extract_metadata(URL, document('<meta property="og:type" content="tv_series">'))

        assert record.content_type == ContentKind.VIDEO_TV_SHOW

    def test_unrecognized_og_type_uses_default_kind(self):
        record = extract_metadata(URL, document('<meta property="og:type" content="blog">'), default_kind=ContentKind.ARTICLE)

        assert record.content_type == ContentKind.ARTICLE

    def test_document_without_og_type_ignores_mime_type(self):
        """Test that the MIME type is only consulted when there is no document."""
        record = extract_metadata(URL, document("<title>Y</title>"), response(mime_type="application/pdf"))

        assert record.content_type == ContentKind.WEBSITE

    def test_missing_document_without_response_uses_default(self):
        record = extract_metadata(URL, None, None, default_kind=ContentKind.ARTICLE)

        assert record.content_type == ContentKind.ARTICLE
        assert record.response_status is None
        assert record.resolved_address == URL

    @pytest.mark.parametrize("mime_type,expected", [
        ("text/html", ContentKind.WEBSITE),
        ("image/png", ContentKind.FILE_IMAGE),
        ("audio/mpeg", ContentKind.FILE_AUDIO),
        ("video/mp4", ContentKind.FILE_VIDEO),
        ("application/pdf", ContentKind.FILE_DOCUMENT),
        ("application/zip", ContentKind.FILE_ARCHIVE),
        ("application/octet-stream", ContentKind.FILE_OTHER),
    ])
    def test_missing_document_uses_mime_type(self, mime_type, expected):
        record = extract_metadata(URL, None, response(404, mime_type))

        assert record.content_type == expected
        assert record.response_status == 404
        assert record.title is None
        assert record.description is None

    def test_missing_document_without_mime_type_uses_default(self):
        record = extract_metadata(URL, None, response(mime_type=None), default_kind=ContentKind.BOOK)

        assert record.content_type == ContentKind.BOOK

    def test_twitter_card_is_not_a_fallback(self):
        record = extract_metadata(URL, document('<meta name="twitter:title" content="Tweet Title">'))

        assert record.title is None
        assert record.twitter_card.title == "Tweet Title"


class TestMetadataRecord:
    """Unit tests for MetadataRecord"""

    def test_equality_uses_resolved_address_only(self):
        a = MetadataRecord(original_address=URL, resolved_address="https://example.com/x", title="Foo")
        b = MetadataRecord(original_address="https://other.example.com", resolved_address="https://example.com/x", title="Bar")

        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_inequality_on_resolved_address(self):
        a = MetadataRecord(original_address=URL, resolved_address="https://example.com/x", title="Foo")
        b = MetadataRecord(original_address=URL, resolved_address="https://example.com/y", title="Foo")

        assert a != b

    def test_record_is_immutable(self):
        record = MetadataRecord(original_address=URL, resolved_address=URL)

        with pytest.raises(AttributeError):
            record.title = "Changed"

    def test_to_dict(self):
        record = MetadataRecord(
            original_address=URL,
            resolved_address=URL,
            content_type=ContentKind.FILE_IMAGE,
            image_size=ImageSize(10, 20),
            response_status=200
        )

        result = record.to_dict()

        assert result["content_type"] == "file.image"
        assert result["image_size"] == {"width": 10, "height": 20}
        assert result["response_status"] == 200
        assert result["twitter_card"] is None


class TestMetadataExtractor:
    """Unit tests for the MetadataExtractor service"""

    def test_uses_configured_default_kind(self):
        extractor = MetadataExtractor(default_kind=ContentKind.ARTICLE)

        record = extractor.extract(URL, document("<title>Y</title>"))

        assert record.content_type == ContentKind.ARTICLE

    def test_caller_hint_beats_configured_default(self):
        extractor = MetadataExtractor(default_kind=ContentKind.ARTICLE)

        record = extractor.extract(URL, None, None, default_kind=ContentKind.PROFILE)

        assert record.content_type == ContentKind.PROFILE
