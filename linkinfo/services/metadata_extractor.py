import logging
from abc import ABC, abstractmethod
from typing import Optional

from bs4 import BeautifulSoup

from .content_kind import kind_for_mime_type, kind_for_og_type
from .html_parser import HTMLParser
from .web_fetcher import FetchResult
from linkinfo.core.enums import ContentKind
from linkinfo.core.models import MetadataRecord


logger = logging.getLogger(__name__)


def extract_metadata(
    url: str,
    document: Optional[BeautifulSoup] = None,
    fetch_result: Optional[FetchResult] = None,
    default_kind: ContentKind = ContentKind.WEBSITE
) -> MetadataRecord:
    """
    Build the metadata record for a URL from whatever is available.

    Args:
        url: The address as requested
        document: Parsed page, None when it could not be fetched, decoded or parsed
        fetch_result: Transport response, None when the page was loaded without one
        default_kind: Content kind used when neither og:type nor the MIME type decide

    Returns:
        A MetadataRecord. Without a document only the content kind and the
        response status are filled in.
    """
    response_status = fetch_result.status_code if fetch_result is not None else None

    if document is None:
        content_type = default_kind
        if fetch_result is not None and fetch_result.mime_type:
            content_type = kind_for_mime_type(fetch_result.mime_type)
        logger.info(f"No document for URL {url}, classified as {content_type.value} from response metadata")
        return MetadataRecord(
            original_address=url,
            resolved_address=url,
            content_type=content_type,
            response_status=response_status
        )

    html_parser = HTMLParser(document, url)

    og_type = html_parser.get_og_type()
    content_type = kind_for_og_type(og_type)
    if content_type is None:
        if og_type:
            logger.debug(f"Unrecognized og:type {og_type!r} for URL {url}, using {default_kind.value}")
        content_type = default_kind

    return MetadataRecord(
        original_address=url,
        resolved_address=html_parser.resolved_url,
        content_type=content_type,
        title=html_parser.get_title(),
        description=html_parser.get_description(),
        site_name=html_parser.get_site_name(),
        author=html_parser.get_author(),
        keywords=html_parser.get_keywords(),
        image_address=html_parser.get_image(),
        image_size=html_parser.get_image_size(),
        favicon_address=html_parser.get_favicon(),
        touch_icon_address=html_parser.get_touch_icon(),
        publish_date=html_parser.get_publish_date(),
        section=html_parser.get_section(),
        response_status=response_status,
        twitter_card=html_parser.get_twitter_card()
    )


class MetadataExtractorInterface(ABC):
    """Interface for metadata extraction following the Dependency Inversion Principle"""

    @abstractmethod
    def extract(
        self,
        url: str,
        document: Optional[BeautifulSoup],
        fetch_result: Optional[FetchResult] = None,
        default_kind: Optional[ContentKind] = None
    ) -> MetadataRecord:
        pass


class MetadataExtractor(MetadataExtractorInterface):
    """
    Extracts link metadata following the Open Graph protocol, with HTML and
    MIME type fallbacks
    """

    def __init__(self, default_kind: ContentKind = ContentKind.WEBSITE):
        self.default_kind = default_kind

    def extract(
        self,
        url: str,
        document: Optional[BeautifulSoup],
        fetch_result: Optional[FetchResult] = None,
        default_kind: Optional[ContentKind] = None
    ) -> MetadataRecord:
        """Extract metadata, using the configured default kind unless the caller hints another"""
        logger.info(f"Extracting metadata for URL: {url}")
        record = extract_metadata(
            url,
            document=document,
            fetch_result=fetch_result,
            default_kind=default_kind or self.default_kind
        )
        logger.info(f"Extracted metadata for URL {url}: type={record.content_type.value}, resolved={record.resolved_address}")
        return record
