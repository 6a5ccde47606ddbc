"""HTML parsing utilities for metadata extraction"""

import logging
import math
from typing import Iterable, List, Optional, Sequence, Union
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup, Tag

from linkinfo.core.models import ImageSize, TwitterCard


logger = logging.getLogger(__name__)

# Tags matched on either attribute, e.g. <meta name="author"> or <meta property="author">
NAME_OR_PROPERTY = ("property", "name")
PROPERTY_ONLY = ("property",)

IMAGE_TAGS = ("og:image:secure_url", "og:image:url", "og:image", "thumbnail")
PUBLISH_DATE_TAGS = (
    "article:modified_time",
    "article:published_time",
    "og:updated_time",
    "og:pubdate",
    "pubdate",
)

KEYWORD_SCRIPT_MARKER = "var keyword ="


def extract_script_keywords(script_text: str) -> Optional[str]:
    """
    Pull the bracketed list out of a `var keyword = [...]` statement.

    The script is split into statements on `;`. For each statement holding the
    marker, the text from the first `[` after the marker through the next `]`
    is trimmed and stripped of its brackets. The last such statement wins.
    """
    keywords = None
    for statement in script_text.split(";"):
        marker_at = statement.find(KEYWORD_SCRIPT_MARKER)
        if marker_at < 0:
            continue
        start = statement.find("[", marker_at + len(KEYWORD_SCRIPT_MARKER))
        if start < 0:
            continue
        end = statement.find("]", start)
        if end < 0:
            continue
        keywords = statement[start:end + 1].strip()[1:-1]
    return keywords


def parse_positive_number(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    return number


class HTMLParser:
    """Encapsulates HTML parsing functionality"""

    def __init__(self, document: Union[str, BeautifulSoup], url: str):
        """
        Initialize the HTML parser

        Args:
            document: HTML content to parse, or an already parsed document
            url: Address the document was requested from
        """
        self.url = url
        if isinstance(document, BeautifulSoup):
            self.soup = document
        else:
            self.soup = BeautifulSoup(document, "lxml")
        self._metas: List[Tag] = self.soup.find_all("meta")
        self.resolved_url = self.get_og_url() or url

    def _meta_contents(self, tag: str, attrs: Sequence[str]) -> Iterable[str]:
        for el in self._metas:
            if any(el.get(attr) == tag for attr in attrs):
                content = el.get("content")
                if isinstance(content, list):
                    content = " ".join(content)
                if content and content.strip():
                    yield content.strip()

    def get_meta_content(self, tag: str, attrs: Sequence[str] = NAME_OR_PROPERTY) -> Optional[str]:
        """Return the content of the first matching meta tag that has one"""
        return next(iter(self._meta_contents(tag, attrs)), None)

    def get_first_meta_content(self, tags: Iterable[str], attrs: Sequence[str] = NAME_OR_PROPERTY) -> Optional[str]:
        """Try several meta tags in priority order"""
        for tag in tags:
            content = self.get_meta_content(tag, attrs)
            if content:
                return content
        return None

    def resolve(self, href: Optional[str]) -> Optional[str]:
        """Resolve a possibly relative reference against the resolved page URL"""
        if not href:
            return None
        try:
            return urljoin(self.resolved_url, href.strip())
        except ValueError:
            logger.debug(f"Could not resolve reference {href!r} against {self.resolved_url}")
            return None

    def get_og_type(self) -> Optional[str]:
        return self.get_meta_content("og:type")

    def get_og_url(self) -> Optional[str]:
        """Canonical URL from og:url, only when it is an absolute URL"""
        og_url = self.get_meta_content("og:url")
        if not og_url:
            return None
        try:
            parsed = urlparse(og_url)
        except ValueError:
            parsed = None
        if parsed is None or not parsed.scheme or not parsed.netloc:
            logger.debug(f"Ignoring og:url that is not an absolute URL: {og_url!r}")
            return None
        return og_url

    def get_title(self) -> Optional[str]:
        """Extract title from og:title, falling back to the <title> tag"""
        title = self.get_meta_content("og:title")

        if not title and self.soup.title:
            t = self.soup.title.get_text().strip()
            title = t if t else None

        return title

    def get_description(self) -> Optional[str]:
        """og:description (property only), then the description meta tag"""
        return self.get_meta_content("og:description", PROPERTY_ONLY) or \
               self.get_meta_content("description")

    def get_site_name(self) -> Optional[str]:
        return self.get_meta_content("og:site_name")

    def get_author(self) -> Optional[str]:
        return self.get_meta_content("author")

    def get_section(self) -> Optional[str]:
        return self.get_meta_content("article:section")

    def get_publish_date(self) -> Optional[str]:
        return self.get_first_meta_content(PUBLISH_DATE_TAGS, PROPERTY_ONLY)

    def get_keywords(self) -> Optional[str]:
        """Keywords meta tag, falling back to a `var keyword = [...]` inline script"""
        keywords = self.get_meta_content("keywords")
        if keywords:
            return keywords

        for script in self.soup.find_all("script", attrs={"type": "text/javascript"}):
            text = script.string or script.get_text()
            if KEYWORD_SCRIPT_MARKER not in text:
                continue
            found = extract_script_keywords(text)
            if found and found.strip():
                keywords = found
        return keywords

    def get_image(self) -> Optional[str]:
        """Extract image from the og:image family, then the thumbnail meta tag"""
        return self.resolve(self.get_first_meta_content(IMAGE_TAGS))

    def get_image_size(self) -> Optional[ImageSize]:
        """Both og:image:width and og:image:height must be positive numbers"""
        width = parse_positive_number(self.get_meta_content("og:image:width"))
        height = parse_positive_number(self.get_meta_content("og:image:height"))
        if width is None or height is None:
            return None
        return ImageSize(width, height)

    def _links(self, rel: str, sizes: Optional[str] = None, unsized: bool = False) -> Iterable[Tag]:
        head = self.soup.head or self.soup
        for link in head.find_all("link"):
            link_rel = link.get("rel") or []
            if isinstance(link_rel, str):
                link_rel = link_rel.split()
            if " ".join(link_rel).lower() != rel:
                continue
            link_sizes = link.get("sizes")
            if unsized and link_sizes is not None:
                continue
            if sizes is not None and link_sizes != sizes:
                continue
            yield link

    def _first_href(self, links: Iterable[Tag]) -> Optional[str]:
        for link in links:
            href = link.get("href")
            if href and href.strip():
                return href
        return None

    def get_favicon(self) -> Optional[str]:
        """Extract favicon from the shortcut icon link, then the icon link"""
        href = self._first_href(self._links("shortcut icon")) or \
               self._first_href(self._links("icon"))
        return self.resolve(href)

    def get_touch_icon(self) -> Optional[str]:
        """Extract the home screen icon, ignoring the sized variants except 180x180"""
        href = self._first_href(self._links("apple-touch-icon", unsized=True)) or \
               self._first_href(self._links("apple-touch-icon", sizes="180x180")) or \
               self._first_href(self._links("apple-touch-icon-precomposed", unsized=True))
        return self.resolve(href)

    def get_twitter_card(self) -> Optional[TwitterCard]:
        """Extract all Twitter Card metadata, None when the page has none"""
        card = TwitterCard(
            card=self.get_meta_content("twitter:card"),
            site=self.get_meta_content("twitter:site"),
            creator=self.get_meta_content("twitter:creator"),
            title=self.get_meta_content("twitter:title"),
            description=self.get_meta_content("twitter:description"),
            image=self.resolve(self.get_meta_content("twitter:image")),
        )
        if card == TwitterCard():
            return None
        return card
