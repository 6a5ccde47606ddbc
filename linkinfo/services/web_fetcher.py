import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Optional

import httpx

from .url_validator import URLValidatorInterface
from .exceptions import InvalidAddressError, NonSuccessStatusError, TransportError, TransportTimeoutError

# Import settings
from linkinfo.core.config import settings

logger = logging.getLogger(__name__)


@dataclass
class FetchResult:
    """Raw body and response metadata for a single GET"""
    url: str
    status_code: int
    content: bytes = b""
    headers: Dict[str, str] = field(default_factory=dict)
    mime_type: Optional[str] = None
    encoding: Optional[str] = None
    final_url: Optional[str] = None

    @property
    def success(self) -> bool:
        return 200 <= self.status_code < 300


def parse_content_type(content_type: Optional[str]) -> Optional[str]:
    """Return the primary MIME type of a Content-Type header, lower-cased, without parameters"""
    if not content_type:
        return None
    mime_type = content_type.split(";", 1)[0].strip().lower()
    return mime_type or None


class WebFetcherInterface(ABC):
    """Interface for fetching web content following the Dependency Inversion Principle"""

    @abstractmethod
    async def fetch(self, url: str) -> FetchResult:
        pass

    @abstractmethod
    async def fetch_checked(self, url: str) -> FetchResult:
        pass


class WebFetcher(WebFetcherInterface):
    """
    Fetches raw content from URLs safely.

    A shared httpx.AsyncClient can be injected; it is then owned by the caller
    and never closed here. Without one, a client is opened for each request.
    """

    def __init__(self, url_validator: URLValidatorInterface, client: Optional[httpx.AsyncClient] = None):
        self.url_validator = url_validator
        self.client = client

    async def fetch(self, url: str) -> FetchResult:
        """Fetch a URL and return its body and response metadata, whatever the status"""
        logger.info(f"Fetching content from URL: {url}")

        if not self.url_validator.validate(url):
            logger.warning(f"Invalid or unsafe URL provided: {url}")
            raise InvalidAddressError()

        headers = {
            "User-Agent": settings.fetch_user_agent
        }

        try:
            if self.client is not None:
                res = await self._get(self.client, url, headers)
            else:
                async with httpx.AsyncClient(timeout=settings.fetch_timeout) as client:
                    res = await self._get(client, url, headers)
        except httpx.TimeoutException as e:
            logger.error(f"Timed out while fetching URL {url}: {e!r}")
            raise TransportTimeoutError(f"Timed out while fetching URL: {e!r}") from e
        except httpx.InvalidURL as e:
            logger.warning(f"Transport rejected URL {url}: {e}")
            raise InvalidAddressError(f"Invalid URL: {e}") from e
        except httpx.RequestError as e:
            logger.error(f"Request error occurred while fetching URL {url}: {e!r}")
            raise TransportError(f"Request error occurred: {e!r}") from e

        result = FetchResult(
            url=url,
            status_code=res.status_code,
            content=res.content,
            headers=dict(res.headers),
            mime_type=parse_content_type(res.headers.get("content-type")),
            encoding=res.charset_encoding,
            final_url=str(res.url)
        )
        logger.info(f"Fetched URL {url}: status={result.status_code}, type={result.mime_type}, bytes={len(result.content)}")
        return result

    async def _get(self, client: httpx.AsyncClient, url: str, headers: Dict[str, str]) -> httpx.Response:
        """GET a URL, following redirects one hop at a time so every target is validated"""
        res = await client.get(url, headers=headers, follow_redirects=False)
        redirects = 0
        while settings.fetch_follow_redirects and res.next_request is not None:
            target = str(res.next_request.url)
            if redirects >= settings.fetch_max_redirects:
                logger.warning(f"Too many redirects while fetching URL {url}")
                raise TransportError(f"Exceeded {settings.fetch_max_redirects} redirects")
            if not self.url_validator.validate(target):
                logger.warning(f"URL {url} redirected to an invalid or unsafe URL: {target}")
                raise InvalidAddressError(f"Redirected to an invalid or unsafe URL: {target}")
            logger.debug(f"Following redirect from {res.url} to {target}")
            res = await client.send(res.next_request, follow_redirects=False)
            redirects += 1
        return res

    async def fetch_checked(self, url: str) -> FetchResult:
        """Fetch a URL, raising NonSuccessStatusError for statuses outside the 2xx range"""
        result = await self.fetch(url)
        if not result.success:
            logger.warning(f"URL {url} answered with non-success status {result.status_code}")
            raise NonSuccessStatusError(status_code=result.status_code, fetch_result=result)
        return result
