import logging
from typing import Optional

from .document_decoder import load_document, sniff_document
from .exceptions import ExtractionFailedError, InvalidAddressError, NonSuccessStatusError
from .metadata_extractor import MetadataExtractorInterface
from .web_fetcher import WebFetcherInterface
from linkinfo.core.enums import ContentKind, ExtractionMode, NonSuccessPolicy
from linkinfo.core.models import MetadataRecord

logger = logging.getLogger(__name__)


class MetadataService:
    """
    Main service for metadata operations: fetch, decode, parse and extract.

    Address and transport failures always propagate. Pages that cannot be
    decoded or parsed, and (under the degrade policy) non-success responses,
    produce a degraded record classified from the response MIME type.
    """

    def __init__(
        self,
        web_fetcher: WebFetcherInterface,
        metadata_extractor: MetadataExtractorInterface,
        non_success_policy: NonSuccessPolicy = NonSuccessPolicy.DEGRADE
    ):
        self.web_fetcher = web_fetcher
        self.metadata_extractor = metadata_extractor
        self.non_success_policy = non_success_policy

    async def get_metadata(
        self,
        url: str,
        mode: ExtractionMode = ExtractionMode.BASIC,
        default_kind: Optional[ContentKind] = None,
        non_success_policy: Optional[NonSuccessPolicy] = None
    ) -> MetadataRecord:
        """
        Get metadata for a URL.

        Args:
            url: The absolute URL to extract metadata from
            mode: BASIC fetches and validates the response before parsing,
                DIRECT hands the body straight to the parser
            default_kind: Content kind to assume when the page does not say
            non_success_policy: Overrides the service policy for this call

        Returns:
            The extracted MetadataRecord

        Raises:
            InvalidAddressError: If the URL is empty or not an allowed absolute URL
            TransportError: On network failures, TransportTimeoutError on timeouts
            NonSuccessStatusError: On non-2xx responses under the FAIL policy
            ExtractionFailedError: If DIRECT mode cannot load a document
        """
        logger.info(f"Getting metadata for URL: {url} (mode={mode.value})")

        if not url or not url.strip():
            logger.warning("Empty or whitespace-only URL parameter provided")
            raise InvalidAddressError("URL parameter is required")
        url = url.strip()

        if mode == ExtractionMode.DIRECT:
            return await self._get_direct(url, default_kind)
        return await self._get_basic(url, default_kind, non_success_policy or self.non_success_policy)

    async def _get_basic(
        self,
        url: str,
        default_kind: Optional[ContentKind],
        non_success_policy: NonSuccessPolicy
    ) -> MetadataRecord:
        try:
            result = await self.web_fetcher.fetch_checked(url)
        except NonSuccessStatusError as e:
            if non_success_policy == NonSuccessPolicy.FAIL or e.fetch_result is None:
                raise
            logger.warning(f"Status {e.status_code} for URL {url}, building record from response metadata only")
            return self.metadata_extractor.extract(url, None, e.fetch_result, default_kind)

        document = load_document(result.content, result.encoding)
        if document is None:
            logger.warning(f"Could not decode or parse document for URL {url}, building record from response metadata only")
        return self.metadata_extractor.extract(url, document, result, default_kind)

    async def _get_direct(self, url: str, default_kind: Optional[ContentKind]) -> MetadataRecord:
        result = await self.web_fetcher.fetch(url)
        document = sniff_document(result.content)
        if document is None:
            logger.error(f"No document could be loaded for URL {url} and there is no response to fall back on")
            raise ExtractionFailedError()
        return self.metadata_extractor.extract(url, document, None, default_kind)
