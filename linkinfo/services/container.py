from typing import Dict, Optional, Type

import httpx

from .url_validator import URLValidator, URLValidatorInterface
from .web_fetcher import WebFetcher, WebFetcherInterface
from .metadata_extractor import MetadataExtractor, MetadataExtractorInterface
from .metadata_service import MetadataService
from linkinfo.core.config import settings


class ServiceContainer:
    """Container for managing service dependencies with dependency injection"""

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        # Shared transport, owned by whoever created it
        self.client = client
        self._services: Dict[Type, object] = {}

        # Register services in dependency order
        self._register_services()

    def _register_services(self) -> None:
        """Register all services with proper dependency injection"""
        self._services[URLValidatorInterface] = URLValidator(
            block_private_hosts=settings.block_private_hosts
        )

        # Services with dependencies
        self._services[WebFetcherInterface] = WebFetcher(
            self._services[URLValidatorInterface],
            client=self.client
        )
        self._services[MetadataExtractorInterface] = MetadataExtractor(
            default_kind=settings.default_content_kind
        )

        # Main service that depends on others
        self._services[MetadataService] = MetadataService(
            self._services[WebFetcherInterface],
            self._services[MetadataExtractorInterface],
            non_success_policy=settings.non_success_policy
        )

    def get_metadata_service(self) -> MetadataService:
        """Get the metadata service instance"""
        return self._services[MetadataService]  # type: ignore
