from typing import Optional

from fastapi import APIRouter, Depends, Query

from linkinfo.config.logging_config import get_logger
from linkinfo.core.enums import ContentKind, ExtractionMode
from linkinfo.dependencies.metadata_deps import get_metadata_service
from linkinfo.services.metadata_service import MetadataService

logger = get_logger(__name__)

router = APIRouter()


@router.get("")
async def get_metadata(
    url: str = Query(...),
    mode: ExtractionMode = Query(ExtractionMode.BASIC),
    default_kind: Optional[ContentKind] = Query(None),
    service: MetadataService = Depends(get_metadata_service)
):
    logger.info(f"Received request for metadata: {url}")
    record = await service.get_metadata(url, mode=mode, default_kind=default_kind)
    logger.info(f"Successfully returned metadata for: {url}")
    return record.to_dict()
