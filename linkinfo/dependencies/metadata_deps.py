from fastapi import Request

from linkinfo.services.metadata_service import MetadataService


async def get_metadata_service(request: Request) -> MetadataService:
    """Dependency that hands out the service built at application startup"""
    return request.app.state.container.get_metadata_service()
