"""
Collection batch lookup endpoints.

Routes: POST /collections/{collection}/batch-get

Dependencies: fastapi, batchfetch.application.services
System role: HTTP surface for batch document lookups
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from batchfetch.api.deps.dependencies import (
    get_batch_fetch_service,
    get_settings_dependency,
)
from batchfetch.application.services import BatchFetchService
from batchfetch.configs import Settings
from batchfetch.core.exceptions import UnknownCollectionError, ValidationError
from batchfetch.models.batch import BatchGetRequest, BatchGetResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/collections", tags=["collections"])


@router.post("/{collection}/batch-get", response_model=BatchGetResponse)
async def batch_get(
    collection: str,
    request: BatchGetRequest,
    service: BatchFetchService = Depends(get_batch_fetch_service),
    settings: Settings = Depends(get_settings_dependency),
) -> BatchGetResponse:
    """
    Fetch documents from a collection by id.

    With `ordered` set, the response carries `items` aligned with the
    request ids (null for missing ids); otherwise a `documents` mapping.

    Raises:
        HTTPException: 404 for an unknown collection, 422 for too many ids
            or rejected input
    """
    try:
        name = BatchFetchService.resolve_collection(collection)
    except UnknownCollectionError as e:
        logger.warning(
            "Unknown collection requested",
            extra={"collection": collection},
        )
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        ) from e

    max_ids = settings.batch.max_request_ids
    if len(request.ids) > max_ids:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"At most {max_ids} ids per request, got {len(request.ids)}",
        )

    try:
        if request.ordered:
            items = await service.get_ordered(name, request.ids)
        else:
            documents = await service.get_by_collection(name, request.ids)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=e.message,
        ) from e

    if request.ordered:
        return BatchGetResponse(
            collection=name.value,
            items=items,
            count=sum(1 for item in items if item is not None),
        )

    return BatchGetResponse(
        collection=name.value,
        documents=documents,
        count=len(documents),
    )
