from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from storefront_relay.adapter.client.media import MediaUploader
from storefront_relay.api.deps import get_uploader, read_body
from storefront_relay.schema.upload import UploadBatchRequest
from storefront_relay.service.upload import upload_batch

router = APIRouter(prefix="/upload", tags=["upload"])


@router.post("")
async def upload(
    body: Any = Depends(read_body),
    uploader: MediaUploader = Depends(get_uploader),
) -> JSONResponse:
    images = UploadBatchRequest.model_validate(body).images if isinstance(body, dict) else []
    return JSONResponse(status_code=201, content=await upload_batch(uploader, images))
