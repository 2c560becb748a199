"""UploadMedia endpoints."""

import json
import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile

from upload_service.deps import get_upload_handler
from upload_service.handlers.upload import UploadHandler
from upload_service.schemas.api import ErrorResponse, UploadMediaRequest, UploadMediaResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["upload"])

_error_responses = {
    400: {"model": ErrorResponse, "description": "Missing or empty key/bucket"},
    500: {"model": ErrorResponse, "description": "Storage backend failure"},
}


def _parse_metadata(raw: Optional[str]) -> Optional[dict[str, str]]:
    if not raw:
        return None
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        raise HTTPException(status_code=422, detail=f"metadata is not valid JSON: {e}")
    if not isinstance(parsed, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in parsed.items()
    ):
        raise HTTPException(status_code=422, detail="metadata must be a JSON object of strings")
    return parsed


@router.post("/rpc/UploadMedia", response_model=UploadMediaResponse, responses=_error_responses)
def upload_media(
    body: UploadMediaRequest,
    request: Request,
    handler: UploadHandler = Depends(get_upload_handler),
):
    """UploadMedia RPC: JSON body with a base64 ``file``."""
    return handler.upload_media(body, context=request)


@router.post("/api/media", response_model=UploadMediaResponse, responses=_error_responses)
def upload_media_form(
    request: Request,
    key: str = Form(""),
    bucket: str = Form(""),
    metadata: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    handler: UploadHandler = Depends(get_upload_handler),
):
    """Multipart variant of UploadMedia; a missing file part is an empty object."""
    content = file.file.read() if file is not None else None
    body = UploadMediaRequest(
        key=key,
        bucket=bucket,
        file=content,
        metadata=_parse_metadata(metadata),
    )
    return handler.upload_media(body, context=request)
