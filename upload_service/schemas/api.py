"""Wire models for the UploadMedia RPC."""

import base64
import binascii
from typing import Optional

from pydantic import BaseModel, field_serializer, field_validator

_URLSAFE_TO_STD = str.maketrans("-_", "+/")


class UploadMediaRequest(BaseModel):
    """UploadMedia request.

    Unset ``key``/``bucket`` default to the empty string, so an omitted field
    and an explicitly empty one look the same to the handler.
    """

    key: str = ""
    bucket: str = ""
    file: Optional[bytes] = None  # base64 in JSON
    metadata: Optional[dict[str, str]] = None

    @field_validator("file", mode="before")
    @classmethod
    def _decode_file(cls, value):
        """Decode JSON ``file`` strings; standard and URL-safe alphabets both work."""
        if isinstance(value, str):
            try:
                return base64.b64decode(value.translate(_URLSAFE_TO_STD), validate=True)
            except binascii.Error as e:
                raise ValueError(f"file is not valid base64: {e}") from e
        return value

    @field_serializer("file", when_used="json")
    def _encode_file(self, value: Optional[bytes]) -> Optional[str]:
        if value is None:
            return None
        return base64.b64encode(value).decode("ascii")


class UploadMediaResponse(BaseModel):
    """UploadMedia response carrying the stored object's locator."""

    output: str


class ErrorResponse(BaseModel):
    """Error body returned for failed uploads."""

    error: str
    message: str
