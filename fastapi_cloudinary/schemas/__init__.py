from fastapi_cloudinary.schemas.base import BaseSchema
from fastapi_cloudinary.schemas.media import DeleteImagesResult, ProbeResult, SignedUploadUrl
from fastapi_cloudinary.schemas.options import (
    DEFAULT_SIGNED_UPLOAD_URL_OPTIONS,
    CloudinaryModuleOptions,
    SignedUploadUrlOptions,
)

__all__ = [
    "BaseSchema",
    "CloudinaryModuleOptions",
    "DEFAULT_SIGNED_UPLOAD_URL_OPTIONS",
    "DeleteImagesResult",
    "ProbeResult",
    "SignedUploadUrl",
    "SignedUploadUrlOptions",
]
