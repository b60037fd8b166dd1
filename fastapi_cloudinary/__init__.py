from fastapi_cloudinary.config import Settings, get_settings
from fastapi_cloudinary.constants import CLOUDINARY, ResourceType
from fastapi_cloudinary.errors import CloudinaryError, InvalidInputError, RemoteServiceError
from fastapi_cloudinary.module import (
    CloudinaryModule,
    CloudinaryServiceDep,
    get_cloudinary_service,
    lifespan,
    set_cloudinary_service,
)
from fastapi_cloudinary.schemas import (
    DEFAULT_SIGNED_UPLOAD_URL_OPTIONS,
    CloudinaryModuleOptions,
    DeleteImagesResult,
    ProbeResult,
    SignedUploadUrl,
    SignedUploadUrlOptions,
)
from fastapi_cloudinary.services.cloudinary import CloudinaryService
from fastapi_cloudinary.services.image_url import (
    get_filename_from_image_url,
    probe_image_url,
    validate_image_url,
)

__all__ = [
    "CLOUDINARY",
    "CloudinaryError",
    "CloudinaryModule",
    "CloudinaryModuleOptions",
    "CloudinaryService",
    "CloudinaryServiceDep",
    "DEFAULT_SIGNED_UPLOAD_URL_OPTIONS",
    "DeleteImagesResult",
    "InvalidInputError",
    "ProbeResult",
    "RemoteServiceError",
    "ResourceType",
    "Settings",
    "SignedUploadUrl",
    "SignedUploadUrlOptions",
    "get_cloudinary_service",
    "get_filename_from_image_url",
    "get_settings",
    "lifespan",
    "probe_image_url",
    "set_cloudinary_service",
    "validate_image_url",
]
