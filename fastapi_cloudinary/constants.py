import re

CLOUDINARY = "Cloudinary"

API_BASE_URL = "https://api.cloudinary.com/v1_1"


class ImageUrl:
    # scheme://host.tld... 최소 형태만 확인 (공백 불가)
    PATTERN = re.compile(r"^https?://[^ ]+\.[^ ]+$")
    CONTENT_TYPE_PREFIX = "image/"
    FORBIDDEN_CHARS = re.compile(r"[?#%<>]+")


class ResourceType:
    IMAGE = "image"
    VIDEO = "video"
    RAW = "raw"
    AUTO = "auto"

    ALL = frozenset({IMAGE, VIDEO, RAW, AUTO})


class DeleteStatus:
    OK = "ok"  # uploader.destroy
    DELETED = "deleted"  # api.delete_resources
