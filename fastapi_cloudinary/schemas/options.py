"""모듈/서명 옵션 스키마"""

from pydantic import BaseModel, ConfigDict


class CloudinaryModuleOptions(BaseModel):
    """Cloudinary 계정 설정

    앱 시작 시 한 번 생성되어 CloudinaryService가 수명 동안 보관한다.
    """

    model_config = ConfigDict(frozen=True)

    cloud_name: str | None = None
    api_key: str | None = None
    api_secret: str | None = None
    secure: bool = True


class SignedUploadUrlOptions(BaseModel):
    folder: str | None = None
    eager: str | None = None


DEFAULT_SIGNED_UPLOAD_URL_OPTIONS = SignedUploadUrlOptions(folder=None, eager=None)
