from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from fastapi_cloudinary.schemas.options import CloudinaryModuleOptions


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="CLOUDINARY_", extra="ignore"
    )

    # Cloudinary 계정 (값 누락 검증 없음)
    cloud_name: str = ""
    api_key: str = ""
    api_secret: str = ""

    # https 전송 URL 사용 여부
    secure: bool = True

    def to_module_options(self) -> CloudinaryModuleOptions:
        return CloudinaryModuleOptions(
            cloud_name=self.cloud_name,
            api_key=self.api_key,
            api_secret=self.api_secret,
            secure=self.secure,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
