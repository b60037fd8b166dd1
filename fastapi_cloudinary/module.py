"""FastAPI 의존성 주입 모듈

사용법:
    from fastapi import FastAPI
    from fastapi_cloudinary import CloudinaryModule, CloudinaryServiceDep, lifespan

    CloudinaryModule.for_root()  # .env / 환경변수 CLOUDINARY_* 사용
    app = FastAPI(lifespan=lifespan)

    @app.delete("/images/{public_id}")
    async def delete(public_id: str, service: CloudinaryServiceDep) -> bool:
        return await service.delete_image(public_id)

옵션을 비동기로 구성하는 경우:
    await CloudinaryModule.for_root_async(load_options_from_vault)
"""

import inspect
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from typing import Annotated, Any

from fastapi import Depends, FastAPI

from fastapi_cloudinary.config import get_settings
from fastapi_cloudinary.schemas.options import CloudinaryModuleOptions
from fastapi_cloudinary.services.cloudinary import CloudinaryService

logger = logging.getLogger(__name__)

OptionsFactory = Callable[..., CloudinaryModuleOptions | Awaitable[CloudinaryModuleOptions]]


class _ServiceHolder:
    instance: CloudinaryService | None = None


def get_cloudinary_service() -> CloudinaryService:
    """등록된 서비스 반환. 없으면 Settings로 생성 (FastAPI Depends용)"""
    if _ServiceHolder.instance is None:
        _ServiceHolder.instance = CloudinaryService(get_settings().to_module_options())
    return _ServiceHolder.instance


def set_cloudinary_service(service: CloudinaryService | None) -> None:
    """서비스 교체 (테스트용, None이면 초기화)"""
    _ServiceHolder.instance = service


CloudinaryServiceDep = Annotated[CloudinaryService, Depends(get_cloudinary_service)]


class CloudinaryModule:
    """프로세스 전역 CloudinaryService 등록"""

    def __init__(self, service: CloudinaryService) -> None:
        self.service = service

    @classmethod
    def for_root(cls, options: CloudinaryModuleOptions | None = None) -> "CloudinaryModule":
        resolved = options or get_settings().to_module_options()
        service = CloudinaryService(resolved)
        set_cloudinary_service(service)
        logger.info(f"Cloudinary 모듈 등록: cloud_name={resolved.cloud_name}")
        return cls(service)

    @classmethod
    async def for_root_async(cls, use_factory: OptionsFactory, *args: Any) -> "CloudinaryModule":
        options = use_factory(*args)
        if inspect.isawaitable(options):
            options = await options
        return cls.for_root(options)

    async def on_startup(self) -> None:
        await self.service.ping()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    await CloudinaryModule(get_cloudinary_service()).on_startup()
    yield
