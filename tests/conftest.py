from collections.abc import Callable, Generator
from unittest.mock import MagicMock, patch

import httpx
import pytest

from fastapi_cloudinary.module import set_cloudinary_service
from fastapi_cloudinary.schemas.options import CloudinaryModuleOptions
from fastapi_cloudinary.services.cloudinary import CloudinaryService

SERVICE_MODULE = "fastapi_cloudinary.services.cloudinary"

TEST_OPTIONS = CloudinaryModuleOptions(
    cloud_name="demo-cloud", api_key="123456789", api_secret="test-secret"
)


def make_http_client(
    content_type: str | None = "image/png",
    status_code: int = 200,
    error: Exception | None = None,
) -> httpx.AsyncClient:
    """HEAD 요청에 고정 응답을 돌려주는 httpx 클라이언트"""

    def handler(request: httpx.Request) -> httpx.Response:
        if error is not None:
            raise error
        headers = {"content-type": content_type} if content_type else {}
        return httpx.Response(status_code, headers=headers, request=request)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture
def mock_cloudinary() -> Generator[MagicMock, None, None]:
    """cloudinary SDK mock (네트워크 호출 없음)"""
    with patch(f"{SERVICE_MODULE}.cloudinary") as mock:
        yield mock


@pytest.fixture
def service_factory(
    mock_cloudinary: MagicMock,
) -> Callable[..., CloudinaryService]:
    def _create(http_client: httpx.AsyncClient | None = None) -> CloudinaryService:
        return CloudinaryService(TEST_OPTIONS, http_client=http_client)

    return _create


@pytest.fixture
def service(service_factory: Callable[..., CloudinaryService]) -> CloudinaryService:
    return service_factory(make_http_client())


@pytest.fixture(autouse=True)
def reset_service() -> Generator[None, None, None]:
    set_cloudinary_service(None)
    yield
    set_cloudinary_service(None)
