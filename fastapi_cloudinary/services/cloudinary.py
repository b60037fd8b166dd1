"""Cloudinary 서비스

cloudinary SDK 호출을 감싸고 응답을 가공한다. SDK는 동기 I/O라 asyncio.to_thread로 실행.

사용법:
    from fastapi_cloudinary.module import CloudinaryServiceDep

    @router.post("/images")
    async def create_image(url: str, service: CloudinaryServiceDep) -> dict:
        return await service.upload_by_url(url, {"folder": "covers"})
"""

# pyright: reportMissingTypeStubs=false

import asyncio
import io
import logging
import time
from types import ModuleType
from typing import Any

import cloudinary
import cloudinary.api
import cloudinary.uploader
import cloudinary.utils
import httpx
from fastapi import UploadFile

from fastapi_cloudinary.constants import API_BASE_URL, DeleteStatus, ResourceType
from fastapi_cloudinary.errors import InvalidInputError, RemoteServiceError
from fastapi_cloudinary.schemas.media import DeleteImagesResult, SignedUploadUrl
from fastapi_cloudinary.schemas.options import (
    DEFAULT_SIGNED_UPLOAD_URL_OPTIONS,
    CloudinaryModuleOptions,
    SignedUploadUrlOptions,
)
from fastapi_cloudinary.services.image_url import get_filename_from_image_url, validate_image_url

logger = logging.getLogger(__name__)


class CloudinaryService:
    """Cloudinary 업로드/삭제/서명 URL 서비스

    Note: 계정 설정은 생성 시 한 번 주입되고 모든 SDK 호출에 명시적으로 전달된다.
    """

    def __init__(
        self,
        options: CloudinaryModuleOptions,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.options = options
        self._http_client = http_client
        cloudinary.config(**options.model_dump(exclude_none=True))

    @property
    def cloudinary_instance(self) -> ModuleType:
        """설정이 적용된 cloudinary SDK 모듈 (여기서 감싸지 않은 기능용)"""
        return cloudinary

    @property
    def _credentials(self) -> dict[str, str]:
        credentials = {
            "cloud_name": self.options.cloud_name,
            "api_key": self.options.api_key,
            "api_secret": self.options.api_secret,
        }
        return {key: value for key, value in credentials.items() if value}

    async def ping(self) -> dict[str, Any] | None:
        """연결 상태 확인. 실패해도 예외 없이 None 반환 (앱 시작 시 호출)"""
        try:
            result = await asyncio.to_thread(cloudinary.api.ping, **self._credentials)
        except Exception as e:
            logger.warning(f"Cloudinary 연결 확인 실패: {e}")
            return None

        logger.info(f"Cloudinary 연결 상태: {result.get('status')}")
        return dict(result)

    async def upload_file(
        self, file: UploadFile | bytes, options: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """메모리 버퍼(UploadFile 또는 bytes)를 Cloudinary에 업로드

        Raises:
            InvalidInputError: 파일이 없거나 비어 있는 경우
            RemoteServiceError: Cloudinary 업로드 실패 시
        """
        content = await file.read() if isinstance(file, UploadFile) else file
        if not content:
            logger.error("업로드 파일 없음")
            raise InvalidInputError("INVALID_FILE", "Invalid file provided for upload.")

        return await self._upload(io.BytesIO(content), options)

    async def upload_by_url(
        self, image_url: str, options: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """원격 이미지 URL을 검증한 뒤 Cloudinary에 업로드

        URL에서 추출한 이름이 비어 있지 않으면 public_id로 사용한다.
        전달받은 options는 변경하지 않는다.

        Returns:
            dict: Cloudinary 업로드 응답 (그대로 반환)

        Raises:
            InvalidInputError: image_url이 문자열이 아니거나 검증 실패 시
            RemoteServiceError: Cloudinary 업로드 실패 시
        """
        logger.debug(f"URL 업로드 요청: {image_url}")
        if not isinstance(image_url, str):
            logger.error(f"imageUrl 타입 오류: {type(image_url).__name__}")
            raise InvalidInputError(
                "INVALID_IMAGE_URL_TYPE", "Invalid parameter: imageUrl must be a string"
            )

        if not await validate_image_url(image_url, self._http_client):
            logger.warning(f"유효하지 않은 이미지 URL: {image_url}")
            raise InvalidInputError("INVALID_IMAGE_URL", "Invalid image URL")

        upload_options = dict(options or {})
        filename = get_filename_from_image_url(image_url)
        if filename:
            upload_options["public_id"] = filename

        logger.debug(f"업로드 시작: public_id={filename or '(자동)'}")
        return await self._upload(image_url, upload_options)

    async def delete_image(self, public_id: str) -> bool:
        """단일 이미지 삭제. 결과가 "ok"일 때만 True

        Raises:
            InvalidInputError: public_id가 비어 있는 경우
            RemoteServiceError: Cloudinary 호출 실패 시
        """
        if not public_id:
            logger.error("삭제할 publicId 없음")
            raise InvalidInputError("INVALID_PUBLIC_ID", "Invalid publicId provided for deletion.")

        try:
            result = await asyncio.to_thread(
                cloudinary.uploader.destroy, public_id, **self._credentials
            )
        except Exception as e:
            logger.error(f"이미지 삭제 실패: {public_id} - {e}")
            raise RemoteServiceError("DELETE_FAILED", f"Failed to delete image: {e}") from e

        return bool(result) and result.get("result") == DeleteStatus.OK

    async def delete_images(self, public_ids: list[str]) -> DeleteImagesResult:
        """여러 이미지 일괄 삭제 (부분 실패 허용)

        모든 입력 id는 deleted/failed 중 정확히 한 곳에 들어간다.
        응답에 없는 id는 failed로 분류.

        Raises:
            InvalidInputError: 목록이 비었거나 빈 id가 포함된 경우
            RemoteServiceError: Cloudinary 호출 자체가 실패한 경우
        """
        if not public_ids:
            logger.error("삭제할 publicId 목록이 비어 있음")
            raise InvalidInputError("EMPTY_PUBLIC_IDS", "No publicIds provided for deletion.")

        if any(not public_id for public_id in public_ids):
            logger.error(f"빈 publicId 포함: {public_ids}")
            raise InvalidInputError(
                "INVALID_PUBLIC_ID", "One or more invalid publicIds provided for deletion."
            )

        try:
            result = await asyncio.to_thread(
                cloudinary.api.delete_resources, public_ids, **self._credentials
            )
        except Exception as e:
            logger.error(f"일괄 삭제 실패: {e}")
            raise RemoteServiceError("DELETE_FAILED", f"Failed to delete images: {e}") from e

        unique_ids = list(dict.fromkeys(public_ids))
        statuses: dict[str, str] = (result or {}).get("deleted") or {}
        if not statuses:
            return DeleteImagesResult(deleted=[], failed=unique_ids)

        deleted: list[str] = []
        failed: list[str] = []
        for public_id in unique_ids:
            if statuses.get(public_id) == DeleteStatus.DELETED:
                deleted.append(public_id)
            else:
                failed.append(public_id)

        if failed:
            logger.warning(
                f"일부 이미지 삭제 실패: {len(failed)}/{len(unique_ids)}개 - {statuses}"
            )

        return DeleteImagesResult(deleted=deleted, failed=failed)

    def create_signed_upload_url(
        self,
        public_id: str,
        resource_type: str = ResourceType.IMAGE,
        options: SignedUploadUrlOptions | None = None,
    ) -> SignedUploadUrl:
        """클라이언트 직접 업로드용 서명 생성

        See: https://cloudinary.com/documentation/signatures

        Raises:
            InvalidInputError: 지원하지 않는 resource_type
        """
        if resource_type not in ResourceType.ALL:
            raise InvalidInputError(
                "INVALID_RESOURCE_TYPE", f"Unknown resource type: {resource_type!r}"
            )

        merged = DEFAULT_SIGNED_UPLOAD_URL_OPTIONS.model_copy(
            update=options.model_dump(exclude_unset=True) if options else {}
        )
        url = f"{API_BASE_URL}/{self.options.cloud_name}/{resource_type}/upload"
        timestamp = str(int(time.time()))

        params_to_sign = {
            "timestamp": timestamp,
            "folder": merged.folder,
            "eager": merged.eager,
            "public_id": public_id,
        }
        signature = cloudinary.utils.api_sign_request(
            {key: value for key, value in params_to_sign.items() if value is not None},
            self.options.api_secret,
        )

        return SignedUploadUrl(
            url=url,
            public_id=public_id,
            api_key=self.options.api_key,
            timestamp=timestamp,
            eager=merged.eager,
            folder=merged.folder,
            signature=signature,
        )

    async def _upload(self, file: Any, options: dict[str, Any] | None) -> dict[str, Any]:
        try:
            result = await asyncio.to_thread(
                cloudinary.uploader.upload, file, **{**(options or {}), **self._credentials}
            )
        except Exception as e:
            logger.error(f"Cloudinary 업로드 실패: {e}")
            raise RemoteServiceError("UPLOAD_FAILED", f"Cloudinary upload failed: {e}") from e

        logger.info(f"Cloudinary 업로드 완료: {result.get('public_id')}")
        return result
