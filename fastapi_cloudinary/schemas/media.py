"""Cloudinary 응답 가공 스키마"""

from pydantic import BaseModel

from fastapi_cloudinary.schemas.base import BaseSchema


class ProbeResult(BaseModel):
    """HEAD 요청 결과 (본문 없이 메타데이터만)"""

    ok: bool
    status_code: int | None = None
    content_type: str | None = None


class SignedUploadUrl(BaseSchema):
    """클라이언트 직접 업로드용 서명 파라미터"""

    url: str
    public_id: str
    api_key: str | None
    timestamp: str
    eager: str | None = None
    folder: str | None = None
    signature: str


class DeleteImagesResult(BaseSchema):
    deleted: list[str]
    failed: list[str]
