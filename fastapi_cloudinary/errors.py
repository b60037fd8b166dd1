class CloudinaryError(Exception):
    """Cloudinary 연동 에러

    code로 구체적인 원인 구분:
    - INVALID_IMAGE_URL_TYPE: imageUrl이 문자열이 아님 (400)
    - INVALID_IMAGE_URL: URL 검증 실패 (400)
    - INVALID_FILE: 업로드 파일 없음/빈 파일 (400)
    - INVALID_PUBLIC_ID: publicId 누락 (400)
    - EMPTY_PUBLIC_IDS: 삭제 대상 목록 비어 있음 (400)
    - INVALID_RESOURCE_TYPE: 지원하지 않는 resource type (400)
    - UPLOAD_FAILED: Cloudinary 업로드 실패 (502)
    - DELETE_FAILED: Cloudinary 삭제 실패 (502)
    """

    STATUS_MAP: dict[str, int] = {
        "INVALID_IMAGE_URL_TYPE": 400,
        "INVALID_IMAGE_URL": 400,
        "INVALID_FILE": 400,
        "INVALID_PUBLIC_ID": 400,
        "EMPTY_PUBLIC_IDS": 400,
        "INVALID_RESOURCE_TYPE": 400,
        "UPLOAD_FAILED": 502,
        "DELETE_FAILED": 502,
    }

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")

    @property
    def status_code(self) -> int:
        return self.STATUS_MAP.get(self.code, 500)


class InvalidInputError(CloudinaryError):
    """호출 인자 오류. 요청을 즉시 중단시킨다."""


class RemoteServiceError(CloudinaryError):
    """Cloudinary 측 실패 (네트워크 오류 또는 에러 응답)"""
