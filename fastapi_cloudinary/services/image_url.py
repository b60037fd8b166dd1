"""원격 이미지 URL 검증 및 public_id 추출

업로드(URL) 전에 호출:
    1. validate_image_url: 형식 확인 → HEAD 요청 → content-type이 image/* 인지 확인
    2. get_filename_from_image_url: URL 경로 끝부분에서 저장 키로 쓸 이름 추출

검증하지 않는 것: 실제 이미지 바이트(매직 넘버), 파일 크기, 유해 콘텐츠
"""

import logging

import httpx

from fastapi_cloudinary.constants import ImageUrl
from fastapi_cloudinary.schemas.media import ProbeResult

logger = logging.getLogger(__name__)


async def probe_image_url(url: str, client: httpx.AsyncClient | None = None) -> ProbeResult:
    """HEAD 요청으로 도달 가능 여부와 content-type 확인 (본문 없음)

    타임아웃은 httpx 기본값, 재시도 없음. 네트워크 오류와 2xx 외 응답은 실패로 반환한다.
    """
    try:
        if client is None:
            async with httpx.AsyncClient(follow_redirects=True) as new_client:
                resp = await new_client.head(url)
        else:
            resp = await client.head(url, follow_redirects=True)
        resp.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.debug(f"HEAD 응답 오류: {url} - {e.response.status_code}")
        return ProbeResult(ok=False, status_code=e.response.status_code)
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
        # ValueError: idna 호스트 파싱 실패 (UnicodeError 포함)
        logger.debug(f"HEAD 요청 실패: {url} - {e!r}")
        return ProbeResult(ok=False)

    return ProbeResult(
        ok=True,
        status_code=resp.status_code,
        content_type=resp.headers.get("content-type"),
    )


async def validate_image_url(url: str, client: httpx.AsyncClient | None = None) -> bool:
    """URL이 실제로 가져올 수 있는 이미지를 가리키는지 확인 (예외 없음, 실패 시 False)"""
    logger.debug(f"이미지 URL 검증: {url}")

    if not isinstance(url, str) or not url.strip():
        logger.warning("빈 URL")
        return False

    if not ImageUrl.PATTERN.match(url):
        logger.warning(f"URL 형식 오류: {url}")
        return False

    probe = await probe_image_url(url, client)
    if not probe.ok:
        return False

    content_type = probe.content_type or ""
    if not content_type.startswith(ImageUrl.CONTENT_TYPE_PREFIX):
        logger.warning(f"이미지가 아닌 content-type: {probe.content_type}")
        return False

    logger.debug(f"content-type {content_type}")
    return True


def get_filename_from_image_url(url: str) -> str:
    """URL 마지막 경로 조각에서 public_id용 이름 추출 (순수 함수)

    - 쿼리스트링 제거
    - 점 1개: 확장자 제거 ("photo.jpg" → "photo")
    - 점 2개 이상: 마지막 조각만 버리고 "-"로 연결 ("archive.tar.gz" → "archive-tar")
    - ? # % < > 제거

    빈 문자열이 나올 수 있음 (호출 측에서 public_id 생략).
    """
    segments = [segment for segment in url.split("/") if segment]
    filename = segments[-1] if segments else ""
    filename = filename.split("?", 1)[0]

    if "." in filename:
        parts = filename.split(".")
        if len(parts) > 2:
            filename = "-".join(parts[:-1])
        else:
            filename = parts[0]

    filename = ImageUrl.FORBIDDEN_CHARS.sub("", filename)
    logger.debug(f"추출된 파일명: {filename}")
    return filename
