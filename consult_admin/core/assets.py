"""Image host client built on the Cloudinary SDK."""

import base64
import logging
from typing import Any, Dict

import cloudinary
import cloudinary.api
import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError

from consult_admin.core.config import Settings, settings
from consult_admin.core.exceptions import AssetError

logger = logging.getLogger(__name__)

HOSTED_URL_PATTERN = r"https://res\.cloudinary\.com/[^\s\"]+"

# 업로드 시 자동 품질/포맷 변환
UPLOAD_TRANSFORMATION = [{"quality": "auto", "fetch_format": "auto"}]


class AssetHost:
    """
    이미지 호스팅 업로드/삭제/조회 클래스
    """
    def __init__(self, config: Settings):
        cloudinary.config(
            cloud_name=config.CLOUDINARY_CLOUD_NAME,
            api_key=config.CLOUDINARY_API_KEY,
            api_secret=config.CLOUDINARY_API_SECRET,
            secure=True,
        )

    # 업로드 → {secure_url, public_id}
    def upload(self, data: bytes, mime_type: str, folder: str = "services") -> Dict[str, Any]:
        encoded = base64.b64encode(data).decode("ascii")
        try:
            return cloudinary.uploader.upload(
                f"data:{mime_type};base64,{encoded}",
                folder=folder,
                transformation=UPLOAD_TRANSFORMATION,
            )
        except CloudinaryError as exc:
            logger.error("Image upload failed: %s", exc)
            raise AssetError("Failed to upload image") from exc

    # 삭제, 성공 여부 반환
    def destroy(self, public_id: str) -> bool:
        try:
            result = cloudinary.uploader.destroy(public_id)
        except CloudinaryError as exc:
            logger.error("Image delete failed for %s: %s", public_id, exc)
            return False
        return result.get("result") == "ok"

    # 메타데이터 조회 (url, format, width, height)
    def resource(self, public_id: str) -> Dict[str, Any]:
        try:
            return cloudinary.api.resource(public_id)
        except CloudinaryError as exc:
            raise AssetError(f"Failed to fetch image metadata for {public_id}") from exc


_asset_host = AssetHost(settings)


# 이미지 호스트 의존성 (테스트에서 교체)
def get_asset_host() -> AssetHost:
    return _asset_host
