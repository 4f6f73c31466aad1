"""
Media upload signing for direct browser uploads to Cloudinary.
"""
from typing import Dict, Any, Optional
import time
import logging
import cloudinary.utils
from usandours.core.config import settings
from usandours.core.exceptions import UpstreamError

logger = logging.getLogger(__name__)


def sign_upload(folder: Optional[str] = None, timestamp: Optional[int] = None) -> Dict[str, Any]:
    """
    Sign upload parameters so the client can post images straight to Cloudinary.

    Only `timestamp` and (optionally) `folder` are signed; the client must send
    exactly those parameters with the upload.
    """
    if not settings.CLOUDINARY_API_SECRET:
        logger.error("CLOUDINARY_API_SECRET is not configured.")
        raise UpstreamError("Media uploads are not configured")

    timestamp = timestamp if timestamp is not None else int(time.time())
    params = {"timestamp": timestamp}
    if folder:
        params["folder"] = folder

    signature = cloudinary.utils.api_sign_request(params, settings.CLOUDINARY_API_SECRET)

    return {
        "signature": signature,
        "timestamp": timestamp,
        "cloud_name": settings.CLOUDINARY_CLOUD_NAME,
        "api_key": settings.CLOUDINARY_API_KEY,
    }
