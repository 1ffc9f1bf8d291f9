import os
import random
import time
from typing import Optional

import anyio
from fastapi import UploadFile

from job_portal.config import settings
from job_portal.utils.logger import storage_logger

def generate_filename(original_name: Optional[str]) -> str:
    """업로드 파일명 생성: <epoch ms>-<난수><원본 확장자>"""
    unique_suffix = f"{int(time.time() * 1000)}-{round(random.random() * 1e9)}"
    _, ext = os.path.splitext(original_name or "")
    return unique_suffix + ext

async def save_upload(file: Optional[UploadFile], upload_dir: Optional[str] = None) -> Optional[str]:
    """
    업로드 파일을 디스크에 저장하고 저장된 파일명을 반환합니다.
    파일이 없으면 None.
    """
    if file is None or not file.filename:
        return None

    target_dir = anyio.Path(upload_dir or settings.UPLOAD_DIR)
    await target_dir.mkdir(parents=True, exist_ok=True)

    filename = generate_filename(file.filename)
    content = await file.read()
    await (target_dir / filename).write_bytes(content)

    storage_logger.info(f"업로드 파일 저장 완료: {filename} ({len(content)} bytes)")
    return filename
