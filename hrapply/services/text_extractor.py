"""
Resume text extraction
Saves an upload to a scoped temporary file and pulls plain text out of it
"""

import uuid
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

import aiofiles
import fitz  # PyMuPDF
import structlog
from fastapi import UploadFile

from hrapply.core.exceptions import UploadTooLargeError

logger = structlog.get_logger()

PDF_CONTENT_TYPE = "application/pdf"
CHUNK_SIZE = 64 * 1024


@asynccontextmanager
async def scoped_upload(upload_file: UploadFile, upload_dir: Path, max_bytes: int) -> AsyncIterator[Path]:
    """
    Stream an upload to disk and delete it when the block exits

    The file is removed on every exit path, including a size-limit failure
    while streaming.

    Args:
        upload_file: Incoming multipart file
        upload_dir: Directory for temporary uploads
        max_bytes: Largest accepted upload

    Yields:
        Path: Location of the saved upload
    """
    upload_dir.mkdir(parents=True, exist_ok=True)
    destination = upload_dir / uuid.uuid4().hex
    total_size = 0

    try:
        async with aiofiles.open(destination, "wb") as f:
            while chunk := await upload_file.read(CHUNK_SIZE):
                total_size += len(chunk)
                if total_size > max_bytes:
                    raise UploadTooLargeError(max_bytes)
                await f.write(chunk)

        logger.info("Upload saved",
                    filename=upload_file.filename,
                    content_type=upload_file.content_type,
                    total_bytes=total_size)

        yield destination
    finally:
        destination.unlink(missing_ok=True)


def pdf_to_text(pdf_path: Path) -> str:
    """
    Extract plain text from PDF using PyMuPDF

    Args:
        pdf_path: Path to the PDF file

    Returns:
        Extracted text content
    """
    with fitz.open(str(pdf_path)) as doc:
        pages = [page.get_text() for page in doc]

    text = "\n\n".join(page for page in pages if page.strip())

    logger.info("PDF text extraction completed", pages=len(pages), characters=len(text))
    return text


def extract_text(path: Path, content_type: str) -> str:
    """PDF uploads are parsed, everything else is read as UTF-8 text"""
    if content_type == PDF_CONTENT_TYPE:
        return pdf_to_text(path)
    return path.read_text(encoding="utf-8", errors="replace")
