import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from app.config import Settings, get_settings
from app.constants import PDF_MIME_TYPE
from app.errors import PayloadTooLargeError, ValidationError
from app.models import ErrorResponse, UploadResponse
from app.parsers import extract_text

logger = logging.getLogger(__name__)

router = APIRouter()


def _is_pdf(upload: UploadFile) -> bool:
    content_type = (upload.content_type or "").split(";", 1)[0].strip().lower()
    return content_type == PDF_MIME_TYPE


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
)
async def upload_resume(
    resume: Optional[UploadFile] = File(None),
    settings: Settings = Depends(get_settings),
):
    """
    Upload a resume PDF (form field ``resume``) and get its plain text back.
    """
    if resume is None:
        raise ValidationError("No file uploaded")

    try:
        if not _is_pdf(resume):
            raise ValidationError("Only PDF files are allowed")

        pdf_bytes = await resume.read(settings.max_upload_bytes + 1)
        if len(pdf_bytes) > settings.max_upload_bytes:
            raise PayloadTooLargeError(
                f"Uploaded file exceeds {settings.max_upload_mb} MB"
            )

        text = extract_text(pdf_bytes)
        logger.info("Extracted %d characters from %s", len(text), resume.filename)
        return UploadResponse(text=text)
    finally:
        # The upload is only needed for extraction; drop it on every path.
        await resume.close()
