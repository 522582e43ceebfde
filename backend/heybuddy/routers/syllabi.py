import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status, UploadFile, File
from sqlalchemy.orm import Session

from heybuddy.config import settings
from heybuddy.database import get_db
from heybuddy.models.syllabus import Syllabus
from heybuddy.schemas.syllabus import ParsedSyllabus, SyllabusResponse, ScheduleResponse
from heybuddy.services.schedule import build_schedule
from heybuddy.utils.document_parser import decode_text_document, DocumentDecodeError
from heybuddy.utils.syllabus_extractor import extract_syllabus

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/syllabi", tags=["Syllabi"])


def _get_user_syllabus(db: Session, syllabus_id: int) -> Syllabus:
    syllabus = db.query(Syllabus).filter(
        Syllabus.id == syllabus_id,
        Syllabus.user_id == settings.DEFAULT_USER_ID
    ).first()

    if not syllabus:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Syllabus not found"
        )
    return syllabus


@router.post("", response_model=SyllabusResponse)
async def upload_syllabus(
    file: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db)
):
    """
    Upload a syllabus, extract its structure once and store both.
    Only plain-text documents are accepted.
    """
    if file is None or not file.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file uploaded"
        )

    try:
        # One byte past the cap is enough to tell an oversized upload apart
        file_content = await file.read(settings.MAX_UPLOAD_BYTES + 1)

        if len(file_content) > settings.MAX_UPLOAD_BYTES:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"File exceeds the {settings.MAX_UPLOAD_BYTES} byte upload limit"
            )

        try:
            text = decode_text_document(file_content)
        except DocumentDecodeError as e:
            logger.warning("Rejected upload %s: %s", file.filename, e)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Could not read {file.filename} as text: {e}"
            )

        parsed = extract_syllabus(text, file.filename)

        syllabus = Syllabus(
            user_id=settings.DEFAULT_USER_ID,
            filename=file.filename,
            content=text,
            parsed_content=parsed.model_dump(mode="json", by_alias=True),
        )
        db.add(syllabus)
        db.commit()
        db.refresh(syllabus)

        logger.info(
            "Stored syllabus %d (%s): %d assignments, %d deadlines",
            syllabus.id, syllabus.filename, len(parsed.assignments), len(parsed.deadlines)
        )
        return syllabus

    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.exception("Syllabus upload failed for %s", file.filename)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to process syllabus: {str(e)}"
        )


@router.get("", response_model=List[SyllabusResponse])
async def get_syllabi(db: Session = Depends(get_db)):
    """Get all syllabi uploaded by the current user, oldest first."""
    return db.query(Syllabus).filter(
        Syllabus.user_id == settings.DEFAULT_USER_ID
    ).order_by(Syllabus.id.asc()).all()


@router.get("/{syllabus_id}", response_model=SyllabusResponse)
async def get_syllabus(syllabus_id: int, db: Session = Depends(get_db)):
    """Get a specific syllabus by ID."""
    return _get_user_syllabus(db, syllabus_id)


@router.get("/{syllabus_id}/schedule", response_model=ScheduleResponse)
async def get_schedule(syllabus_id: int, db: Session = Depends(get_db)):
    """Upcoming deadlines of a syllabus ranked by how soon they are due."""
    syllabus = _get_user_syllabus(db, syllabus_id)
    parsed = ParsedSyllabus.model_validate(syllabus.parsed_content)

    return ScheduleResponse(syllabus_id=syllabus.id, tasks=build_schedule(parsed))
