# backend/routes/resume.py
import asyncio
import logging

from fastapi import APIRouter, File, HTTPException, UploadFile

from backend.exceptions import ResumeTextError
from backend.schemas.skills import ResumeAnalysis
from backend.services.resume_analyzer import analyze_resume, extract_text

log = logging.getLogger("routes.resume")

router = APIRouter(tags=["Resume"])


@router.post("/upload", response_model=ResumeAnalysis)
async def upload_resume(
    resume: UploadFile = File(..., description="Resume file (.pdf, .docx, .txt), max 5MB"),
):
    """
    Extract skills from an uploaded resume.

    Uses the model when OPENAI_API_KEY is configured, otherwise (or when the model
    call fails) the regex extractor.
    """
    if not resume or not resume.filename:
        raise HTTPException(status_code=400, detail="No resume file provided")

    # Extraction can be CPU/IO heavy; push to thread
    text = await asyncio.to_thread(extract_text, resume)
    try:
        return await asyncio.to_thread(analyze_resume, text, fuzzy=True)
    except ResumeTextError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception:
        log.exception("upload_resume failed for %s", resume.filename)
        raise HTTPException(status_code=500, detail="Failed to analyze resume")
