# backend/services/resume_analyzer.py
from __future__ import annotations

import logging
import os
import re
import tempfile
import unicodedata
from typing import Dict, List, Optional

import docx
import pdfplumber
from fastapi import HTTPException, UploadFile, status
from pydantic import ValidationError
from rapidfuzz import fuzz, process

from backend.config import MAX_UPLOAD_BYTES, ai_enabled, is_demo_mode
from backend.constants import CERT_PATTERN, MAX_CERT_SNIPPETS, SKILL_PATTERNS, STOP_WORDS
from backend.exceptions import AIClientError, ResumeTextError
from backend.schemas.skills import ProfileAnalysis, ResumeAnalysis, SkillSet
from backend.services.mock_data import MOCK_RESUME_SKILLS
from backend.services.openai_client import get_client
from backend.utils.text_normalize import normalize

log = logging.getLogger(__name__)

# ---- settings / limits ----
ALLOWED_EXTS = {".pdf", ".docx", ".txt"}  # legacy .doc is not readable by python-docx
ALLOWED_MIMES = {
    "application/pdf": ".pdf",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": ".docx",
    "text/plain": ".txt",
}
MAX_PDF_PAGES = 40
MIN_TEXT_CHARS = 20
MAX_PROMPT_CHARS = 12000

ANALYSIS_PROMPT = """You are an expert career coach and resume analyst. Extract the skills from the resume and assess the profile.

Return a SINGLE JSON object with this EXACT structure:
{
  "skills": ["soft skill"],
  "languages": ["programming language"],
  "tools": ["tool"],
  "frameworks": ["framework"],
  "extracurricular": ["activity or certification"],
  "analysis": {
    "experienceLevel": "Junior|Mid|Senior|Lead",
    "professionalSummary": "2-3 sentence overview",
    "keyStrengths": ["4-5 strengths"],
    "areasForImprovement": ["2-4 specific areas"],
    "recommendations": ["3 actionable next steps"],
    "industryFit": ["2-3 industries or roles"]
  }
}

Rules:
- Extract only items explicitly mentioned in the resume. If uncertain, leave it out.
- Keep the resume's own wording ("React JS" stays "React JS").
- Use [] for categories with no clear mention.
- experienceLevel: Junior 0-2 years, Mid 2-5, Senior 5-10, Lead 10+.

Return ONLY valid JSON, no other text."""

# ---------- text cleanup helpers ----------
_dehyphen_re = re.compile(r"(\w)-\s*\n\s*(\w)")
_multispace_re = re.compile(r"[ \t\f\v]+")


def _clean_text(s: str) -> str:
    """NFC, re-join words hyphenated across line breaks, collapse spaces. Case is kept."""
    if not s:
        return ""
    s = unicodedata.normalize("NFC", s)
    s = _dehyphen_re.sub(r"\1\2", s)
    s = s.replace("\r\n", "\n").replace("\r", "\n")
    s = "\n".join(_multispace_re.sub(" ", line).strip() for line in s.split("\n"))
    return s.strip()


# ---------- file helpers ----------
def _save_to_temp(upload: UploadFile) -> str:
    """Write UploadFile stream to a temp file and return the path."""
    upload.file.seek(0)
    fd, path = tempfile.mkstemp()
    total = 0
    try:
        with os.fdopen(fd, "wb") as out:
            for chunk in iter(lambda: upload.file.read(1024 * 1024), b""):
                total += len(chunk)
                if total > MAX_UPLOAD_BYTES:
                    raise HTTPException(
                        status_code=status.HTTP_400_BAD_REQUEST,
                        detail=f"File {upload.filename} exceeds {MAX_UPLOAD_BYTES // (1024 * 1024)}MB limit",
                    )
                out.write(chunk)
    except HTTPException:
        os.remove(path)
        raise
    return path


def _check_extension(filename: str, content_type: Optional[str]) -> str:
    ext = os.path.splitext(filename or "")[1].lower()
    if ext not in ALLOWED_EXTS:
        raise HTTPException(status_code=400, detail="Only PDF, Word (.docx) or text files are allowed")

    # MIME check is best-effort (browsers sometimes send 'application/octet-stream')
    if content_type and content_type in ALLOWED_MIMES and ALLOWED_MIMES[content_type] != ext:
        log.warning(f"[upload] MIME/ext mismatch for {filename}: {content_type} vs {ext}")
    return ext


def _extract_pdf_text(temp_path: str) -> str:
    with pdfplumber.open(temp_path) as pdf:
        parts = []
        for i, page in enumerate(pdf.pages[:MAX_PDF_PAGES]):
            try:
                parts.append(page.extract_text() or "")
            except Exception as e:
                log.warning(f"[upload] PDF page {i} extraction failed: {e}")
        if len(pdf.pages) > MAX_PDF_PAGES:
            log.info(f"[upload] Truncated PDF to first {MAX_PDF_PAGES} pages")
        return "\n".join(parts)


def _extract_docx_text(temp_path: str) -> str:
    d = docx.Document(temp_path)
    lines = [(p.text or "") for p in d.paragraphs]
    # resumes built from templates keep a lot of text in tables
    for tbl in d.tables:
        for row in tbl.rows:
            for cell in row.cells:
                if cell.text:
                    lines.append(cell.text)
    return "\n".join(lines)


def _extract_txt_text(temp_path: str) -> str:
    try:
        with open(temp_path, "r", encoding="utf-8") as f:
            return f.read()
    except UnicodeDecodeError:
        with open(temp_path, "r", encoding="latin-1", errors="ignore") as f:
            return f.read()


def extract_text(upload: UploadFile) -> str:
    """Extract plain text from a PDF, DOCX or TXT upload (case preserved)."""
    ext = _check_extension(upload.filename, getattr(upload, "content_type", None))
    temp_path = _save_to_temp(upload)
    try:
        if ext == ".pdf":
            text = _extract_pdf_text(temp_path)
        elif ext == ".docx":
            text = _extract_docx_text(temp_path)
        else:
            text = _extract_txt_text(temp_path)
        return _clean_text(text)
    except Exception as e:
        log.exception(f"[upload] Failed to extract text from {upload.filename}: {e}")
        raise HTTPException(
            status_code=400,
            detail=f"Could not read file: {upload.filename}. Try a different PDF or Word document",
        )
    finally:
        try:
            os.remove(temp_path)
        except OSError:
            pass


# ---------- local (regex) extraction ----------
_COMPILED_PATTERNS = {
    category: [
        (name, [re.compile(rf"(?<!\w)(?:{p})(?!\w)", re.I) for p in patterns])
        for name, patterns in entries
    ]
    for category, entries in SKILL_PATTERNS.items()
}
_CERT_RE = re.compile(CERT_PATTERN, re.I)

# lower-cased display name -> (category, display name), for fuzzy fill
_KNOWN_SKILLS = {
    name.lower(): (category, name)
    for category, entries in SKILL_PATTERNS.items()
    for name, _ in entries
}
FUZZY_THRESHOLD = 92
FUZZY_MIN_TOKEN_LEN = 5


def _dedupe(items: List[str]) -> List[str]:
    return list(dict.fromkeys(items))


def _fuzzy_fill(text: str, found: Dict[str, List[str]]) -> None:
    """Catch near-miss spellings ("javascrpt", "kubernets") of known skills."""
    have = {s.lower() for items in found.values() for s in items}
    candidates = [k for k in _KNOWN_SKILLS if k not in have and len(k) >= FUZZY_MIN_TOKEN_LEN]
    if not candidates:
        return
    tokens = {t for t in normalize(text).split() if len(t) >= FUZZY_MIN_TOKEN_LEN and t not in STOP_WORDS}
    for token in sorted(tokens):
        best = process.extractOne(token, candidates, scorer=fuzz.QRatio)
        if best and best[1] >= FUZZY_THRESHOLD:
            category, name = _KNOWN_SKILLS[best[0]]
            found[category].append(name)
            candidates.remove(best[0])
            if not candidates:
                break


def extract_skills_from_text(text: str, *, fuzzy: bool = False) -> SkillSet:
    """
    Regex extraction used when no model is available.

    Looks for a fixed catalogue of frameworks, languages, tools and soft skills,
    plus up to three certification snippets. Falls back to the demo skill set when
    nothing at all is recognised.
    """
    found: Dict[str, List[str]] = {
        category: [name for name, regexes in entries if any(r.search(text) for r in regexes)]
        for category, entries in _COMPILED_PATTERNS.items()
    }
    if fuzzy:
        _fuzzy_fill(text, found)

    certs = [m.group(0).strip() for m in _CERT_RE.finditer(text)][:MAX_CERT_SNIPPETS]

    skills = SkillSet(
        skills=_dedupe(found["skills"]),
        languages=_dedupe(found["languages"]),
        tools=_dedupe(found["tools"]),
        frameworks=_dedupe(found["frameworks"]),
        extracurricular=_dedupe(certs),
    )
    if not any([skills.skills, skills.languages, skills.tools, skills.frameworks, skills.extracurricular]):
        log.info("No skills found in resume text, returning demo skill set")
        return MOCK_RESUME_SKILLS
    return skills


def default_analysis(skills: SkillSet) -> ProfileAnalysis:
    return ProfileAnalysis(
        experience_level="Mid",
        professional_summary=(
            "Your resume has been analyzed. Review your extracted skills and use the "
            "personalized roadmap below to advance your career."
        ),
        key_strengths=skills.skills[:4],
        areas_for_improvement=[
            "Expand technical certifications",
            "Add quantified achievements to experience",
            "Highlight leadership examples",
        ],
        recommendations=[
            "Update your portfolio with recent projects",
            "Connect with professionals in your target industry",
            "Consider contributing to open-source projects",
        ],
        industry_fit=(
            ["Software Development", "Web Development"] if skills.frameworks else ["General Tech", "Product Roles"]
        ),
    )


def _local_analysis(text: str, fuzzy: bool) -> ResumeAnalysis:
    skills = extract_skills_from_text(text, fuzzy=fuzzy)
    return ResumeAnalysis(**skills.model_dump(), analysis=default_analysis(skills))


def _ai_analysis(text: str) -> ResumeAnalysis:
    parsed = get_client().get_json(
        f"{ANALYSIS_PROMPT}\n\n--- RESUME TEXT ---\n{text[:MAX_PROMPT_CHARS]}\n--- END ---\n\n"
        "Return ONLY valid JSON, no other text.",
        temperature=0.2,
    )
    if not isinstance(parsed, dict):
        raise AIClientError("Invalid AI response format")

    analysis = parsed.get("analysis")
    if not isinstance(analysis, dict):
        analysis = {"professionalSummary": "Profile analyzed from resume."}
    try:
        return ResumeAnalysis.model_validate({**parsed, "analysis": analysis})
    except ValidationError as e:
        raise AIClientError(f"Invalid AI response format: {e}") from e


def analyze_resume(text: str, *, fuzzy: bool = False) -> ResumeAnalysis:
    """Skills + coaching assessment for resume text. The model is optional; regex is the fallback."""
    if not isinstance(text, str) or len(text.strip()) < MIN_TEXT_CHARS:
        raise ResumeTextError(
            "Could not extract meaningful text from the resume. "
            "Try a different file or ensure it is not scanned/image-only."
        )

    if is_demo_mode():
        return _local_analysis(text, fuzzy)
    if not ai_enabled():
        log.warning("OPENAI_API_KEY not set, using local analysis")
        return _local_analysis(text, fuzzy)

    try:
        return _ai_analysis(text)
    except AIClientError as e:
        log.warning("AI analysis failed, falling back to local extraction: %s", e)
        return _local_analysis(text, fuzzy)
