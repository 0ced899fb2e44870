# backend/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from backend.config import (
    ALLOWED_ORIGINS,
    GITHUB_TOKEN,
    PROXYCURL_API_KEY,
    ai_enabled,
    is_demo_mode,
)

# -----------
# Logging
# -----------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# -----------
# Routers
# -----------
from backend.routes import dream_role, profile, resume, roadmap  # noqa: E402

app = FastAPI(
    title="SkillRoute API",
    version="1.0.0",
    description="Resume skill extraction, dream-role skill gaps, and 30-day career roadmaps",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    max_age=600,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    response = await call_next(request)
    logging.info("REQ %s %s -> %s", request.method, request.url.path, response.status_code)
    return response


app.include_router(resume.router, prefix="/api")
app.include_router(roadmap.router, prefix="/api")
app.include_router(dream_role.router, prefix="/api")
app.include_router(profile.router, prefix="/api")


# -----------
# Health & root
# -----------
@app.get("/api/health")
def health():
    return {
        "ok": True,
        "ai": ai_enabled(),
        "demo": is_demo_mode(),
        "github": bool(GITHUB_TOKEN),
        "proxycurl": bool(PROXYCURL_API_KEY),
    }


@app.get("/")
def root():
    return {"name": "SkillRoute API", "version": "1.0.0"}


if not ai_enabled():
    logging.warning("OPENAI_API_KEY not set - resume analysis and roadmaps use the local generators")
