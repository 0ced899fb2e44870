# backend/routes/dream_role.py
import asyncio
import logging

from fastapi import APIRouter, HTTPException

from backend.config import ai_enabled, is_demo_mode
from backend.exceptions import DreamRoleAnalysisError, InvalidArgumentError
from backend.schemas.profile import DreamRoleRequest
from backend.schemas.skills import RoleRequirement
from backend.services.dream_role import analyze_dream_role

log = logging.getLogger("routes.dream_role")

router = APIRouter(tags=["Dream Role"])


@router.post("/analyze-dream-role", response_model=RoleRequirement)
async def dream_role(body: DreamRoleRequest):
    if not is_demo_mode() and not ai_enabled():
        raise HTTPException(
            status_code=503,
            detail="Dream role analysis is not configured. Add OPENAI_API_KEY to .env",
        )
    try:
        return await asyncio.to_thread(analyze_dream_role, body.role_title)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DreamRoleAnalysisError as e:
        raise HTTPException(status_code=502, detail=str(e) or "Failed to analyze dream role")
