# backend/routes/roadmap.py
import asyncio
import logging

from fastapi import APIRouter, HTTPException

from backend.exceptions import InvalidArgumentError
from backend.schemas.roadmap import RoadmapRequest, RoadmapResponse, SkillGapRequest
from backend.schemas.skills import SkillGapResult
from backend.services.gap_calculator import compute_gaps
from backend.services.milestones import roadmap_key
from backend.services.roadmap_generator import generate_roadmap

log = logging.getLogger("routes.roadmap")

router = APIRouter(tags=["Roadmap"])


@router.post("/roadmap", response_model=RoadmapResponse)
async def create_roadmap(body: RoadmapRequest):
    """
    15-milestone, ~30-day roadmap for the submitted skills.

    With profileData.dreamRole set, the roadmap targets that role's skill gaps.
    Model failures fall back to the local generator, so this only fails on bad input.
    """
    try:
        milestones, source = await asyncio.to_thread(generate_roadmap, body.skills, body.profile_data)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        log.exception("create_roadmap failed")
        raise HTTPException(status_code=500, detail="Failed to generate roadmap")

    return RoadmapResponse(milestones=milestones, roadmap_id=roadmap_key(milestones), source=source)


@router.post("/skill-gaps", response_model=SkillGapResult)
def skill_gaps(body: SkillGapRequest):
    """Missing / matched skills and match percentage against a dream role."""
    try:
        return compute_gaps(body.current_skills, body.dream_role)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
