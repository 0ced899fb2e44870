# backend/services/roadmap_generator.py
import json
import logging
from typing import Any, List, Optional, Tuple

from backend.config import ai_enabled, is_demo_mode
from backend.constants import ROADMAP_SIZE
from backend.exceptions import AIClientError, InvalidArgumentError
from backend.schemas.roadmap import Milestone, ProfileData
from backend.schemas.skills import ResumeAnalysis, SkillGapResult, SkillSet
from backend.services.gap_calculator import compute_gaps, gap_summary
from backend.services.milestones import normalize_milestones
from backend.services.openai_client import get_client
from backend.services.roadmap_fallback import generate_local_roadmap

log = logging.getLogger(__name__)

ROADMAP_PROMPT = f"""You are an expert career coach. Build a personalized 30-day career roadmap from the resume data below.

Rules:
1. Every milestone must reference the person's actual skills, tools, frameworks and experience. No generic tasks.
2. Match difficulty to the experience level implied by the data.
3. If GitHub is validated include repository/portfolio work; if LinkedIn is validated include networking work.
4. Order: resume and portfolio first, then outreach, interview prep, applications last.
5. Return {{"milestones": [...]}} with EXACTLY {ROADMAP_SIZE} items, each {{"title": "short action", "description": "specific how-to", "days": 1-7}}.
6. Days should add up to roughly 30.

Return ONLY valid JSON. No markdown."""

DREAM_ROLE_ROADMAP_PROMPT = f"""You are an expert career coach. Build a 30-day learning roadmap that closes the gap between the user's current skills and their dream role.

Rules:
1. The skillGaps section is computed, not estimated. Reference the exact missing skills it lists.
2. Order by impact: high-value technical gaps first (days 1-7), then popular framework/tool gaps, then a project that combines new and existing skills, then portfolio polish, networking and applications last.
3. Do not teach skills the user already has; build on them instead.
4. Each milestone builds on the previous ones. Days per milestone 1-7, roughly 30 in total.
5. Return {{"milestones": [...]}} with EXACTLY {ROADMAP_SIZE} items, each {{"title": "short action (5 words max)", "description": "specific, detailed how-to", "days": 1-7}}.

Return ONLY valid JSON. No markdown."""


def extract_milestone_list(payload: Any) -> List[Any]:
    """Accept {"milestones": [...]}, {"items": [...]} or a bare list; anything else -> []."""
    if isinstance(payload, dict):
        payload = payload.get("milestones") or payload.get("items") or []
    return payload if isinstance(payload, list) else []


def _build_context(skills: SkillSet, profile: ProfileData, gaps: Optional[SkillGapResult]) -> dict:
    context = {
        "currentSkills": skills.model_dump(
            by_alias=True, include={"skills", "languages", "tools", "frameworks", "extracurricular"}
        ),
        "resumeAnalysis": None,
        "profileInfo": {"hasGitHub": profile.github_valid, "hasLinkedIn": profile.linkedin_valid},
    }
    if isinstance(skills, ResumeAnalysis) and skills.analysis is not None:
        context["resumeAnalysis"] = skills.analysis.model_dump(by_alias=True)
    if profile.dream_role is not None and gaps is not None:
        context["dreamRole"] = profile.dream_role.model_dump(by_alias=True)
        context["skillGaps"] = {
            "shortSummary": gap_summary(gaps),
            "detailed": gaps.model_dump(by_alias=True),
        }
    return context


def _ai_roadmap(skills: SkillSet, profile: ProfileData, gaps: Optional[SkillGapResult]) -> List[Any]:
    prompt = DREAM_ROLE_ROADMAP_PROMPT if gaps is not None else ROADMAP_PROMPT
    context = json.dumps(_build_context(skills, profile, gaps), indent=2)
    payload = get_client().get_json(
        f"{prompt}\n\n--- USER PROFILE DATA ---\n{context}\n--- END ---\n\n"
        f"Return ONLY valid JSON with exactly {ROADMAP_SIZE} milestones. No other text.",
        temperature=0.2,
    )
    milestones = extract_milestone_list(payload)
    if not milestones:
        raise AIClientError("Roadmap response contained no milestones")
    return milestones


def generate_roadmap(skills, profile: Optional[ProfileData] = None) -> Tuple[List[Milestone], str]:
    """
    Produce the 15-step roadmap for a skill set.

    Returns (milestones, source) where source is "ai" or "local". AI problems never
    surface to the caller: demo mode, a missing key or any failure falls back to
    the local generator.
    """
    if not isinstance(skills, SkillSet):
        if not isinstance(skills, dict):
            raise InvalidArgumentError(f"skills must be a SkillSet or mapping, got {type(skills).__name__}")
        skills = ResumeAnalysis.model_validate(skills)
    profile = profile or ProfileData()

    gaps = None
    if profile.dream_role is not None:
        gaps = compute_gaps(skills.current_skills(), profile.dream_role)

    local = generate_local_roadmap(skills, gaps, profile.dream_role)

    if is_demo_mode():
        return local, "local"
    if not ai_enabled():
        log.warning("OPENAI_API_KEY not set, using local roadmap")
        return local, "local"

    try:
        raw = _ai_roadmap(skills, profile, gaps)
    except AIClientError as e:
        log.warning("AI roadmap failed, falling back to local: %s", e)
        return local, "local"

    return normalize_milestones(raw, filler=local), "ai"
