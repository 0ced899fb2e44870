# backend/schemas/__init__.py
from backend.schemas.skills import (
    ProfileAnalysis,
    ResumeAnalysis,
    RoleRequirement,
    SkillGapResult,
    SkillSet,
)
from backend.schemas.roadmap import (
    Milestone,
    ProfileData,
    RoadmapRequest,
    RoadmapResponse,
    SkillGapRequest,
)

__all__ = [
    "Milestone",
    "ProfileAnalysis",
    "ProfileData",
    "ResumeAnalysis",
    "RoadmapRequest",
    "RoadmapResponse",
    "RoleRequirement",
    "SkillGapRequest",
    "SkillGapResult",
    "SkillSet",
]
