# backend/schemas/roadmap.py
from typing import List, Literal, Optional

from pydantic import Field, field_validator

from backend.constants import DESCRIPTION_MAX_CHARS, MAX_DAYS, MIN_DAYS, TITLE_MAX_CHARS
from backend.schemas.skills import CamelModel, ResumeAnalysis, RoleRequirement

RoadmapSource = Literal["ai", "local"]


class Milestone(CamelModel):
    title: str = Field(..., max_length=TITLE_MAX_CHARS)
    description: str = Field("", max_length=DESCRIPTION_MAX_CHARS)
    days: int = Field(..., ge=MIN_DAYS, le=MAX_DAYS)


class ProfileData(CamelModel):
    github_valid: bool = False
    linkedin_valid: bool = False
    dream_role: Optional[RoleRequirement] = None

    @field_validator("dream_role", mode="before")
    @classmethod
    def _empty_role_is_none(cls, v):
        # the client sends {} when no dream role was analyzed
        return None if v == {} else v


class RoadmapRequest(CamelModel):
    skills: ResumeAnalysis
    profile_data: ProfileData = Field(default_factory=ProfileData)


class RoadmapResponse(CamelModel):
    milestones: List[Milestone]
    roadmap_id: str
    source: RoadmapSource = "local"


class SkillGapRequest(CamelModel):
    current_skills: List[str] = Field(default_factory=list)
    dream_role: RoleRequirement
