# backend/schemas/skills.py
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

RoleLevel = Literal["Entry", "Mid", "Senior", "Lead"]

_LEVEL_MAP = {
    "entry": "Entry",
    "junior": "Entry",
    "mid": "Mid",
    "senior": "Senior",
    "lead": "Lead",
}


def _string_list(value: Any) -> List[str]:
    """None / non-list -> []; drops non-string items (AI output is not trusted)."""
    if not isinstance(value, (list, tuple)):
        return []
    return [v for v in value if isinstance(v, str)]


class CamelModel(BaseModel):
    # snake_case in Python, camelCase on the wire
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SkillSet(CamelModel):
    """Skills pulled out of a resume, grouped by category."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    skills: List[str] = Field(default_factory=list)           # soft skills
    languages: List[str] = Field(default_factory=list)
    tools: List[str] = Field(default_factory=list)
    frameworks: List[str] = Field(default_factory=list)
    technical_skills: List[str] = Field(default_factory=list)
    extracurricular: List[str] = Field(default_factory=list)

    @field_validator(
        "skills", "languages", "tools", "frameworks", "technical_skills", "extracurricular",
        mode="before",
    )
    @classmethod
    def _coerce_list(cls, v):
        return _string_list(v)

    def current_skills(self) -> List[str]:
        """Flat list compared against role requirements (soft skills, languages, tools, frameworks)."""
        return [*self.skills, *self.languages, *self.tools, *self.frameworks]


class RoleRequirement(CamelModel):
    """What a target role asks for. Built once per analyzed role."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    role: str = ""
    level: RoleLevel = "Mid"
    summary: str = ""
    required_skills: List[str] = Field(default_factory=list)
    technical_skills: List[str] = Field(default_factory=list)
    soft_skills: List[str] = Field(default_factory=list)
    tools: List[str] = Field(default_factory=list)
    frameworks: List[str] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)
    experience: str = "Varies"
    avg_salary: str = "Market dependent"
    growth_path: str = ""

    @field_validator(
        "required_skills", "technical_skills", "soft_skills", "tools", "frameworks", "languages",
        mode="before",
    )
    @classmethod
    def _coerce_list(cls, v):
        return _string_list(v)

    @field_validator("level", mode="before")
    @classmethod
    def _coerce_level(cls, v):
        if isinstance(v, str):
            return _LEVEL_MAP.get(v.strip().lower(), "Mid")
        return "Mid"

    @field_validator("role", "summary", "growth_path", mode="before")
    @classmethod
    def _coerce_text(cls, v):
        return v.strip() if isinstance(v, str) else ""

    @field_validator("experience", mode="before")
    @classmethod
    def _coerce_experience(cls, v):
        return v.strip() if isinstance(v, str) and v.strip() else "Varies"

    @field_validator("avg_salary", mode="before")
    @classmethod
    def _coerce_salary(cls, v):
        return v.strip() if isinstance(v, str) and v.strip() else "Market dependent"

    def total_required(self) -> int:
        return (
            len(self.technical_skills)
            + len(self.tools)
            + len(self.frameworks)
            + len(self.languages)
            + len(self.soft_skills)
        )


class SkillGapResult(CamelModel):
    missing_technical: List[str] = Field(default_factory=list)
    missing_tools: List[str] = Field(default_factory=list)
    missing_frameworks: List[str] = Field(default_factory=list)
    missing_languages: List[str] = Field(default_factory=list)
    missing_non_technical: List[str] = Field(default_factory=list)
    matched_skills: List[str] = Field(default_factory=list)
    total_gaps: int = Field(0, ge=0)
    match_percentage: int = Field(0, ge=0, le=100)


class ProfileAnalysis(CamelModel):
    experience_level: str = "Mid"
    professional_summary: str = ""
    key_strengths: List[str] = Field(default_factory=list)
    areas_for_improvement: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    industry_fit: List[str] = Field(default_factory=list)

    @field_validator(
        "key_strengths", "areas_for_improvement", "recommendations", "industry_fit",
        mode="before",
    )
    @classmethod
    def _coerce_list(cls, v):
        return _string_list(v)

    @field_validator("experience_level", mode="before")
    @classmethod
    def _coerce_level(cls, v):
        return v.strip() if isinstance(v, str) and v.strip() else "Mid"

    @field_validator("professional_summary", mode="before")
    @classmethod
    def _coerce_summary(cls, v):
        return v if isinstance(v, str) else ""


class ResumeAnalysis(SkillSet):
    """SkillSet plus the coaching assessment shown next to it."""
    analysis: Optional[ProfileAnalysis] = None
