# backend/services/dream_role.py
import logging

from pydantic import ValidationError

from backend.config import is_demo_mode
from backend.exceptions import AIClientError, DreamRoleAnalysisError, InvalidArgumentError
from backend.schemas.skills import RoleRequirement
from backend.services.mock_data import MOCK_DREAM_ROLE
from backend.services.openai_client import get_client

log = logging.getLogger(__name__)

DREAM_ROLE_PROMPT = """You are a career analysis expert with current knowledge of the job market. Analyze the given job title.

Return a JSON object with EXACTLY this structure:
{
  "role": "job title as provided",
  "level": "Entry/Mid/Senior/Lead",
  "summary": "concise description of primary responsibilities",
  "requiredSkills": ["8-12 core competencies"],
  "technicalSkills": ["6-10 technical domains"],
  "softSkills": ["5-7 non-technical abilities"],
  "tools": ["6-10 tools/platforms used daily"],
  "frameworks": ["framework1", "framework2"],
  "languages": ["language1", "language2"],
  "experience": "X-Y years",
  "avgSalary": "$X,000 - $Y,000 USD",
  "growthPath": "typical career progression"
}

Levels: Entry 0-2 years, Mid 2-5, Senior 5-10, Lead 10+.
Include only skills that real job postings for this role ask for. Do not invent marginal skills.
Return ONLY valid JSON. No markdown, no explanations."""


def analyze_dream_role(role_title: str) -> RoleRequirement:
    """Turn a free-text job title into a RoleRequirement (LLM, or the demo profile)."""
    if not isinstance(role_title, str) or not role_title.strip():
        raise InvalidArgumentError("Invalid role title provided")
    clean_title = role_title.strip()

    if is_demo_mode():
        return MOCK_DREAM_ROLE.model_copy(update={"role": clean_title})

    try:
        parsed = get_client().get_json(
            f'{DREAM_ROLE_PROMPT}\n\nAnalyze this role: "{clean_title}"\n\nReturn ONLY valid JSON, no other text.',
            temperature=0.3,
        )
    except AIClientError as e:
        log.error("Dream role analysis failed for %r: %s", clean_title, e)
        raise DreamRoleAnalysisError(str(e) or "Failed to analyze dream role") from e

    if not isinstance(parsed, dict):
        raise DreamRoleAnalysisError("Invalid AI response format")

    if not isinstance(parsed.get("role"), str) or not parsed["role"].strip():
        parsed["role"] = clean_title
    try:
        return RoleRequirement.model_validate(parsed)
    except ValidationError as e:
        raise DreamRoleAnalysisError(f"Invalid AI response format: {e}") from e
