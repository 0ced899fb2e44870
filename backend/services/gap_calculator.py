# backend/services/gap_calculator.py
import logging
import math
from collections.abc import Mapping
from typing import List, Optional, Sequence, Tuple

from pydantic import ValidationError

from backend.exceptions import InvalidArgumentError
from backend.schemas.skills import RoleRequirement, SkillGapResult
from backend.utils.skill_matcher import SkillMatcher, default_matcher
from backend.utils.text_normalize import normalize_skill

logger = logging.getLogger(__name__)

# (RoleRequirement field, SkillGapResult missing-list field), in reporting order
CATEGORY_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("technical_skills", "missing_technical"),
    ("tools", "missing_tools"),
    ("frameworks", "missing_frameworks"),
    ("languages", "missing_languages"),
    ("soft_skills", "missing_non_technical"),
)


def _as_requirement(requirement) -> RoleRequirement:
    if isinstance(requirement, RoleRequirement):
        return requirement
    if isinstance(requirement, Mapping):
        try:
            return RoleRequirement.model_validate(dict(requirement))
        except ValidationError as e:
            raise InvalidArgumentError(f"Invalid role requirement: {e}") from e
    raise InvalidArgumentError(
        f"requirement must be a RoleRequirement or mapping, got {type(requirement).__name__}"
    )


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_gaps(
    current_skills: Sequence[str],
    requirement,
    *,
    matcher: Optional[SkillMatcher] = None,
) -> SkillGapResult:
    """
    Compare someone's skills against a role's requirements.

    Each of the five required categories is checked on its own: an item is matched
    if any current skill covers it, otherwise it lands in that category's missing
    list. Items repeated across categories are counted once per category, so the
    percentage is matched / (sum of all category lengths), with the divisor
    floored at 1.
    """
    if isinstance(current_skills, (str, bytes)) or not isinstance(current_skills, (list, tuple)):
        raise InvalidArgumentError(
            f"current_skills must be a list of strings, got {type(current_skills).__name__}"
        )
    req = _as_requirement(requirement)
    matcher = matcher or default_matcher

    # non-string entries are upstream noise, not a contract violation
    current = [normalize_skill(s) for s in current_skills if isinstance(s, str)]
    current = [s for s in current if s]

    missing = {field: [] for _, field in CATEGORY_FIELDS}
    matched: List[str] = []
    total_required = 0

    for req_field, missing_field in CATEGORY_FIELDS:
        for item in getattr(req, req_field):
            total_required += 1
            if any(matcher.matches(c, item) for c in current):
                matched.append(item)
            else:
                missing[missing_field].append(item)

    total_gaps = sum(len(v) for v in missing.values())
    match_percentage = _round_half_up(len(matched) / max(1, total_required) * 100)

    logger.debug(
        "Skill gaps for %r: %d required, %d matched, %d gaps",
        req.role, total_required, len(matched), total_gaps,
    )

    return SkillGapResult(
        **missing,
        matched_skills=matched,
        total_gaps=total_gaps,
        match_percentage=match_percentage,
    )


def gap_summary(gaps: SkillGapResult) -> str:
    """Plain-text digest of a gap result, used to brief the roadmap model."""
    def _fmt(items: List[str]) -> str:
        return f"{len(items)} ({', '.join(items)})"

    return "\n".join([
        "SKILL GAP ANALYSIS:",
        f"- Match Level: {gaps.match_percentage}% of required skills already acquired",
        f"- Total Gaps: {gaps.total_gaps} skills to develop",
        f"- Missing Technical Skills: {_fmt(gaps.missing_technical)}",
        f"- Missing Frameworks: {_fmt(gaps.missing_frameworks)}",
        f"- Missing Tools: {_fmt(gaps.missing_tools)}",
        f"- Missing Languages: {_fmt(gaps.missing_languages)}",
        f"- Missing Soft Skills: {_fmt(gaps.missing_non_technical)}",
        f"- Already Matched: {_fmt(gaps.matched_skills)}",
    ])
