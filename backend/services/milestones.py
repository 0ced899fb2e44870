# backend/services/milestones.py
import hashlib
import logging
import math
import re
from collections.abc import Mapping
from typing import Any, List, Optional, Sequence

from backend.constants import (
    DEFAULT_DAYS,
    DEFAULT_TITLE,
    DESCRIPTION_MAX_CHARS,
    MAX_DAYS,
    MIN_DAYS,
    ROADMAP_SIZE,
    TITLE_MAX_CHARS,
)
from backend.exceptions import InvalidArgumentError
from backend.schemas.roadmap import Milestone

logger = logging.getLogger(__name__)

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def _parse_days(value: Any) -> int:
    """Integer prefix of `value` ("3.7" -> 3, "5 days" -> 5); 0 or garbage -> default."""
    days: Optional[int] = None
    if isinstance(value, bool):
        days = None
    elif isinstance(value, int):
        days = value
    elif isinstance(value, float):
        days = int(value) if math.isfinite(value) else None
    elif isinstance(value, str):
        m = _LEADING_INT_RE.match(value)
        days = int(m.group(1)) if m else None

    if not days:
        days = DEFAULT_DAYS
    return max(MIN_DAYS, min(MAX_DAYS, days))


def _text(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def coerce_milestone(entry: Any) -> Milestone:
    """One untrusted record -> a valid Milestone. Anything that is not a mapping gets all defaults."""
    if isinstance(entry, Milestone):
        return entry
    if not isinstance(entry, Mapping):
        return Milestone(title=DEFAULT_TITLE, description="", days=DEFAULT_DAYS)

    title = _text(entry.get("title")) or DEFAULT_TITLE
    description = _text(entry.get("description")) or ""
    return Milestone(
        title=title[:TITLE_MAX_CHARS],
        description=description[:DESCRIPTION_MAX_CHARS],
        days=_parse_days(entry.get("days")),
    )


def normalize_milestones(raw: Sequence[Any], filler: Optional[Sequence[Any]] = None) -> List[Milestone]:
    """
    Repair a raw milestone list (AI output or local) into exactly ROADMAP_SIZE entries.

    Only the first ROADMAP_SIZE entries are kept. Short lists are topped up from the
    same positions of `filler` (the caller's own roadmap), or with default "Task"
    entries when no filler is given. Running the output back through is a no-op.
    """
    if isinstance(raw, (str, bytes, Mapping)) or not isinstance(raw, (list, tuple)):
        raise InvalidArgumentError(f"raw milestones must be a list, got {type(raw).__name__}")
    if filler is not None and not isinstance(filler, (list, tuple)):
        raise InvalidArgumentError(f"filler must be a list, got {type(filler).__name__}")

    items = list(raw[:ROADMAP_SIZE])
    if len(items) < ROADMAP_SIZE:
        logger.debug("Padding roadmap: got %d of %d milestones", len(items), ROADMAP_SIZE)
        pad = list(filler or [])
        for idx in range(len(items), ROADMAP_SIZE):
            items.append(pad[idx] if idx < len(pad) else None)

    return [coerce_milestone(m) for m in items]


def total_days(milestones: Sequence[Milestone]) -> int:
    """Sum of milestone durations. Roadmaps aim for ~30 days; this is not enforced."""
    return sum(m.days for m in milestones)


def roadmap_key(milestones: Sequence[Milestone]) -> str:
    """Stable id for a roadmap (clients key saved completion state on it)."""
    fp = "|".join(m.title for m in milestones)
    return hashlib.sha1(fp.encode("utf-8")).hexdigest()[:16]
