# backend/utils/text_normalize.py
import re

# keep +, #, /, &, . because they appear in tech terms (C++, C#, CI/CD, Node.js)
_PUNCT_RE = re.compile(r"[^\w\s\+\#/&\.-]")
_SPACE_RE = re.compile(r"\s+")
# de-hyphenate words like "end-to-end", "problem-solving"
_DEHYPHEN_RE = re.compile(r"(\w)[\-–—](\w)")


def normalize_skill(skill: str) -> str:
    """Comparison key for a skill: lower-cased and trimmed, nothing else.

    Display strings keep their original casing; only comparisons go through here.
    """
    if not skill:
        return ""
    return skill.lower().strip()


def normalize(s: str) -> str:
    """Lowercases, de-hyphenates, keeps tech punctuation, trims spaces (free text only)."""
    s = (s or "").lower()
    s = _DEHYPHEN_RE.sub(r"\1 \2", s)
    s = _PUNCT_RE.sub(" ", s)
    s = _SPACE_RE.sub(" ", s).strip()
    return s
