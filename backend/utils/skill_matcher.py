# backend/utils/skill_matcher.py
from typing import Dict, FrozenSet, Iterable, Mapping, Set

from backend.constants import MIN_SUBSTRING_LEN, SKILL_SYNONYMS
from backend.utils.text_normalize import normalize_skill


class SkillMatcher:
    """
    Decides whether a skill someone has covers a skill a role asks for.

    Rules, first hit wins:
      1. exact match after normalize_skill()
      2. substring either way, only when both sides are >= 4 chars
         ("react" ~ "react.js", but "c" never matches "c++")
      3. synonym groups: both sides resolve to the same canonical skill

    With canonical_only=True rule 3 only consults the first canonical name equal
    to one of the inputs, so two spellings that are both synonyms ("reactjs" vs
    "react.js") do not match each other.
    """

    def __init__(
        self,
        synonyms: Mapping[str, Iterable[str]] = SKILL_SYNONYMS,
        *,
        canonical_only: bool = False,
    ):
        self.canonical_only = canonical_only
        self._groups: Dict[str, FrozenSet[str]] = {}
        for canonical, alts in synonyms.items():
            key = normalize_skill(canonical)
            if not key:
                continue
            members = {key}
            members.update(a for a in (normalize_skill(s) for s in alts) if a)
            self._groups[key] = frozenset(members)

        # term -> canonical names whose group contains it ("postgres" sits in two)
        self._index: Dict[str, Set[str]] = {}
        for canonical, members in self._groups.items():
            for term in members:
                self._index.setdefault(term, set()).add(canonical)

    def canonical_names(self, skill: str) -> FrozenSet[str]:
        return frozenset(self._index.get(normalize_skill(skill), ()))

    def matches(self, current_skill: str, required_skill: str) -> bool:
        current = normalize_skill(current_skill)
        required = normalize_skill(required_skill)
        if not current or not required:
            return False

        if current == required:
            return True

        if len(current) >= MIN_SUBSTRING_LEN and len(required) >= MIN_SUBSTRING_LEN:
            if required in current or current in required:
                return True

        if self.canonical_only:
            return self._canonical_only_match(current, required)

        left = self._index.get(current)
        right = self._index.get(required)
        return bool(left and right and not left.isdisjoint(right))

    def _canonical_only_match(self, current: str, required: str) -> bool:
        for canonical, members in self._groups.items():
            if current == canonical:
                return required in members
            if required == canonical:
                return current in members
        return False


default_matcher = SkillMatcher()


def skill_matches(current_skill: str, required_skill: str) -> bool:
    return default_matcher.matches(current_skill, required_skill)
