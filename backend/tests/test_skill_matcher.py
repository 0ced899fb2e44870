from types import MappingProxyType

import pytest

from backend.constants import SKILL_SYNONYMS
from backend.utils.skill_matcher import SkillMatcher, skill_matches
from backend.utils.text_normalize import normalize_skill


def test_normalize_skill_lowercases_and_trims():
    assert normalize_skill("  React.JS ") == "react.js"
    assert normalize_skill("") == ""
    assert normalize_skill("C++") == "c++"


def test_exact_match_ignores_case():
    assert skill_matches("Go", "go")
    assert skill_matches("  Python", "PYTHON ")


def test_substring_match_for_longer_names():
    assert skill_matches("React", "react.js")
    assert skill_matches("Amazon Web Services (AWS)", "amazon web services")


def test_short_tokens_do_not_substring_match():
    assert not skill_matches("C", "C++")
    assert not skill_matches("Go", "Golang")


def test_synonym_match_through_canonical_name():
    assert skill_matches("k8s", "Kubernetes")
    assert skill_matches("JS", "javascript")
    assert skill_matches("python", "py")


def test_two_synonyms_of_same_group_match():
    assert skill_matches("reactjs", "react.js")
    assert skill_matches("ts", "typescript")
    assert skill_matches("scss", "less")


def test_canonical_only_mode_keeps_narrow_rule():
    matcher = SkillMatcher(canonical_only=True)
    assert matcher.matches("k8s", "kubernetes")
    assert matcher.matches("es6", "JavaScript")
    # both are synonyms of "css" but neither is the canonical name
    assert not matcher.matches("scss", "less")


def test_unrelated_canonical_names_do_not_match():
    assert not skill_matches("React", "Vue")
    assert not skill_matches("Python", "Java")
    assert not skill_matches("Docker", "Kubernetes")


def test_empty_inputs_never_match():
    assert not skill_matches("", "")
    assert not skill_matches("", "python")


def test_injected_synonym_table():
    matcher = SkillMatcher({"Golang": ["go lang", "go language"]})
    assert matcher.matches("go lang", "go language")
    assert matcher.matches("Go Lang", "golang")
    assert not matcher.matches("k8s", "kubernetes")
    assert matcher.canonical_names("GO LANG") == frozenset({"golang"})


def test_synonym_table_is_read_only():
    assert isinstance(SKILL_SYNONYMS, MappingProxyType)
    with pytest.raises(TypeError):
        SKILL_SYNONYMS["rust"] = frozenset({"rustlang"})
    assert isinstance(SKILL_SYNONYMS["react"], frozenset)


def test_term_in_several_groups_resolves_to_all():
    matcher = SkillMatcher()
    assert matcher.canonical_names("postgres") == frozenset({"sql", "postgresql"})
    assert matcher.matches("psql", "postgres")
