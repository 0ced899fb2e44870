import pytest

from backend.exceptions import InvalidArgumentError
from backend.schemas.roadmap import ProfileData
from backend.schemas.skills import ProfileAnalysis, ResumeAnalysis, RoleRequirement, SkillSet
from backend.services.roadmap_fallback import generate_local_roadmap
from backend.services.roadmap_generator import extract_milestone_list, generate_roadmap

SKILLS = SkillSet(frameworks=["React"], languages=["JavaScript"], tools=["Git"])
ROLE = RoleRequirement(role="Backend Engineer", frameworks=["Django"], languages=["Python"])


def _ai_items(n):
    return [{"title": f"AI step {i}", "description": "from the model", "days": 2} for i in range(n)]


def test_no_api_key_uses_local_roadmap(no_ai, fake_client):
    client = fake_client(payload={"milestones": _ai_items(15)})
    milestones, source = generate_roadmap(SKILLS)
    assert source == "local"
    assert milestones == generate_local_roadmap(SKILLS)
    assert client.prompts == []


def test_demo_mode_never_calls_model(with_ai, demo_mode, fake_client):
    client = fake_client(payload={"milestones": _ai_items(15)})
    milestones, source = generate_roadmap(SKILLS, ProfileData(dream_role=ROLE))
    assert source == "local"
    assert milestones[0].title == "Learn Django"
    assert client.prompts == []


def test_ai_roadmap_is_normalized(with_ai, fake_client):
    items = _ai_items(20)
    items[0] = {"title": "x" * 100, "description": "d", "days": "12"}
    fake_client(payload={"milestones": items})

    milestones, source = generate_roadmap(SKILLS)
    assert source == "ai"
    assert len(milestones) == 15
    assert len(milestones[0].title) == 80
    assert milestones[0].days == 7
    assert milestones[-1].title == "AI step 14"


def test_short_ai_roadmap_is_topped_up_from_local(with_ai, fake_client):
    fake_client(payload=_ai_items(10))
    milestones, source = generate_roadmap(SKILLS)
    local = generate_local_roadmap(SKILLS)
    assert source == "ai"
    assert [m.title for m in milestones[:10]] == [f"AI step {i}" for i in range(10)]
    assert milestones[10:] == local[10:]


@pytest.mark.parametrize("payload", [{"milestones": []}, {"foo": "bar"}, "not json object", None])
def test_unusable_ai_output_falls_back(with_ai, fake_client, payload):
    fake_client(payload=payload)
    milestones, source = generate_roadmap(SKILLS)
    assert source == "local"
    assert len(milestones) == 15


def test_ai_error_falls_back_to_gap_roadmap(with_ai, fake_client):
    fake_client(error="timeout")
    milestones, source = generate_roadmap(SKILLS, ProfileData(dream_role=ROLE))
    assert source == "local"
    assert milestones[0].title == "Learn Django"
    assert milestones[1].title == "Learn Python"


def test_dream_role_prompt_carries_gap_summary(with_ai, fake_client):
    client = fake_client(payload={"items": _ai_items(15)})
    skills = ResumeAnalysis(
        languages=["JavaScript"],
        analysis=ProfileAnalysis(experience_level="Junior", key_strengths=["Curiosity"]),
    )
    milestones, source = generate_roadmap(skills, ProfileData(dream_role=ROLE, github_valid=True))

    assert source == "ai"
    prompt = client.prompts[0]
    assert "SKILL GAP ANALYSIS" in prompt
    assert "Missing Frameworks: 1 (Django)" in prompt
    assert '"hasGitHub": true' in prompt
    assert '"experienceLevel": "Junior"' in prompt


def test_plain_prompt_without_dream_role(with_ai, fake_client):
    client = fake_client(payload={"milestones": _ai_items(15)})
    generate_roadmap({"frameworks": ["Vue"]})
    assert "SKILL GAP ANALYSIS" not in client.prompts[0]
    assert '"Vue"' in client.prompts[0]


def test_bad_skills_argument():
    with pytest.raises(InvalidArgumentError):
        generate_roadmap(["React"])


def test_extract_milestone_list_shapes():
    assert extract_milestone_list({"milestones": [1]}) == [1]
    assert extract_milestone_list({"items": [2]}) == [2]
    assert extract_milestone_list([3]) == [3]
    assert extract_milestone_list({"milestones": "nope"}) == []
    assert extract_milestone_list(None) == []
