import pytest
from pydantic import ValidationError

from backend.exceptions import DreamRoleAnalysisError, InvalidArgumentError
from backend.services.dream_role import analyze_dream_role
from backend.services.mock_data import MOCK_DREAM_ROLE


@pytest.mark.parametrize("title", ["", "   ", None, 42])
def test_invalid_title(title):
    with pytest.raises(InvalidArgumentError):
        analyze_dream_role(title)


def test_demo_mode_returns_mock_with_title(demo_mode):
    role = analyze_dream_role("  Data Engineer ")
    assert role.role == "Data Engineer"
    assert role.frameworks == MOCK_DREAM_ROLE.frameworks
    assert MOCK_DREAM_ROLE.role == "Full Stack Developer"


def test_model_output_is_sanitized(with_ai, fake_client):
    fake_client(payload={
        "role": "",
        "level": "Junior",
        "technicalSkills": ["ETL"],
        "softSkills": None,
        "tools": ["Airflow", {"name": "dbt"}],
        "languages": "SQL",
        "experience": "",
        "avgSalary": None,
    })
    role = analyze_dream_role("Data Engineer")
    assert role.role == "Data Engineer"
    assert role.level == "Entry"
    assert role.technical_skills == ["ETL"]
    assert role.soft_skills == []
    assert role.tools == ["Airflow"]
    assert role.languages == []
    assert role.experience == "Varies"
    assert role.avg_salary == "Market dependent"


def test_unknown_level_defaults_to_mid(with_ai, fake_client):
    fake_client(payload={"role": "CTO", "level": "Executive"})
    assert analyze_dream_role("CTO").level == "Mid"


def test_model_failure_raises(with_ai, fake_client):
    fake_client(error="boom")
    with pytest.raises(DreamRoleAnalysisError):
        analyze_dream_role("Data Engineer")


def test_non_object_response_raises(with_ai, fake_client):
    fake_client(payload=["Data Engineer"])
    with pytest.raises(DreamRoleAnalysisError):
        analyze_dream_role("Data Engineer")


def test_role_requirement_is_immutable(demo_mode):
    role = analyze_dream_role("QA Engineer")
    with pytest.raises(ValidationError):
        role.role = "Something else"
