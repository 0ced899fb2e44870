# backend/services/roadmap_fallback.py
"""
Local roadmap generator.

Used whenever the roadmap model is unavailable (demo mode, no API key, or the
call failed). Output is deterministic for a given input and always 15 entries.

Two templates:
  - no dream role: profile/portfolio work first, then building and contribution,
    then interview prep, applications last
  - dream role: the largest framework/language gaps first, then a project that
    mixes old and new skills, deployment, community, interview prep,
    applications and finally the offer negotiation
"""
import logging
from collections.abc import Mapping
from typing import Dict, List, Optional, Sequence

from backend.exceptions import InvalidArgumentError
from backend.schemas.roadmap import Milestone
from backend.schemas.skills import RoleRequirement, SkillGapResult, SkillSet
from backend.services.gap_calculator import compute_gaps
from backend.services.milestones import normalize_milestones

logger = logging.getLogger(__name__)


def _clean(items: Sequence[str]) -> List[str]:
    return [s.strip() for s in items if isinstance(s, str) and s.strip()]


def _join(items: Sequence[str], sep: str, default: str) -> str:
    return sep.join(items) if items else default


def _as_skillset(skills) -> SkillSet:
    if isinstance(skills, SkillSet):
        return skills
    if isinstance(skills, Mapping):
        return SkillSet.model_validate(dict(skills))
    raise InvalidArgumentError(f"skills must be a SkillSet or mapping, got {type(skills).__name__}")


def _as_role(dream_role) -> Optional[RoleRequirement]:
    if dream_role is None or isinstance(dream_role, RoleRequirement):
        return dream_role
    if isinstance(dream_role, Mapping):
        # an empty object from the client means "no dream role"
        return RoleRequirement.model_validate(dict(dream_role)) if dream_role else None
    raise InvalidArgumentError(
        f"dream_role must be a RoleRequirement or mapping, got {type(dream_role).__name__}"
    )


def _personal_roadmap(skills: SkillSet) -> List[Dict]:
    stack = _clean([*skills.frameworks, *skills.languages, *skills.tools])

    first = stack[0] if stack else None
    top_two = _join(stack[:2], ", ", "your core technologies")
    pair = _join(stack[:2], " and ", "the technologies you know best")
    everything = _join(stack, ", ", "new technologies")

    return [
        {
            "title": "Update GitHub portfolio with projects",
            "description": f"Add your latest work using {top_two} to your GitHub. "
                           "Document project architecture and technologies used.",
            "days": 2,
        },
        {
            "title": "Refresh resume with current skills",
            "description": f"Add {everything} to your resume. Include recent projects and achievements.",
            "days": 2,
        },
        {
            "title": "Optimize LinkedIn profile",
            "description": "Update headline, about section, and projects. "
                           + (f"Add {first} as a featured skill." if first else "Feature your strongest skill."),
            "days": 1,
        },
        {
            "title": "Review and refine portfolio",
            "description": "Make sure every portfolio item has clear documentation, a README, and live links.",
            "days": 1,
        },
        {
            "title": "Build practice project",
            "description": f"Create a small project using {pair} to strengthen your portfolio.",
            "days": 3,
        },
        {
            "title": "Contribute to open source",
            "description": f"Find {first or 'relevant'} projects on GitHub. Make 2-3 meaningful contributions.",
            "days": 3,
        },
        {
            "title": "Prepare technical demo",
            "description": f"Build a live demo of your best project highlighting your {first or 'core skill'} work.",
            "days": 2,
        },
        {
            "title": "Research target companies",
            "description": "Identify 20 companies hiring for your skill set. "
                           "Follow their tech blogs and learn their tech stack.",
            "days": 2,
        },
        {
            "title": "Network with professionals",
            "description": "Connect with 15 professionals in your field on LinkedIn. Personalize each message.",
            "days": 2,
        },
        {
            "title": "Schedule informational interviews",
            "description": "Talk with 5 people in roles you aspire to. Ask about their career path and the skills they use.",
            "days": 2,
        },
        {
            "title": "Practice interview questions",
            "description": f"Prepare answers for behavioral and technical questions about {top_two}.",
            "days": 3,
        },
        {
            "title": "Study system design",
            "description": "If aiming for a senior role, practice system design interviews for your tech stack.",
            "days": 2,
        },
        {
            "title": "Polish cover letters",
            "description": "Write 5 tailored cover letters for target roles. Highlight relevant projects.",
            "days": 2,
        },
        {
            "title": "Apply to job postings",
            "description": "Apply to 15 positions matching your skills. Track applications and follow-ups.",
            "days": 3,
        },
        {
            "title": "Follow up on applications",
            "description": "Send follow-up emails a week after applying. Show continued interest.",
            "days": 1,
        },
    ]


def _gap_roadmap(skills: SkillSet, gaps: SkillGapResult, role: RoleRequirement) -> List[Dict]:
    role_name = role.role or "your target role"
    base = _clean([*skills.frameworks, *skills.languages])[:2]
    fw = _clean(gaps.missing_frameworks)[:2]
    langs = _clean(gaps.missing_languages)[:2]
    tools = _clean(gaps.missing_tools)[:1]
    soft = _clean(gaps.missing_non_technical)[:1]

    new_fw = fw[0] if fw else None
    base_text = _join(base, " + ", "existing")
    target_tech = new_fw or "your target tech"

    fw_extra = f" Then get familiar with {fw[1]}." if len(fw) > 1 else ""
    if langs:
        lang_title = f"Learn {langs[0]}"
        lang_desc = (
            f"Learn {' and '.join(langs)}, needed for {role_name}. "
            "Complete an online course focused on practical applications."
        )
    else:
        lang_title = "Strengthen core language skills"
        lang_desc = "Deepen the languages you already use. Complete an online course focused on practical applications."

    deploy_desc = "Deploy your project to AWS, Azure, or Google Cloud. Practice setting up a CI/CD pipeline."
    if tools:
        deploy_desc += f" Use {tools[0]} along the way."

    network_desc = f"Join Discord/Slack communities focused on {new_fw or 'your tech stack'}. Engage daily."
    if soft:
        network_desc += f" Use it to practice {soft[0].lower()}."

    return [
        {
            "title": f"Learn {new_fw}" if new_fw else "Learn new framework",
            "description": f"{new_fw or 'A new framework'} is required for {role_name}. "
                           f"Complete tutorials and build 2 practice projects.{fw_extra}",
            "days": 4,
        },
        {"title": lang_title, "description": lang_desc, "days": 4},
        {
            "title": "Build full-stack demo project",
            "description": f"Combine your {base_text} knowledge with new "
                           f"{new_fw + ' ' if new_fw else ''}skills. Create a production-ready project for your portfolio.",
            "days": 4,
        },
        {"title": "Deploy to cloud platform", "description": deploy_desc, "days": 2},
        {
            "title": "Write technical blog post",
            "description": "Document your learning journey. Write about challenges faced and solutions implemented.",
            "days": 1,
        },
        {
            "title": "Contribute to open source",
            "description": f"Find open-source projects using {target_tech}. Make meaningful contributions.",
            "days": 2,
        },
        {"title": "Network in tech community", "description": network_desc, "days": 2},
        {
            "title": "Polish GitHub presence",
            "description": "Update all repos with READMEs, descriptions, and live demos. Pin your best projects.",
            "days": 1,
        },
        {
            "title": "Prepare technical interview",
            "description": f"Study algorithms, system design, and {role_name}-specific questions. "
                           "Run a mock interview with a peer.",
            "days": 3,
        },
        {
            "title": "Research companies hiring for role",
            "description": f"Identify 25 companies hiring for {role_name}. Analyze their tech stack and requirements.",
            "days": 1,
        },
        {
            "title": "Tailor resume for target role",
            "description": f"Highlight projects and skills relevant to {role_name}. Include metrics and accomplishments.",
            "days": 1,
        },
        {
            "title": "Write targeted cover letters",
            "description": "Customize cover letters for your top 5 positions. Reference their tech stack and values.",
            "days": 1,
        },
        {
            "title": "Apply to positions",
            "description": "Submit applications to 20+ positions. Follow up after 1 week if there is no response.",
            "days": 2,
        },
        {
            "title": "Schedule interviews",
            "description": "Once invitations come, prepare thoroughly with mock interviews and company research.",
            "days": 1,
        },
        {
            "title": "Negotiate offer",
            "description": "Research market rates. Prepare to negotiate salary, benefits, and role scope professionally.",
            "days": 1,
        },
    ]


def generate_local_roadmap(
    skills,
    gaps: Optional[SkillGapResult] = None,
    dream_role=None,
) -> List[Milestone]:
    """15 milestones built from the user's own skills, and their gaps when a dream role is set."""
    skill_set = _as_skillset(skills)
    role = _as_role(dream_role)

    if role is None:
        raw = _personal_roadmap(skill_set)
    else:
        if gaps is None:
            gaps = compute_gaps(skill_set.current_skills(), role)
        raw = _gap_roadmap(skill_set, gaps, role)

    logger.debug("Local roadmap built (%s)", "dream role" if role else "current skills")
    return normalize_milestones(raw)
