# backend/services/mock_data.py
# Canned answers for DEMO_MODE=true and for resumes where nothing could be extracted.
from backend.schemas.skills import RoleRequirement, SkillSet

MOCK_DREAM_ROLE = RoleRequirement(
    role="Full Stack Developer",
    level="Mid",
    summary=(
        "Full stack developers build complete web applications with both frontend and "
        "backend components, working across the whole development lifecycle."
    ),
    required_skills=[
        "Full-stack development",
        "REST API design",
        "Database design",
        "User authentication",
        "Version control",
        "Responsive web design",
        "Performance optimization",
        "Security best practices",
        "Debugging",
        "Testing",
    ],
    technical_skills=[
        "Frontend development",
        "Backend development",
        "Database management",
        "Cloud computing",
        "API development",
    ],
    soft_skills=["Problem solving", "Communication", "Team collaboration", "Time management", "Adaptability"],
    tools=["Git", "Docker", "AWS/GCP/Azure", "Postman", "VS Code", "npm/yarn", "Webpack"],
    frameworks=["React", "Node.js/Express", "Vue.js", "Angular", "Django", "MongoDB", "PostgreSQL"],
    languages=["JavaScript", "Python", "SQL", "HTML", "CSS"],
    experience="2-4 years",
    avg_salary="$100,000 - $150,000",
    growth_path="Senior Full Stack Developer → Tech Lead → Engineering Manager",
)

MOCK_RESUME_SKILLS = SkillSet(
    skills=["Project Management", "Problem Solving", "Communication"],
    languages=["JavaScript", "Python", "HTML", "CSS"],
    tools=["Git", "VS Code", "npm"],
    frameworks=["React", "Node.js"],
    extracurricular=["Bootcamp Graduate", "GitHub Contributions", "Personal Projects"],
)
