# backend/constants.py
from types import MappingProxyType

# roadmap shape
ROADMAP_SIZE = 15
TITLE_MAX_CHARS = 80
DESCRIPTION_MAX_CHARS = 500
MIN_DAYS = 1
MAX_DAYS = 7
DEFAULT_DAYS = 2
DEFAULT_TITLE = "Task"

# substring matching only kicks in above this length ("c" must not match "c++")
MIN_SUBSTRING_LEN = 4

# canonical skill -> alternate spellings / abbreviations
_RAW_SYNONYMS = {
    "react": ["react.js", "react js", "reactjs"],
    "vue": ["vue.js", "vue js", "vuejs"],
    "angular": ["angular.js", "angularjs"],
    "node": ["node.js", "nodejs"],
    "express": ["express.js", "expressjs"],
    "django": ["django framework"],
    "flask": ["flask framework"],
    "python": ["py", "python3", "python 3"],
    "javascript": ["js", "es6", "es2020"],
    "typescript": ["ts"],
    "sql": ["mysql", "postgresql", "postgres", "sql server", "mariadb"],
    "nosql": ["mongodb", "dynamodb", "firebase", "cassandra", "couchdb"],
    "mongodb": ["mongo", "nosql database"],
    "postgresql": ["postgres", "psql"],
    "aws": ["amazon web services", "amazon aws"],
    "gcp": ["google cloud", "google cloud platform"],
    "azure": ["microsoft azure"],
    "docker": ["containerization", "containers"],
    "kubernetes": ["k8s", "container orchestration"],
    "git": ["version control", "github", "gitlab", "bitbucket"],
    "rest api": ["restful api", "rest apis"],
    "graphql": ["graph ql"],
    "agile": ["agile development", "scrum", "kanban", "sprint"],
    "html": ["html5", "semantic html"],
    "css": ["css3", "sass", "scss", "less"],
    "tailwind": ["tailwindcss", "tailwind css"],
    "bootstrap": ["bootstrap framework"],
    "junit": ["java unit testing"],
    "testing": ["unit testing", "integration testing", "test automation", "jest", "mocha"],
    "ci/cd": ["continuous integration", "continuous deployment", "github actions", "jenkins", "gitlab ci"],
}

# read-only after import
SKILL_SYNONYMS = MappingProxyType(
    {k: frozenset(v) for k, v in _RAW_SYNONYMS.items()}
)

# resume regex fallback: display name -> patterns (matched case-insensitively with \b guards)
SKILL_PATTERNS = {
    "frameworks": [
        ("React", [r"react(\.js)?", r"reactjs"]),
        ("Vue", [r"vue(\.js)?", r"vuejs"]),
        ("Angular", [r"angular(\.js)?", r"angularjs"]),
        ("Django", [r"django"]),
        ("Flask", [r"flask"]),
        ("Spring", [r"spring(\s+boot)?"]),
        ("Express", [r"express(\.js)?", r"expressjs"]),
        ("Next.js", [r"next\.js", r"nextjs"]),
        ("Laravel", [r"laravel"]),
        ("FastAPI", [r"fastapi"]),
        ("NestJS", [r"nestjs", r"nest\.js"]),
    ],
    "languages": [
        ("Python", [r"python", r"python\s*\d"]),
        ("JavaScript", [r"javascript", r"js"]),
        ("TypeScript", [r"typescript", r"ts"]),
        ("Java", [r"java"]),
        ("C++", [r"c\+\+", r"cpp"]),
        ("C#", [r"c#", r"csharp"]),
        ("PHP", [r"php"]),
        ("Ruby", [r"ruby"]),
        ("Go", [r"go", r"golang"]),
        ("Rust", [r"rust"]),
        ("Swift", [r"swift"]),
        ("SQL", [r"sql"]),
        ("HTML", [r"html", r"html\s*\d"]),
        ("CSS", [r"css", r"css\s*\d"]),
    ],
    "tools": [
        ("Git", [r"git", r"github", r"gitlab"]),
        ("Docker", [r"docker"]),
        ("Kubernetes", [r"kubernetes", r"k8s"]),
        ("AWS", [r"aws", r"amazon\s+(web\s+)?services"]),
        ("Azure", [r"azure"]),
        ("GCP", [r"gcp", r"google\s+cloud"]),
        ("Jenkins", [r"jenkins"]),
        ("Jira", [r"jira"]),
        ("VS Code", [r"vs\s+code", r"visual\s+studio\s+code", r"vscode"]),
        ("npm", [r"npm"]),
        ("Figma", [r"figma"]),
    ],
    "skills": [
        ("Leadership", [r"leadership", r"leader"]),
        ("Communication", [r"communication"]),
        ("Problem Solving", [r"problem[\s-]solving", r"problem[\s-]solver"]),
        ("Teamwork", [r"teamwork", r"team\s+player"]),
        ("Project Management", [r"project\s+management"]),
        ("Agile", [r"agile"]),
        ("Scrum", [r"scrum"]),
    ],
}

# certification snippets ("AWS Certified Developer ...") become extracurricular items
CERT_PATTERN = r"(?:certified|certification|aws certified|azure certified|aws|azure|gcp)[^\n.]{0,50}"
MAX_CERT_SNIPPETS = 3

# stopwords (common words we ignore when fuzzy-filling skills)
STOP_WORDS = {
    "the", "and", "or", "an", "a", "to", "of", "for", "on",
    "with", "by", "in", "at", "as", "is", "are", "was", "were",
    "be", "been", "this", "that", "it"
}
