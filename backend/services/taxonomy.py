"""Keyword tables driving the heuristic extractors.

Plain data only: extractors look these up rather than branching on
literals, so the lists can be extended without touching parsing code.
"""

# Skill taxonomy: category -> literal skill strings (matched case-insensitively)
SKILL_CATEGORIES: dict[str, list[str]] = {
    "technical": [
        # Programming languages
        "javascript", "python", "java", "c++", "c#", "php", "ruby", "go",
        "rust", "swift", "kotlin", "typescript",
        # Frameworks & libraries
        "react", "angular", "vue", "node.js", "express", "django", "flask",
        "spring", "laravel", ".net",
        # Databases
        "mysql", "postgresql", "mongodb", "redis", "elasticsearch", "oracle",
        "sql server",
        # Cloud & DevOps
        "aws", "azure", "gcp", "docker", "kubernetes", "jenkins", "terraform",
        "ansible",
        # Other technical
        "git", "linux", "windows", "html", "css", "sass", "webpack", "babel",
    ],
    "soft": [
        "leadership", "communication", "teamwork", "problem solving",
        "analytical thinking", "project management", "time management",
        "adaptability", "creativity", "collaboration",
    ],
    "domain": [
        "machine learning", "data science", "artificial intelligence",
        "cybersecurity", "blockchain", "mobile development", "web development",
        "devops", "ui/ux design",
    ],
}

# Proficiency cues looked up in the text window around a skill mention,
# checked in order; the first level with a matching cue wins.
PROFICIENCY_CUES: list[tuple[str, list[str]]] = [
    ("expert", ["expert", "advanced", "lead"]),
    ("advanced", ["proficient", "experienced"]),
    ("intermediate", ["intermediate", "working knowledge"]),
]
PROFICIENCY_WINDOW = 50

# Header synonym groups, one group per extractor
SKILLS_HEADERS = ["skills", "technical skills", "competencies", "technologies"]
EXPERIENCE_HEADERS = ["experience", "work experience", "employment", "career history"]
EXPERIENCE_YEARS_HEADERS = [
    "experience", "work experience", "employment", "work history",
    "professional experience", "career history", "employment history",
]
EDUCATION_HEADERS = ["education", "academic background", "qualifications"]
CERTIFICATION_HEADERS = ["certifications", "certificates", "licenses"]
SUMMARY_HEADERS = ["summary", "objective", "profile", "about"]

# Any of these lines ends the section currently being read
CANONICAL_HEADERS = [
    "experience", "education", "skills", "certifications", "projects",
    "achievements", "awards", "languages", "interests", "references",
]

# A line containing one of these words starts a new job entry
ROLE_INDICATORS = [
    "developer", "engineer", "manager", "analyst", "specialist",
    "consultant", "director", "lead",
]

MONTH_NAMES = [
    "jan", "january", "feb", "february", "mar", "march", "apr", "april",
    "may", "jun", "june", "jul", "july", "aug", "august", "sep", "sept",
    "september", "oct", "october", "nov", "november", "dec", "december",
]

DEGREE_KEYWORDS = ["bachelor", "master", "phd", "mba", "bs", "ms", "ba", "ma", "degree"]

# Education strings that satisfy any stated requirement
QUALIFYING_DEGREES = ["bachelor", "master", "phd"]
# Requirement phrases that any candidate satisfies
LENIENT_EDUCATION_REQUIREMENTS = ["high school", "any degree"]
