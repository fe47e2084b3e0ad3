"""Static keyword and regex tables used by the resume analyzers.

Everything here is built once at import time and never mutated. Keyword
entries are regex fragments (``c\\+\\+``, ``node\\.?js``) so they can be
wrapped in word boundaries by the skill and verb matchers.
"""

from __future__ import annotations

import re

# Every pattern using \b, \d or \w is compiled with ``re.ASCII`` so word and
# digit classes stay within ``[A-Za-z0-9_]``.
EMAIL_RE = re.compile(r"[\w.-]+@[\w.-]+\.\w+", re.IGNORECASE | re.ASCII)
# Permissive on purpose: also matches dates, IDs and other long digit runs.
PHONE_RE = re.compile(
    r"(?:\+\d{1,3}[-.\s]?)?(?:\(?\d{2,4}\)?[-.\s]?)?\d{3,5}[-.\s]?\d{3,5}[-.\s]?\d{0,4}",
    re.ASCII,
)
LINKEDIN_RE = re.compile(r"(?:linkedin\.com/in/|linkedin:?\s*)[\w-]+", re.IGNORECASE | re.ASCII)
GITHUB_RE = re.compile(r"(?:github\.com/|github:?\s*)[\w-]+", re.IGNORECASE | re.ASCII)
WEBSITE_RE = re.compile(
    r"(?:https?://)?(?:www\.)?[\w-]+\.[\w.-]+(?:/[\w.-]*)?",
    re.IGNORECASE | re.ASCII,
)
WEBSITE_EXCLUDE_MARKERS = ("linkedin", "github", "@")
MAX_WEBSITES = 3

NAME_SCAN_LINES = 5
NAME_TOKEN_RE = re.compile(r"^[A-Za-z.-]+$")

SKILL_CATEGORIES: dict[str, tuple[str, ...]] = {
    "programming": (
        "javascript", "typescript", "python", "java", r"c\+\+", "c#", "ruby",
        "php", "swift", "kotlin", "go", "golang", "rust", "scala", r"r\b",
        "matlab", "perl", "shell", "bash", "powershell", "sql", "html", "css",
        "sass", "less", "xml", "json", "yaml",
    ),
    "frameworks": (
        "react", "angular", "vue", "svelte", r"next\.?js", "nuxt", r"node\.?js",
        "express", "django", "flask", "fastapi", "spring", "laravel", "rails",
        r"asp\.net", r"\.net", "flutter", "react native", "electron", "jquery",
        "bootstrap", "tailwind", "material.?ui",
    ),
    "databases": (
        "mysql", "postgresql", "postgres", "mongodb", "redis", "elasticsearch",
        "cassandra", "oracle", "sql server", "sqlite", "dynamodb", "firebase",
        "supabase", "neo4j",
    ),
    "cloud": (
        "aws", "amazon web services", "azure", "google cloud", "gcp", "heroku",
        "vercel", "netlify", "digitalocean", "cloudflare", "docker",
        "kubernetes", "k8s", "terraform", "jenkins", "ci/cd", "github actions",
        "gitlab",
    ),
    "tools": (
        "git", "github", "gitlab", "bitbucket", "jira", "confluence", "slack",
        "figma", "sketch", "adobe", "photoshop", "illustrator", "vs code",
        "intellij", "postman", "swagger", "webpack", "babel", "npm", "yarn",
        "pip",
    ),
    "soft_skills": (
        "leadership", "communication", "teamwork", "collaboration",
        "problem.?solving", "analytical", "creative", "innovative", "agile",
        "scrum", "project management", "time management", "critical thinking",
        "adaptable", "flexible",
    ),
}

SKILL_PATTERNS: dict[str, tuple[re.Pattern[str], ...]] = {
    category: tuple(re.compile(rf"\b{keyword}\b", re.IGNORECASE | re.ASCII) for keyword in keywords)
    for category, keywords in SKILL_CATEGORIES.items()
}

POPULAR_SKILLS: tuple[str, ...] = (
    "React",
    "Node.js",
    "Python",
    "AWS",
    "Docker",
    "Kubernetes",
    "TypeScript",
    "PostgreSQL",
    "MongoDB",
    "Git",
    "CI/CD",
    "REST APIs",
    "GraphQL",
    "Agile",
    "Scrum",
    "Leadership",
    "Communication",
)
MAX_MISSING_SKILLS = 8

ACTION_VERBS: tuple[str, ...] = (
    "achieved", "accomplished", "administered", "analyzed", "architected",
    "automated", "built", "collaborated", "conducted", "configured",
    "coordinated", "created", "delivered", "deployed", "designed", "developed",
    "directed", "documented", "engineered", "enhanced", "established",
    "executed", "expanded", "facilitated", "formulated", "generated", "guided",
    "implemented", "improved", "increased", "initiated", "integrated",
    "introduced", "launched", "led", "managed", "maintained", "mentored",
    "migrated", "modeled", "negotiated", "optimized", "orchestrated",
    "organized", "oversaw", "pioneered", "planned", "presented", "prioritized",
    "produced", "programmed", "reduced", "refactored", "researched", "resolved",
    "restructured", "reviewed", "scaled", "simplified", "solved",
    "spearheaded", "standardized", "streamlined", "strengthened", "supervised",
    "supported", "tested", "trained", "transformed", "troubleshot", "upgraded",
    "utilized", "validated", "wrote",
)
ACTION_VERB_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (verb, re.compile(rf"\b{verb}\b", re.IGNORECASE | re.ASCII)) for verb in ACTION_VERBS
)

# Declaration order is the order of ``sections_found``.
SECTION_PATTERNS: dict[str, re.Pattern[str]] = {
    "summary": re.compile(r"(?:summary|objective|profile|about\s*me)", re.IGNORECASE),
    "experience": re.compile(
        r"(?:experience|employment|work\s*history|professional\s*experience)", re.IGNORECASE
    ),
    "education": re.compile(r"(?:education|academic|qualifications|degree)", re.IGNORECASE),
    "skills": re.compile(r"(?:skills|technical\s*skills|competencies|expertise)", re.IGNORECASE),
    "projects": re.compile(r"(?:projects|portfolio|personal\s*projects)", re.IGNORECASE),
    "certifications": re.compile(
        r"(?:certifications?|certificates?|licenses?|credentials?)", re.IGNORECASE
    ),
    "awards": re.compile(r"(?:awards?|honors?|achievements?|recognition)", re.IGNORECASE),
    "publications": re.compile(r"(?:publications?|papers?|research)", re.IGNORECASE),
    "languages": re.compile(r"(?:languages?|linguistic)", re.IGNORECASE),
    "references": re.compile(r"(?:references?|recommendations?)", re.IGNORECASE),
    "volunteer": re.compile(r"(?:volunteer|community|extracurricular)", re.IGNORECASE),
}

QUANTIFIABLE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\d+%", re.ASCII),
    re.compile(r"\$[\d,]+(?:\.\d{2})?(?:k|m|b)?", re.IGNORECASE | re.ASCII),
    re.compile(r"\d+\+?\s*(?:years?|months?)", re.IGNORECASE | re.ASCII),
    re.compile(
        r"\d+\+?\s*(?:projects?|clients?|users?|customers?|team\s*members?)",
        re.IGNORECASE | re.ASCII,
    ),
)

# Substring keywords, so short ones ("be", "ms") match liberally.
DEGREE_KEYWORDS: tuple[str, ...] = (
    "bachelor", "master", "ph.d", "phd", "doctorate", "diploma", "b.s", "bs",
    "m.s", "ms", "b.a", "ba", "m.a", "ma", "mba", "b.tech", "btech", "m.tech",
    "mtech", "b.e", "be", "m.e", "me", "b.sc", "bsc", "m.sc", "msc", "b.com",
    "bcom", "m.com", "mcom", "bca", "mca", "b.eng", "beng", "m.eng", "meng",
)
INSTITUTION_KEYWORDS: tuple[str, ...] = (
    "university", "college", "institute", "school", "academy", "iit", "nit",
    "bits", "iiit",
)
FIELD_KEYWORDS: tuple[str, ...] = (
    "computer science", "engineering", "information technology", "software",
    "electronics", "mechanical", "electrical", "civil", "business", "commerce",
    "mathematics", "physics", "chemistry", "biology", "economics", "finance",
    "marketing", "management",
)
EDUCATION_BULLET_RE = re.compile(r"^[•\-–—*|►▪]+\s*")
EDUCATION_PHRASE_RE = re.compile(
    r"(?:bachelor'?s?|master'?s?|ph\.?d\.?|b\.?s\.?|m\.?s\.?|b\.?a\.?|m\.?a\.?|mba"
    r"|b\.?tech|m\.?tech|b\.?e\.?|m\.?e\.?)\s+(?:in|of)?\s+[\w\s]+",
    re.IGNORECASE | re.ASCII,
)
EDUCATION_LINE_MIN_CHARS = 5
EDUCATION_LINE_MAX_CHARS = 250
MAX_EDUCATION_ENTRIES = 5

SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
IMPACT_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"(?:increased|decreased|improved|reduced|grew|saved|generated|delivered|achieved|led|managed)",
        re.IGNORECASE,
    ),
    re.compile(r"\d+%", re.ASCII),
    re.compile(r"\$[\d,]+", re.ASCII),
    re.compile(
        r"\d+\s*(?:years?|months?|team|people|projects?|clients?|users?)",
        re.IGNORECASE | re.ASCII,
    ),
)
HIGHLIGHT_MIN_CHARS = 30
HIGHLIGHT_MAX_CHARS = 300
MAX_EXPERIENCE_HIGHLIGHTS = 8
