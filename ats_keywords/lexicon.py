# ats_keywords/lexicon.py
from __future__ import annotations

import re
from typing import Dict, FrozenSet, Tuple

# ------- Blacklist: stopwords + generic job-ad filler -------
BLACKLIST: FrozenSet[str] = frozenset(
    {
        # generic job posting words
        "remote", "hybrid", "office", "work", "team", "teams", "culture", "apply",
        "application", "bonus", "salary", "benefits", "perks", "hiring", "career",
        "careers", "job", "jobs", "position", "role", "roles", "opportunity",
        "opportunities", "company", "organization", "employer", "employee",
        "employees", "location", "full-time", "part-time", "contract", "day", "days",
        "week", "weeks", "month", "months", "time", "today", "world", "people",
        "customers", "clients", "business", "industry", "environment", "level",
        "status", "applicants", "description", "responsibilities",
        # common verbs / actions (not skills)
        "looking", "seeking", "required", "requirements", "require", "requires",
        "preferred", "ability", "able", "experience", "experienced", "years", "year",
        "etc", "including", "include", "includes", "new", "well", "based", "using",
        "within", "across", "strong", "excellent", "good", "great", "ensure",
        "ensuring", "provide", "providing", "support", "supporting", "help",
        "helping", "develop", "developing", "build", "building", "create",
        "creating", "understand", "understanding", "knowledge", "skills", "skill",
        "candidate", "candidates", "applicant", "must", "shall", "will", "ideally",
        "highly", "plus", "nice", "have", "having", "get", "getting", "make",
        "making", "take", "taking", "use", "used", "uses", "per", "via", "like",
        "want", "wants", "wanted", "join", "joining", "joined", "lead", "leading",
        "leverage", "working", "works", "worked", "manage", "managing",
        "drive", "deliver", "delivering", "partner", "own", "owning", "bring",
        "communicator", "related", "relevant", "equivalent", "minimum", "proven",
        "solid", "familiarity", "familiar", "proficiency", "proficient", "expertise",
        "qualifications", "responsible", "degree", "bachelor", "preferably",
        # stop words
        "the", "and", "for", "with", "our", "you", "your", "this", "that", "these",
        "those", "are", "was", "were", "been", "being", "has", "had", "does", "did",
        "doing", "would", "should", "could", "may", "might", "can", "need", "needs",
        "from", "into", "over", "under", "about", "after", "before", "between",
        "through", "during", "above", "below", "such", "each", "every", "both", "few",
        "more", "most", "other", "some", "any", "all", "only", "same", "than",
        "too", "very", "just", "also", "now", "here", "there", "then", "when",
        "where", "why", "how", "what", "which", "who", "whom", "its", "their",
        "they", "them", "not", "but", "out", "while", "one", "two",
        "three", "yes",
        # business buzzwords (not ATS keywords)
        "passionate", "dynamic", "innovative", "fast-paced", "collaborative",
        "driven", "motivated", "self-starter", "proactive", "detail-oriented",
        "results-driven", "team-player", "hands-on", "startup", "scale", "grow",
        "growth", "impact", "mission", "vision", "values", "diverse", "inclusive",
        "equal", "exciting", "amazing", "world-class", "best", "top",
    }
)

# ------- Skill dictionary (lowercase, literal) -------
SKILL_DICTIONARY: FrozenSet[str] = frozenset(
    {
        # languages
        "python", "java", "javascript", "typescript", "c++", "c#", "ruby", "golang",
        "rust", "scala", "kotlin", "swift", "php", "perl", "sql", "bash",
        "powershell", "matlab", "html", "css",
        # frameworks / libraries
        "react", "angular", "vue", "node.js", "nodejs", "django", "flask",
        "fastapi", "spring", "rails", "laravel", "express", "next.js", "nuxt",
        "graphql", "redux", "jquery",
        # cloud / devops
        "aws", "azure", "gcp", "docker", "kubernetes", "terraform", "ansible",
        "jenkins", "linux", "devops", "ci/cd", "helm", "prometheus", "grafana",
        "cloudformation", "serverless", "microservices",
        # data / ml
        "nosql", "mongodb", "postgresql", "mysql", "redis", "elasticsearch",
        "kafka", "spark", "hadoop", "tensorflow", "pytorch", "scikit-learn",
        "pandas", "numpy", "snowflake", "airflow", "tableau", "looker", "power bi",
        "excel", "analytics", "statistics", "forecasting", "etl", "dbt",
        "bigquery", "databricks", "machine learning", "deep learning",
        "data analysis", "data modeling", "data visualization",
        # saas / crm / go-to-market
        "salesforce", "hubspot", "zendesk", "marketo", "gainsight", "netsuite",
        "workday", "servicenow", "crm", "erp", "saas", "b2b", "reporting",
        "dashboards", "pipeline", "onboarding", "renewals", "upsell",
        "retention", "churn", "quota", "prospecting", "negotiation",
        "account management", "customer success", "stakeholder management",
        # security
        "security", "cybersecurity", "siem", "soc", "iam", "oauth", "sso",
        "encryption", "firewall", "penetration testing", "vulnerability",
        "compliance", "gdpr", "hipaa", "iso 27001", "soc 2",
        # tools / methods
        "git", "github", "gitlab", "jira", "confluence", "agile", "scrum",
        "kanban", "rest", "api", "apis", "figma", "slack", "notion", "asana",
        "communication", "leadership", "mentoring", "presentation",
        "problem solving", "project management", "product management",
        "program management", "budgeting", "strategy", "operations",
        "troubleshooting", "testing", "automation", "documentation",
    }
)

SKILLS_LONGEST_FIRST: Tuple[str, ...] = tuple(
    sorted(SKILL_DICTIONARY, key=lambda s: (-len(s), s))
)

# ------- Multi-word phrase library -------
PHRASE_LIBRARY: Tuple[str, ...] = (
    "customer success manager",
    "customer success",
    "customer experience",
    "customer retention",
    "account management",
    "account executive",
    "business development",
    "sales operations",
    "revenue operations",
    "go-to-market",
    "stakeholder management",
    "cross-functional collaboration",
    "project management",
    "product management",
    "program management",
    "change management",
    "risk management",
    "vendor management",
    "time management",
    "people management",
    "machine learning",
    "deep learning",
    "natural language processing",
    "computer vision",
    "artificial intelligence",
    "data science",
    "data analysis",
    "data engineering",
    "data modeling",
    "data visualization",
    "data pipelines",
    "business intelligence",
    "power bi",
    "google analytics",
    "a/b testing",
    "unit testing",
    "test automation",
    "continuous integration",
    "continuous delivery",
    "infrastructure as code",
    "distributed systems",
    "system design",
    "cloud infrastructure",
    "incident response",
    "security awareness",
    "penetration testing",
    "vulnerability management",
    "identity and access management",
    "problem solving",
    "critical thinking",
    "attention to detail",
    "written communication",
    "verbal communication",
    "public speaking",
    "technical writing",
    "agile methodologies",
    "software development",
    "full stack",
    "front end",
    "back end",
    "rest apis",
)

PHRASES_LONGEST_FIRST: Tuple[str, ...] = tuple(
    sorted(dict.fromkeys(PHRASE_LIBRARY), key=len, reverse=True)
)

PHRASE_SET: FrozenSet[str] = frozenset(PHRASE_LIBRARY)

# ------- High-value category patterns -------
# Tokens are bounded by "not a word char and not + #" on both sides,
# so c++ / c# / node.js match as whole terms.
_L = r"(?<![\w+#])"
_R = r"(?![\w+#])"


def _category(*alternatives: str) -> re.Pattern:
    return re.compile(_L + "(?:" + "|".join(alternatives) + ")" + _R, re.I)


HIGH_VALUE_PATTERNS: Dict[str, re.Pattern] = {
    "languages": _category(
        r"python", r"java", r"javascript", r"typescript", r"c\+\+", r"c#", r"ruby",
        r"golang", r"rust", r"scala", r"kotlin", r"swift", r"php", r"perl",
    ),
    "frameworks": _category(
        r"react", r"angular", r"vue", r"node\.?js", r"django", r"flask", r"spring",
        r"rails", r"laravel", r"express", r"next\.?js", r"nuxt", r"fastapi",
    ),
    "cloud_devops": _category(
        r"aws", r"azure", r"gcp", r"docker", r"kubernetes", r"k8s", r"terraform",
        r"ansible", r"jenkins", r"ci/cd", r"devops", r"linux",
    ),
    "data_ml": _category(
        r"sql", r"nosql", r"mongodb", r"postgresql", r"mysql", r"redis",
        r"elasticsearch", r"kafka", r"spark", r"hadoop", r"tensorflow", r"pytorch",
        r"scikit-learn", r"pandas", r"numpy", r"snowflake", r"tableau", r"power bi",
    ),
    "saas_crm": _category(
        r"salesforce", r"hubspot", r"zendesk", r"gainsight", r"marketo",
        r"netsuite", r"servicenow", r"crm", r"saas",
    ),
    "security": _category(
        r"cybersecurity", r"siem", r"soc\s?2", r"iso\s?27001", r"oauth", r"sso",
        r"penetration testing", r"gdpr", r"hipaa",
    ),
    "tools_methods": _category(
        r"git", r"github", r"gitlab", r"jira", r"confluence", r"agile", r"scrum",
        r"kanban", r"rest", r"graphql", r"api", r"microservices",
    ),
}

# ------- Auxiliary multi-word technical patterns -------
AUXILIARY_PATTERNS: Tuple[re.Pattern, ...] = (
    # hyphenated / dotted terms: node.js, ci-cd
    re.compile(r"\b[a-z]+[\-\.][a-z]+(?:[\-\.][a-z]+)*", re.I),
    re.compile(r"\b(?:machine|deep)\s+learning\b", re.I),
    re.compile(
        r"\b(?:data|software|web|cloud|security|full[\-\s]?stack)\s+"
        r"(?:engineer|developer|architect|analyst|scientist)\b",
        re.I,
    ),
    re.compile(r"\b(?:project|product|program|account)\s+management\b", re.I),
    re.compile(r"\b(?:customer|partner|client)\s+success\b", re.I),
    re.compile(r"\bsecurity\s+awareness\b", re.I),
)

# ------- Narrative context cues (clause captured up to , . ;) -------
NARRATIVE_CUES: Tuple[re.Pattern, ...] = (
    re.compile(
        r"(?:experience|expertise|proficiency|knowledge|skills?)\s+"
        r"(?:in|with|of|using)\s+([^,.;]+)",
        re.I,
    ),
    re.compile(r"(?:working|work)\s+with\s+([^,.;]+)", re.I),
    re.compile(r"(?:using|use)\s+([^,.;]+)", re.I),
    re.compile(r"(?:including|such as|like)\s+([^,.;]+)", re.I),
)

# ------- Bullet / numbered list markers -------
BULLET_LINE = re.compile(r"^\s*(?:[-•●○◦▪▸►]\s*\S|\d+[.)]\s*\S)")
BULLET_MARKER = re.compile(r"^\s*(?:[-•●○◦▪▸►]+|\d+[.)])\s*")
