"""Static keyword dictionary used by the fallback heuristic scorer."""

from __future__ import annotations

from types import MappingProxyType

SKILL_KEYWORDS: tuple[str, ...] = (
    # Languages and web
    "javascript", "react", "node", "python", "java", "c++", "c#", "php", "ruby", "swift",
    "kotlin", "html", "css",
    # Data stores
    "sql", "nosql", "mongodb", "mysql", "postgresql", "oracle",
    # Cloud and tooling
    "aws", "azure", "gcp", "docker", "kubernetes", "jenkins", "git", "github", "gitlab",
    # Process
    "agile", "scrum", "kanban", "jira", "confluence",
    # Soft skills and business
    "leadership", "management", "teamwork", "communication", "problem-solving",
    "analytical", "critical thinking", "creativity", "time management",
    "project management", "product management", "marketing", "sales", "customer service",
    # Data and AI
    "data analysis", "machine learning", "ai", "artificial intelligence", "deep learning",
    "nlp", "natural language processing", "computer vision", "blockchain",
    # Infrastructure and platforms
    "cybersecurity", "networking", "cloud computing", "devops", "sre", "site reliability",
    "full stack", "frontend", "backend", "mobile", "ios", "android", "react native", "flutter",
)

EDUCATION_KEYWORDS: tuple[str, ...] = (
    "degree", "bachelor", "master", "phd", "diploma", "certificate", "university", "college",
    "school", "education", "graduated", "major", "minor", "gpa", "honors", "cum laude",
)

EXPERIENCE_KEYWORDS: tuple[str, ...] = (
    "experience", "work", "job", "position", "role", "responsibility", "project",
    "achievement", "led", "managed", "developed", "created", "implemented", "designed",
    "coordinated", "improved",
)

KEYWORD_DICTIONARY: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        "skill": SKILL_KEYWORDS,
        "education": EDUCATION_KEYWORDS,
        "experience": EXPERIENCE_KEYWORDS,
    }
)
