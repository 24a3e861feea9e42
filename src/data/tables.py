# src/data/tables.py — v2
"""Static weight tables shipped with the engine.

Skill keys are pre-normalized (see data/normalizer.py). Keys containing
characters the normalizer does not strip (e.g. "c++") can never match, so
such skills are stored under a spelled-out key ("cpp", "csharp").
"""

from __future__ import annotations

BASE_SALARIES: dict[str, int] = {
    "US": 75000,
    "EU": 55000,
    "UK": 60000,
    "CA": 70000,
    "AU": 72000,
    "IN": 25000,
    "NG": 18000,
    "LATAM": 35000,
    "APAC": 45000,
}

SKILLS: dict[str, float] = {
    # Languages
    "javascript": 1.0,
    "typescript": 1.15,
    "python": 1.2,
    "go": 1.25,
    "rust": 1.3,
    "java": 1.1,
    "kotlin": 1.15,
    "swift": 1.2,
    "cpp": 1.2,
    "csharp": 1.15,
    "ruby": 1.05,
    "php": 0.95,
    "scala": 1.25,
    "elixir": 1.2,
    # Frontend
    "react": 1.15,
    "vue": 1.1,
    "angular": 1.1,
    "svelte": 1.15,
    "nextjs": 1.2,
    "nuxt": 1.15,
    # Backend
    "nodejs": 1.1,
    "express": 1.05,
    "fastify": 1.1,
    "nestjs": 1.15,
    "django": 1.15,
    "flask": 1.1,
    "rails": 1.1,
    "spring": 1.15,
    # Databases
    "postgresql": 1.15,
    "mongodb": 1.1,
    "mysql": 1.05,
    "redis": 1.15,
    "elasticsearch": 1.2,
    "dynamodb": 1.15,
    "cassandra": 1.2,
    # Cloud & DevOps
    "aws": 1.25,
    "azure": 1.2,
    "gcp": 1.2,
    "docker": 1.15,
    "kubernetes": 1.3,
    "terraform": 1.25,
    "ansible": 1.15,
    "jenkins": 1.1,
    "githubactions": 1.15,
    # Data & ML
    "machinelearning": 1.35,
    "deeplearning": 1.4,
    "tensorflow": 1.3,
    "pytorch": 1.35,
    "pandas": 1.15,
    "spark": 1.25,
    "airflow": 1.2,
    # Mobile
    "reactnative": 1.15,
    "flutter": 1.2,
    "ios": 1.2,
    "android": 1.15,
    # Other
    "graphql": 1.15,
    "grpc": 1.2,
    "microservices": 1.2,
    "blockchain": 1.3,
    "webassembly": 1.25,
    "cybersecurity": 1.3,
}

EXPERIENCE: dict[str, float] = {
    "perYear": 0.05,
    "maxYears": 15,
    "seniorBonus": 0.2,
}

COMBOS: list[dict] = [
    {"skills": ["react", "typescript", "nodejs"], "bonus": 0.15},
    {"skills": ["python", "machinelearning", "tensorflow"], "bonus": 0.25},
    {"skills": ["kubernetes", "aws", "terraform"], "bonus": 0.2},
    {"skills": ["go", "microservices", "grpc"], "bonus": 0.18},
    {"skills": ["rust", "webassembly"], "bonus": 0.22},
    {"skills": ["react", "nextjs", "typescript"], "bonus": 0.18},
]

CURRENCIES: dict[str, str] = {
    "US": "USD",
    "EU": "EUR",
    "UK": "GBP",
    "CA": "CAD",
    "AU": "AUD",
    "IN": "INR",
    "NG": "NGN",
    "LATAM": "USD",
    "APAC": "USD",
}

REGION_CODES: tuple[str, ...] = tuple(BASE_SALARIES)

FALLBACK_REGION = "US"
FALLBACK_CURRENCY = "USD"


def static_payload() -> dict:
    """Return the static tables in the wire shape a live source would produce."""
    return {
        "baseSalaries": dict(BASE_SALARIES),
        "skills": dict(SKILLS),
        "experience": dict(EXPERIENCE),
        "combos": [
            {"skills": list(c["skills"]), "bonus": c["bonus"]} for c in COMBOS
        ],
        "currencies": dict(CURRENCIES),
    }
