"""Static skill vocabulary and category map used by the matcher.

The built-in catalog is immutable configuration. Deployments may swap it
for a YAML file (``SKILL_CATALOG_PATH``) shaped like::

    skills:
      - python
      - github actions
    categories:
      Programming Languages: [python, go]

The active catalog is resolved once, on first use, and cached for the life
of the process. Matcher and categorizer functions accept an explicit
``catalog`` so tests can inject smaller vocabularies.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

import yaml

from config import settings

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when a catalog file is missing or malformed."""


@dataclass(frozen=True)
class SkillCatalog:
    """Ordered skill terms plus an ordered category -> terms map."""

    terms: tuple[str, ...]
    categories: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def build(
        cls,
        terms: Iterable[str],
        categories: Mapping[str, Iterable[str]] | None = None,
    ) -> "SkillCatalog":
        frozen = {name: tuple(skills) for name, skills in (categories or {}).items()}
        return cls(terms=tuple(terms), categories=MappingProxyType(frozen))

    def __len__(self) -> int:
        return len(self.terms)


# ---------------------------------------------------------------------------
# Built-in vocabulary. Order matters: extracted skills come back in this order.
# ---------------------------------------------------------------------------
TECHNICAL_SKILLS: tuple[str, ...] = (
    # Programming languages
    "javascript", "typescript", "python", "java", "c++", "c#", "php", "ruby",
    "go", "rust", "swift", "kotlin", "scala", "r", "matlab", "sql",
    "html", "css", "sass", "less",
    # Frameworks & libraries
    "react", "angular", "vue", "svelte", "next.js", "nuxt.js", "node.js",
    "express", "nestjs", "django", "flask", "spring", "laravel", "rails",
    "asp.net", "jquery", "bootstrap", "tailwind", "material-ui",
    # Databases
    "mysql", "postgresql", "mongodb", "redis", "elasticsearch", "sqlite",
    "oracle", "cassandra", "dynamodb", "firebase", "supabase",
    # Cloud & DevOps
    "aws", "azure", "gcp", "docker", "kubernetes", "jenkins", "gitlab",
    "github actions", "terraform", "ansible", "nginx", "apache", "linux",
    "ubuntu", "centos", "prometheus", "grafana",
    # Tools & technologies
    "git", "webpack", "vite", "babel", "eslint", "prettier", "jest",
    "cypress", "selenium", "postman", "figma", "sketch", "photoshop",
    "illustrator",
    # Soft skills
    "leadership", "communication", "teamwork", "problem solving",
    "analytical thinking", "project management", "agile", "scrum", "kanban",
    "mentoring", "collaboration",
)

SKILL_CATEGORIES: dict[str, tuple[str, ...]] = {
    "Programming Languages": (
        "javascript", "typescript", "python", "java", "c++", "c#", "php",
        "ruby", "go", "rust", "swift", "kotlin",
    ),
    "Frontend Technologies": (
        "react", "angular", "vue", "html", "css", "sass", "bootstrap",
        "tailwind", "jquery", "webpack", "vite",
    ),
    "Backend Technologies": (
        "node.js", "express", "django", "flask", "spring", "laravel", "rails",
        "asp.net", "nestjs",
    ),
    "Databases": (
        "mysql", "postgresql", "mongodb", "redis", "elasticsearch", "sqlite",
        "oracle", "firebase",
    ),
    "Cloud & DevOps": (
        "aws", "azure", "gcp", "docker", "kubernetes", "jenkins", "terraform",
        "linux", "nginx", "prometheus", "grafana",
    ),
    "Testing & Quality": (
        "jest", "cypress", "selenium", "unit testing", "integration testing",
        "test driven development",
    ),
}

DEFAULT_CATALOG = SkillCatalog.build(TECHNICAL_SKILLS, SKILL_CATEGORIES)


def _string_list(value: object, where: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise CatalogError(f"{where} must be a list of strings")
    return value


def load_catalog(path: str | Path) -> SkillCatalog:
    """Load a catalog from a YAML file with ``skills`` and ``categories`` keys."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except OSError as e:
        raise CatalogError(f"Cannot read skill catalog {path}: {e}") from e
    except yaml.YAMLError as e:
        raise CatalogError(f"Invalid YAML in skill catalog {path}: {e}") from e

    if not isinstance(raw, dict):
        raise CatalogError(f"Skill catalog {path} must be a mapping")

    terms = _string_list(raw.get("skills"), "skills")
    raw_categories = raw.get("categories") or {}
    if not isinstance(raw_categories, dict):
        raise CatalogError("categories must be a mapping of name -> skill list")
    categories = {
        str(name): _string_list(skills, f"categories[{name!r}]")
        for name, skills in raw_categories.items()
    }

    catalog = SkillCatalog.build(terms, categories)
    logger.info(
        "Loaded skill catalog from %s (%d skills, %d categories)",
        path, len(catalog.terms), len(catalog.categories),
    )
    return catalog


_active: SkillCatalog | None = None


def get_catalog() -> SkillCatalog:
    """Return the process-wide catalog, loading the configured file on first use."""
    global _active
    if _active is None:
        if settings.skill_catalog_path:
            _active = load_catalog(settings.skill_catalog_path)
        else:
            _active = DEFAULT_CATALOG
    return _active


def clear() -> None:
    """Forget the cached catalog. Useful for testing."""
    global _active
    _active = None
