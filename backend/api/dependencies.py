"""Shared dependencies for API routes."""

from services.skill_catalog import SkillCatalog, get_catalog


def get_skill_catalog() -> SkillCatalog:
    return get_catalog()
