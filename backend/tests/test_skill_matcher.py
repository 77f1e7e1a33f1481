"""Tests for catalog-based skill extraction."""

from services.skill_catalog import DEFAULT_CATALOG, SkillCatalog
from services.skill_matcher import extract_skills, matches_skill


def test_extract_skills_finds_python_and_javascript():
    skills = extract_skills("Experience with Python and JavaScript")
    assert "python" in skills
    assert "javascript" in skills


def test_short_skill_requires_whole_word(small_catalog):
    assert extract_skills("I like mango smoothies", small_catalog) == []
    assert extract_skills("Backend services written in Go", small_catalog) == ["go"]


def test_short_skill_not_matched_inside_longer_token(small_catalog):
    assert "aws" not in extract_skills("Awesome awsome team", small_catalog)


def test_long_skill_matches_inside_compound(small_catalog):
    skills = extract_skills("Built kubernetes-native deployments", small_catalog)
    assert skills == ["kubernetes"]


def test_long_skill_matches_when_containing_a_phrase(small_catalog):
    # "node" (4 chars) is a substring of the normalized term "node js"
    assert extract_skills("Node, Python", small_catalog) == ["python", "node.js"]
    assert "github actions" in extract_skills("Hosted on GitHub", small_catalog)


def test_long_skill_ignores_short_phrases(small_catalog):
    # "git" is only three characters, too short to count as part of "github actions"
    assert extract_skills("git", small_catalog) == []


def test_java_matches_inside_javascript():
    # Longer terms allow substring matches, so "java" is found in "javascript"
    skills = extract_skills("Proficient in JavaScript")
    assert "javascript" in skills
    assert "java" in skills


def test_single_character_terms_never_match(small_catalog):
    # "c++" normalizes to "c"
    assert extract_skills("C++ and C experts", small_catalog) == []
    assert "r" not in extract_skills("R programming for statistics")


def test_multiword_skill():
    skills = extract_skills("Strong problem solving and project management skills")
    assert "problem solving" in skills
    assert "project management" in skills


def test_dotted_skill_names():
    skills = extract_skills("Built APIs with Node.js and Next.js")
    assert "node.js" in skills
    assert "next.js" in skills


def test_results_follow_catalog_order(small_catalog):
    assert extract_skills("AWS, Kubernetes and Python", small_catalog) == [
        "python", "aws", "kubernetes",
    ]


def test_duplicate_catalog_terms_reported_once(small_catalog):
    assert extract_skills("python python", small_catalog) == ["python"]


def test_spellings_that_normalize_alike_reported_once():
    catalog = SkillCatalog.build(["Python", "python", "Node.js", "node js"])
    assert extract_skills("python and node js", catalog) == ["Python", "Node.js"]


def test_results_are_catalog_terms():
    text = "Senior engineer: Python, Go, AWS, k8s, CI/CD, React, TypeScript, teamwork."
    skills = extract_skills(text)
    assert set(skills) <= set(DEFAULT_CATALOG.terms)


def test_empty_and_noise_text():
    assert extract_skills("") == []
    assert extract_skills("   ...!!!   ") == []


def test_empty_catalog_matches_nothing():
    assert extract_skills("Python and Go", SkillCatalog.build([])) == []


def test_extract_skills_is_case_insensitive(small_catalog):
    assert extract_skills("PYTHON", small_catalog) == ["python"]
    upper = SkillCatalog.build(["Python"])
    assert extract_skills("python", upper) == ["Python"]


def test_matches_skill_rules():
    assert matches_skill("go", ["go"])
    assert matches_skill("go", ["use go daily"])
    assert not matches_skill("go", ["mango"])
    assert matches_skill("kubernetes", ["kubernetes cluster"])
    assert matches_skill("node js", ["node"])
    assert not matches_skill("node js", ["js"])
    assert not matches_skill("r", ["r"])
