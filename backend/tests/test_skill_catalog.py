"""Tests for the role/skill catalog."""

import pytest

from services.skill_catalog import (
    CatalogError,
    SkillCatalog,
    UnknownRole,
    default_catalog,
    load_catalog,
)


def test_default_catalog_has_twelve_roles():
    catalog = default_catalog()
    assert len(catalog) == 12
    assert catalog.role_names[0] == "Data Analyst"
    assert catalog.role_names[-1] == "Software Engineer"


def test_lookup_required_skills_and_description(catalog):
    assert "sql" in catalog.required_skills("Data Analyst")
    assert catalog.description("QA Engineer").startswith("Ensure software quality")


def test_unknown_role_raises(catalog):
    with pytest.raises(UnknownRole):
        catalog.required_skills("Astronaut")
    with pytest.raises(UnknownRole):
        catalog.description("Astronaut")


def test_all_skills_deduplicated_in_first_seen_order(catalog):
    skills = catalog.all_skills()
    assert len(skills) == len(set(skills))
    assert skills[:3] == ("python", "sql", "excel")
    assert skills.count("python") == 1


def test_iteration_follows_insertion_order(small_catalog):
    assert [role.name for role in small_catalog] == ["Pythonista", "Web Dev", "Octo"]


def test_from_mapping_strips_whitespace():
    catalog = SkillCatalog.from_mapping(
        {"Role": {"skills": ["  python ", ""], "description": " Text "}}
    )
    assert catalog.required_skills("Role") == ("python",)
    assert catalog.description("Role") == "Text"


@pytest.mark.parametrize(
    "data",
    [
        {},
        [],
        {"Role": "python"},
        {"Role": {"description": "no skills"}},
        {"Role": {"skills": [], "description": "empty"}},
        {"Role": {"skills": ["python", 3]}},
        {"Role": {"skills": ["python"], "description": 42}},
    ],
)
def test_from_mapping_rejects_malformed(data):
    with pytest.raises(CatalogError):
        SkillCatalog.from_mapping(data)


def test_load_catalog_from_yaml(tmp_path):
    path = tmp_path / "catalog.yaml"
    path.write_text(
        "Data Engineer:\n"
        "  description: Builds pipelines.\n"
        "  skills: [python, spark, airflow]\n"
        "Analyst:\n"
        "  skills: [sql]\n",
        encoding="utf-8",
    )
    catalog = load_catalog(path)
    assert catalog.role_names == ["Data Engineer", "Analyst"]
    assert catalog.required_skills("Data Engineer") == ("python", "spark", "airflow")
    assert catalog.description("Analyst") == ""


def test_load_catalog_rejects_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    with pytest.raises(CatalogError):
        load_catalog(path)
