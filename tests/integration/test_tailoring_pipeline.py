"""
Integration tests for the full tailoring pipeline.

Profile document -> JobInput -> tailor_resume -> TailoredResume / preview.
Covers the end-to-end guarantees: determinism, entries never dropped, caps
respected, entered order on an empty job description, and monotonic
relevance.
"""

import json
from dataclasses import replace
from pathlib import Path

import pytest

from tailor.contexts.intake.job_input import JobInput
from tailor.contexts.profile.profile_data_structure import (
    Bullet,
    ExperienceEntry,
    MasterProfile,
    SkillSet,
)
from tailor.contexts.rendering.preview_formatter import format_preview_markdown
from tailor.contexts.targeting.config_resolver import TargetingConfig
from tailor.contexts.targeting.defaults import DEFAULT_SUMMARY_CONNECTIVE
from tailor.contexts.targeting.engine import tailor_resume

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"


@pytest.fixture
def profile():
    return MasterProfile.from_file(FIXTURES_PATH / "profile.yaml")


@pytest.fixture
def job():
    return JobInput.from_file(FIXTURES_PATH / "data_engineer_job.md")


@pytest.mark.integration
def test_python_pipelines_scenario():
    """Test a Python/pipelines job pulls both matching bullets and the matching skill to the front."""
    profile = MasterProfile(
        experience=(
            ExperienceEntry(
                "exp-1",
                "Acme",
                "Data Engineer",
                end_date="Present",
                bullets=(
                    Bullet("b-1", "Led weekly stakeholder meetings"),
                    Bullet("b-2", "Built Python data pipelines on Airflow"),
                    Bullet("b-3", "Organized team offsites"),
                    Bullet("b-4", "Tuned Python ETL pipelines"),
                    Bullet("b-5", "Presented quarterly roadmaps"),
                ),
            ),
        ),
        skills=SkillSet(languages=("Java", "Python"), tools=("Excel",)),
    )

    resume = tailor_resume(profile, "Seeking a Python engineer to build data pipelines")

    # Default cap of 4: matches first, then non-matching in entered order
    assert list(resume.experience[0].bullets) == [
        "Built Python data pipelines on Airflow",
        "Tuned Python ETL pipelines",
        "Led weekly stakeholder meetings",
        "Organized team offsites",
    ]
    assert resume.skills[0] == "Python"
    assert resume.target_title == "Python Engineer"
    assert resume.summary.startswith("Data Engineer with experience in Python")


@pytest.mark.integration
def test_empty_job_keeps_entered_skill_order():
    """Test an empty job keeps the entered skill order."""
    profile = MasterProfile(skills=SkillSet(languages=("Python",), tools=("Git",)))
    resume = tailor_resume(profile, "")
    assert list(resume.skills) == ["Python", "Git"]


@pytest.mark.integration
def test_empty_profile_yields_empty_lists():
    """Test an empty profile yields empty sections and a derived title."""
    resume = tailor_resume(MasterProfile(name="Sam"), "Python engineer")
    assert resume.experience == ()
    assert resume.projects == ()
    assert resume.skills == ()
    assert resume.target_title == "Python Engineer"
    assert resume.summary == "Professional. " + DEFAULT_SUMMARY_CONNECTIVE


@pytest.mark.integration
def test_none_inputs_never_raise():
    """Test None inputs never raise."""
    resume = tailor_resume(None, None)
    assert resume.target_title == "Professional"
    assert resume.skills == ()


@pytest.mark.integration
def test_fixture_profile_against_fixture_job(profile, job):
    """Test the fixture profile tailored to the fixture job."""
    resume = tailor_resume(profile, job)

    assert resume.target_title == "Senior Data Engineer"
    assert resume.summary == (
        "Data Engineer with experience in Python, SQL and Airflow. " + DEFAULT_SUMMARY_CONNECTIVE
    )

    acme, globex = resume.experience
    assert acme.company == "Acme Analytics"
    assert acme.bullets == (
        "Built Python data pipelines on Airflow processing 2TB daily",
        "Migrated legacy SQL reports to dbt models",
        "Mentored two junior analysts on reporting standards",
        "Organized the quarterly planning offsite",
    )
    assert globex.bullets == (
        "Automated nightly Python ETL jobs with cron",
        "Maintained a Java billing service",
    )
    assert resume.projects[0].bullets == (
        "Designed a Spark job that compacts hourly sensor files",
        "Published dashboards with Grafana",
    )
    assert list(resume.skills) == [
        "Python", "SQL", "Airflow", "AWS", "dbt",
        "Java", "Spark", "PostgreSQL", "Git", "Docker",
    ]


@pytest.mark.integration
def test_entries_never_dropped_and_caps_respected(profile, job):
    """Test entries are never dropped and caps hold."""
    config = TargetingConfig(max_bullets_per_entry=1)
    resume = tailor_resume(profile, job, config)
    assert [e.company for e in resume.experience] == [e.company for e in profile.experience]
    assert [p.name for p in resume.projects] == [p.name for p in profile.projects]
    assert all(len(e.bullets) <= 1 for e in resume.experience + resume.projects)


@pytest.mark.integration
def test_total_budget_spans_experience_and_projects(profile, job):
    """Test the total bullet budget covers experience and projects."""
    config = TargetingConfig(max_bullets_per_entry=4, max_total_bullets=4)
    resume = tailor_resume(profile, job, config)
    counts = [len(e.bullets) for e in resume.experience] + [len(p.bullets) for p in resume.projects]
    assert sum(counts) == 4
    assert all(count >= 1 for count in counts)


@pytest.mark.integration
def test_empty_job_keeps_entered_order(profile):
    """Test an empty job keeps entered bullet order."""
    resume = tailor_resume(profile, JobInput())
    assert resume.experience[0].bullets == tuple(b.text for b in profile.experience[0].bullets[:4])
    assert resume.skills[0] == "Python"
    assert resume.target_title == "Data Engineer"


@pytest.mark.integration
def test_explicit_job_title(profile):
    """Test an explicit job title is used."""
    job = JobInput.from_file(FIXTURES_PATH / "data_engineer_job.json")
    resume = tailor_resume(profile, job)
    assert resume.target_title == "Staff Data Engineer"
    assert "https://example.com/careers" in format_preview_markdown(resume, profile, job)


@pytest.mark.integration
def test_deterministic(profile, job):
    """Test tailoring is deterministic."""
    first = tailor_resume(profile, job)
    second = tailor_resume(profile, job)
    assert first == second
    assert first.to_json() == second.to_json()


@pytest.mark.integration
def test_profile_not_mutated(profile, job):
    """Test tailoring does not modify the profile."""
    before = profile.to_dict()
    tailor_resume(profile, job, TargetingConfig(max_bullets_per_entry=1))
    assert profile.to_dict() == before


@pytest.mark.integration
def test_adding_keyword_never_lowers_bullet_rank(profile):
    """Adding a matching keyword to a bullet can only move it up."""
    text = "Kafka streaming"
    job = JobInput.from_text(f"{text} with Python")

    rank_before = list(tailor_resume(profile, job).experience[0].bullets).index(
        "Mentored two junior analysts on reporting standards"
    )

    entry = profile.experience[0]
    boosted = tuple(
        replace(b, text=b.text + " using Kafka") if b.id == "b-1" else b for b in entry.bullets
    )
    boosted_profile = replace(profile, experience=(replace(entry, bullets=boosted),) + profile.experience[1:])
    rank_after = list(tailor_resume(boosted_profile, job).experience[0].bullets).index(
        "Mentored two junior analysts on reporting standards using Kafka"
    )

    assert rank_after <= rank_before


@pytest.mark.integration
def test_json_shape(profile, job):
    """Test the JSON export shape."""
    data = json.loads(tailor_resume(profile, job).to_json())
    assert set(data) == {"targetTitle", "summary", "experience", "projects", "skills"}
    assert set(data["experience"][0]) == {"company", "title", "bullets"}
    assert set(data["projects"][0]) == {"name", "bullets"}
