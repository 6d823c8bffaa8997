"""
Unit tests for target title and summary composition.
"""

import pytest

from tailor.contexts.intake.keyword_extractor import extract_keywords
from tailor.contexts.profile.profile_data_structure import ExperienceEntry, MasterProfile
from tailor.contexts.targeting.composer import (
    best_role_phrase,
    compose_summary,
    compose_title,
    compose_title_and_summary,
)
from tailor.contexts.targeting.defaults import DEFAULT_FALLBACK_TITLE, DEFAULT_SUMMARY_CONNECTIVE


def profile_with(*entries):
    return MasterProfile(name="Jordan", experience=tuple(entries))


DATA_ENGINEER = ExperienceEntry(
    id="exp-1", company="Acme", title="Data Engineer", start_date="2021", end_date="Present"
)
DEVELOPER = ExperienceEntry(
    id="exp-2", company="Globex", title="Software Developer", start_date="2017", end_date="2021"
)


@pytest.mark.unit
class TestBestRolePhrase:
    def test_title_cased_role_phrase(self):
        """Test the role phrase is title-cased."""
        keywords = extract_keywords("Seeking a Python engineer to build data pipelines")
        assert best_role_phrase(keywords) == "Python Engineer"

    def test_existing_uppercase_preserved(self):
        """Test acronyms in the role phrase keep their casing."""
        keywords = extract_keywords("We want an AWS engineer")
        assert best_role_phrase(keywords) == "AWS Engineer"

    def test_most_frequent_role_phrase_wins(self):
        """Test the most frequent role phrase is chosen."""
        keywords = extract_keywords(
            "Platform engineer needed. Backend developer wanted. Our backend developer team grows."
        )
        assert best_role_phrase(keywords) == "Backend Developer"

    def test_none_without_role_phrase(self):
        """Test no title is derived without a role phrase."""
        assert best_role_phrase(extract_keywords("python and sql")) is None
        assert best_role_phrase(extract_keywords("")) is None

    def test_plain_mapping_has_no_role_phrases(self):
        """Test a plain weight mapping yields no role phrase."""
        assert best_role_phrase({"python": 1.0}) is None


@pytest.mark.unit
class TestRoleTitleWordForms:
    """Role titles keep the words of the phrase, not of an earlier form sharing its stem."""

    def test_engineering_before_engineer(self):
        """Test 'Engineering org' earlier in the text does not rename the Data Engineer title."""
        keywords = extract_keywords("Our Engineering org needs a Data Engineer to build pipelines.")
        assert compose_title(MasterProfile(name="Sam"), keywords) == "Data Engineer"

    def test_develop_before_developer(self):
        """Test the verb 'develop' does not replace 'developer' in the title."""
        keywords = extract_keywords("You will develop and ship features as a senior backend developer.")
        assert compose_title(MasterProfile(name="Sam"), keywords) == "Senior Backend Developer"

    def test_design_before_designer(self):
        """Test the verb 'design' does not replace 'designer' in the title."""
        keywords = extract_keywords("You will design flows. We want a product designer.")
        assert compose_title(MasterProfile(name="Sam"), keywords) == "Product Designer"

    def test_leading_before_lead(self):
        """Test 'Leading' earlier in the text does not replace 'lead' in the title."""
        keywords = extract_keywords("Leading projects is key. We are hiring a tech lead.")
        assert compose_title(MasterProfile(name="Sam"), keywords) == "Tech Lead"

    def test_role_surface_keeps_first_occurrence(self):
        """Test the role phrase display comes from its first occurrence in the text."""
        keywords = extract_keywords("You will develop tools as a backend developer.")
        assert keywords.display_role("backend develop") == "backend developer"
        # Unrelated display forms are untouched
        assert keywords.display("develop") == "develop"


@pytest.mark.unit
class TestComposeTitle:
    def test_explicit_job_title_wins(self):
        """Test an explicit job title is used, stripped."""
        keywords = extract_keywords("Seeking a Python engineer")
        title = compose_title(profile_with(DATA_ENGINEER), keywords, job_title="  Staff Engineer ")
        assert title == "Staff Engineer"

    def test_role_phrase_before_profile_title(self):
        """Test a derived role phrase beats the most recent profile title."""
        keywords = extract_keywords("Seeking a Python engineer")
        assert compose_title(profile_with(DATA_ENGINEER), keywords) == "Python Engineer"

    def test_most_recent_title_without_role_phrase(self):
        """Test the most recent experience title is used without a role phrase."""
        keywords = extract_keywords("python and sql")
        assert compose_title(profile_with(DEVELOPER, DATA_ENGINEER), keywords) == "Data Engineer"

    def test_fallback_title(self):
        """Test the fallback title when nothing else is available."""
        assert compose_title(MasterProfile(), extract_keywords("")) == DEFAULT_FALLBACK_TITLE

    def test_blank_job_title_ignored(self):
        """Test a blank job title falls through to the profile title."""
        assert compose_title(profile_with(DEVELOPER), extract_keywords(""), job_title="  ") == "Software Developer"


@pytest.mark.unit
class TestComposeSummary:
    def test_summary_template(self):
        """Test the summary names the title, top three skills and connective."""
        summary = compose_summary(profile_with(DATA_ENGINEER), ["Python", "SQL", "Airflow", "Git"])
        assert summary == (
            "Data Engineer with experience in Python, SQL and Airflow. " + DEFAULT_SUMMARY_CONNECTIVE
        )

    def test_single_skill(self):
        """Test a single skill summary without a connective."""
        summary = compose_summary(profile_with(DATA_ENGINEER), ["Python"], connective="")
        assert summary == "Data Engineer with experience in Python."

    def test_no_skills(self):
        """Test the summary without skills."""
        summary = compose_summary(profile_with(DATA_ENGINEER), [])
        assert summary == "Data Engineer. " + DEFAULT_SUMMARY_CONNECTIVE

    def test_empty_profile_never_raises(self):
        """Test an empty profile still gets a summary."""
        summary = compose_summary(MasterProfile(), [])
        assert summary.startswith(DEFAULT_FALLBACK_TITLE)

    def test_skill_count(self):
        """Test summary_skill_count limits the skills named."""
        summary = compose_summary(
            profile_with(DATA_ENGINEER), ["Python", "SQL", "Airflow"], summary_skill_count=1, connective=""
        )
        assert summary == "Data Engineer with experience in Python."


@pytest.mark.unit
def test_compose_title_and_summary():
    """Test title and summary are composed together."""
    keywords = extract_keywords("Seeking a Python engineer to build data pipelines")
    title, summary = compose_title_and_summary(
        profile_with(DEVELOPER, DATA_ENGINEER), keywords, ranked_skills=["Python", "SQL"]
    )
    assert title == "Python Engineer"
    assert summary.startswith("Data Engineer with experience in Python and SQL.")
