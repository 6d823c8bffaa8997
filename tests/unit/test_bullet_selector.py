"""
Unit tests for bullet selection: per-entry caps, stable ordering and the
optional total budget.
"""

import pytest

from tailor.contexts.intake.keyword_extractor import extract_keywords
from tailor.contexts.profile.profile_data_structure import Bullet, ExperienceEntry, ProjectEntry
from tailor.contexts.targeting.bullet_selector import BulletBudget, select_bullets


def make_entry(entry_id, *texts):
    return ExperienceEntry(
        id=entry_id,
        company=f"Company {entry_id}",
        title="Engineer",
        bullets=tuple(Bullet(id=f"b-{i + 1}", text=text) for i, text in enumerate(texts)),
    )


def texts(entry):
    return [bullet.text for bullet in entry.bullets]


NO_KEYWORDS = extract_keywords("")


@pytest.mark.unit
class TestPerEntryCap:
    def test_cap_respected(self):
        """Test no entry keeps more bullets than the per-entry cap."""
        entry = make_entry("e1", *[f"bullet {n}" for n in range(6)])
        [selected] = select_bullets([entry], NO_KEYWORDS, BulletBudget(per_entry=4))
        assert len(selected.bullets) == 4

    def test_default_budget_caps_at_four(self):
        """Test the default budget keeps four bullets per entry."""
        entry = make_entry("e1", *[f"bullet {n}" for n in range(6)])
        [selected] = select_bullets([entry], NO_KEYWORDS)
        assert len(selected.bullets) == 4

    def test_zero_cap_keeps_entry(self):
        """Test a zero cap empties the bullets but keeps the entry."""
        entry = make_entry("e1", "one", "two")
        [selected] = select_bullets([entry], NO_KEYWORDS, BulletBudget(per_entry=0))
        assert selected.id == "e1"
        assert selected.bullets == ()

    def test_fewer_bullets_than_cap(self):
        """Test entries with fewer bullets than the cap keep them all."""
        entry = make_entry("e1", "one", "two")
        [selected] = select_bullets([entry], NO_KEYWORDS, BulletBudget(per_entry=4))
        assert texts(selected) == ["one", "two"]


@pytest.mark.unit
class TestOrdering:
    def test_zero_scores_keep_original_order(self):
        """Test bullets with no keyword overlap stay in entered order."""
        entry = make_entry("e1", "first", "second", "third", "fourth", "fifth")
        [selected] = select_bullets([entry], NO_KEYWORDS, BulletBudget(per_entry=3))
        assert texts(selected) == ["first", "second", "third"]

    def test_matching_bullet_moves_first(self):
        """Test the bullet matching the job moves to the top."""
        keywords = extract_keywords("Python data pipelines")
        entry = make_entry(
            "e1",
            "Organized the team offsite",
            "Wrote onboarding docs",
            "Built Python data pipelines",
        )
        [selected] = select_bullets([entry], keywords, BulletBudget(per_entry=2))
        assert texts(selected) == ["Built Python data pipelines", "Organized the team offsite"]

    def test_ties_keep_entered_order(self):
        """Test equally scored bullets keep their entered order."""
        keywords = extract_keywords("kafka")
        entry = make_entry("e1", "hiring", "kafka consumers", "offsite", "kafka producers")
        [selected] = select_bullets([entry], keywords, BulletBudget(per_entry=4))
        assert texts(selected) == ["kafka consumers", "kafka producers", "hiring", "offsite"]

    def test_blank_bullets_are_skipped(self):
        """Test blank bullet text is never selected."""
        entry = make_entry("e1", "  ", "real bullet", "")
        [selected] = select_bullets([entry], NO_KEYWORDS)
        assert texts(selected) == ["real bullet"]

    def test_bullet_ids_are_kept(self):
        """Test selected bullets carry their original ids."""
        keywords = extract_keywords("kafka")
        entry = make_entry("e1", "hiring", "kafka consumers")
        [selected] = select_bullets([entry], keywords)
        assert [bullet.id for bullet in selected.bullets] == ["b-2", "b-1"]


@pytest.mark.unit
class TestEntries:
    def test_entries_never_dropped(self):
        """Test every entry survives selection, even without matches."""
        entries = [make_entry("e1", "one"), make_entry("e2"), make_entry("e3", "three")]
        selected = select_bullets(entries, NO_KEYWORDS)
        assert [entry.id for entry in selected] == ["e1", "e2", "e3"]
        assert selected[1].bullets == ()

    def test_empty_input(self):
        """Test selecting from no entries returns nothing."""
        assert select_bullets([], NO_KEYWORDS) == []

    def test_entry_type_preserved(self):
        """Test selection returns the same entry type it was given."""
        project = ProjectEntry(id="p1", name="Weather Lake", bullets=(Bullet("b-1", "dashboards"),))
        [selected] = select_bullets([project], NO_KEYWORDS)
        assert isinstance(selected, ProjectEntry)
        assert selected.name == "Weather Lake"

    def test_input_entries_unchanged(self):
        """Test selection does not modify the input entries."""
        entry = make_entry("e1", *[f"bullet {n}" for n in range(6)])
        select_bullets([entry], NO_KEYWORDS, BulletBudget(per_entry=1))
        assert len(entry.bullets) == 6


@pytest.mark.unit
class TestTotalBudget:
    def test_ties_trim_later_entries_first(self):
        """Test the total budget trims later entries first on equal scores."""
        entries = [make_entry("e1", "a1", "a2", "a3"), make_entry("e2", "b1", "b2", "b3")]
        selected = select_bullets(entries, NO_KEYWORDS, BulletBudget(per_entry=4, total=4))
        assert texts(selected[0]) == ["a1", "a2", "a3"]
        assert texts(selected[1]) == ["b1"]

    def test_lowest_scores_trimmed_first(self):
        """Test the total budget trims the lowest scoring bullets first."""
        keywords = extract_keywords("kafka")
        entries = [
            make_entry("e1", "kafka one", "hiring", "offsite"),
            make_entry("e2", "kafka two", "kafka three"),
        ]
        selected = select_bullets(entries, keywords, BulletBudget(per_entry=4, total=3))
        assert texts(selected[0]) == ["kafka one"]
        assert texts(selected[1]) == ["kafka two", "kafka three"]

    def test_top_bullet_of_each_entry_is_protected(self):
        """Test every entry keeps its top bullet under a tight total budget."""
        entries = [make_entry(f"e{n}", f"top {n}", f"extra {n}") for n in range(3)]
        selected = select_bullets(entries, NO_KEYWORDS, BulletBudget(per_entry=4, total=1))
        assert [texts(entry) for entry in selected] == [["top 0"], ["top 1"], ["top 2"]]

    def test_unbounded_total(self):
        """Test no total cap leaves only the per-entry cap."""
        entries = [make_entry("e1", "a1", "a2"), make_entry("e2", "b1", "b2")]
        selected = select_bullets(entries, NO_KEYWORDS, BulletBudget(per_entry=4, total=None))
        assert sum(len(entry.bullets) for entry in selected) == 4
