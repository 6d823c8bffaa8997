"""
Unit tests for relevance scoring.
"""

import pytest

from tailor.contexts.intake.keyword_extractor import extract_keywords
from tailor.contexts.targeting.scorer import rank_by_score, score


@pytest.fixture
def keywords():
    return extract_keywords("Python engineer to build data pipelines with Airflow")


@pytest.mark.unit
class TestScore:
    def test_matching_text_beats_unrelated_text(self, keywords):
        """Test matching text outscores unrelated text."""
        assert score("Built Python data pipelines", keywords) > score("Managed hiring", keywords)

    def test_no_overlap_scores_zero(self, keywords):
        """Test text without overlap scores zero."""
        assert score("Managed hiring", keywords) == 0.0

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_text_scores_zero(self, keywords, text):
        """Test empty text scores zero."""
        assert score(text, keywords) == 0.0

    def test_empty_keywords_score_zero(self):
        """Test an empty keyword set scores zero."""
        assert score("Built Python data pipelines", extract_keywords("")) == 0.0

    def test_adding_a_keyword_increases_score(self, keywords):
        """Test adding a matching keyword raises the score."""
        base = "Built Python data pipelines"
        assert score(base + " on Airflow", keywords) > score(base, keywords)

    def test_phrase_match_adds_phrase_weight(self, keywords):
        """Test a phrase match adds the phrase weight."""
        together = score("data pipelines", keywords)
        apart = score("pipelines. data", keywords)
        assert together > apart > 0

    def test_no_length_normalization(self):
        """Test long text is not penalized for its length."""
        keywords = extract_keywords("Kafka")
        short = score("Kafka", keywords)
        long = score("Kafka alongside many unrelated words describing office logistics", keywords)
        assert short == long == 1.0

    def test_word_forms_match_through_stemming(self):
        """Test word forms match through stemming."""
        keywords = extract_keywords("building pipelines")
        assert score("Built a pipeline builder; build systems", keywords) > 0

    def test_plain_mapping_keywords(self):
        """Test scoring against a plain weight mapping."""
        assert score("python and python with sql", {"python": 1.5}) == 3.0


@pytest.mark.unit
class TestRankByScore:
    def test_descending_with_stable_ties(self, keywords):
        """Test ranking is descending with ties in input order."""
        items = ["Led hiring", "Python scripts", "Organized offsite", "Python tooling"]
        ranked = rank_by_score(items, keywords)
        assert [item for _, item, _ in ranked] == [
            "Python scripts",
            "Python tooling",
            "Led hiring",
            "Organized offsite",
        ]
        assert [index for index, _, _ in ranked] == [1, 3, 0, 2]

    def test_all_zero_keeps_original_order(self):
        """Test all-zero scores keep the original order."""
        items = ["c", "a", "b"]
        ranked = rank_by_score(items, extract_keywords(""))
        assert [item for _, item, _ in ranked] == items

    def test_text_of_extracts_text(self, keywords):
        """Test text_of selects the text to score."""
        items = [{"text": "hiring"}, {"text": "Airflow DAGs"}]
        ranked = rank_by_score(items, keywords, text_of=lambda item: item["text"])
        assert ranked[0][1] == {"text": "Airflow DAGs"}
