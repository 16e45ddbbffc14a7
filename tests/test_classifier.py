"""Unit tests for the query classifier and its patterns."""

import pytest

from jobsearch.classification import QueryClassifier, StructuredQuery
from jobsearch.classification.patterns import (
    CatchAllPattern,
    ThreeFieldPattern,
    TitleAtCompanyPattern,
    TwoFieldPattern,
)


@pytest.fixture
def classifier():
    return QueryClassifier()


class TestThreeFieldPattern:
    """Test suite for title / company / location queries."""

    def test_title_at_company_in_location(self, classifier):
        result = classifier.classify("Python Developer at Google in Bangalore")

        assert result == StructuredQuery(
            original_query="Python Developer at Google in Bangalore",
            is_exact_match=True,
            job_title="Python Developer",
            company="Google",
            location="Bangalore",
            pattern="three_field",
        )

    @pytest.mark.parametrize(
        "query",
        [
            "Data Scientist @ Meta in London",
            "Data Scientist at Meta @ London",
            "Data Scientist in Meta at London",
        ],
    )
    def test_any_connector_combination(self, classifier, query):
        result = classifier.classify(query)

        assert result.pattern == "three_field"
        assert (result.job_title, result.company, result.location) == (
            "Data Scientist",
            "Meta",
            "London",
        )

    def test_multi_word_company_and_location(self, classifier):
        result = classifier.classify("Engineer at Bank of America in New York")

        assert result.job_title == "Engineer"
        assert result.company == "Bank of America"
        assert result.location == "New York"

    def test_connectors_case_insensitive(self, classifier):
        result = classifier.classify("Designer AT Figma IN Remote")

        assert result.pattern == "three_field"
        assert result.company == "Figma"

    def test_fields_keep_original_case(self, classifier):
        result = ThreeFieldPattern().match("SRE at AWS in Dublin")

        assert result.job_title == "SRE"
        assert result.company == "AWS"


class TestTwoFieldPattern:
    """Test suite for company / location queries."""

    def test_company_in_location(self, classifier):
        result = classifier.classify("Google in Bangalore")

        assert result.pattern == "two_field"
        assert result.job_title is None
        assert result.company == "Google"
        assert result.location == "Bangalore"
        assert result.is_exact_match is True

    def test_at_is_not_a_two_field_connector(self):
        assert TwoFieldPattern().match("Developer at Google") is None


class TestTitleAtCompanyPattern:
    """Test suite for title / company queries."""

    @pytest.mark.parametrize("query", ["Data Scientist at Meta", "Data Scientist @ Meta"])
    def test_title_at_company(self, classifier, query):
        result = classifier.classify(query)

        assert result.pattern == "title_at_company"
        assert result.job_title == "Data Scientist"
        assert result.company == "Meta"
        assert result.location is None

    def test_in_is_not_a_title_connector(self):
        assert TitleAtCompanyPattern().match("Google in Bangalore") is None


class TestCatchAllPattern:
    """Test suite for the catch-all fallback."""

    @pytest.mark.parametrize(
        "query",
        ["####@@@", "dev@google", "position: engineer", "Company: Acme", "location:remote"],
    )
    def test_indicator_without_positional_parse(self, classifier, query):
        result = classifier.classify(query)

        assert result.pattern == "catch_all"
        assert result.job_title == query
        assert result.company == query
        assert result.location == query
        assert result.original_query == query

    def test_custom_indicators(self):
        pattern = CatchAllPattern(indicators=["VIA "])

        assert pattern.match("hired via referral").pattern == "catch_all"
        assert pattern.match("hired at acme") is None


class TestFreeText:
    """Test suite for queries that are not structured."""

    @pytest.mark.parametrize(
        "query",
        ["sr eng", "intern", "pyhton develper", "underwater basket weaver", "####$$$", "engineer at"],
    )
    def test_returns_none(self, classifier, query):
        assert classifier.classify(query) is None


class TestQueryClassifier:
    """Test suite for pattern precedence and injection."""

    def test_first_matching_pattern_wins(self, classifier):
        """Test that 'in' queries are read as company/location before title/company."""
        result = classifier.classify("Python Developer in Bangalore")

        assert result.pattern == "two_field"
        assert result.company == "Python Developer"

    def test_custom_patterns(self):
        classifier = QueryClassifier(patterns=[TitleAtCompanyPattern()])

        assert classifier.classify("Google in Bangalore") is None
        assert classifier.classify("SRE at Google").pattern == "title_at_company"

    def test_to_dict(self, classifier):
        result = classifier.classify("Google in Bangalore")

        assert result.to_dict() == {
            "original_query": "Google in Bangalore",
            "is_exact_match": True,
            "job_title": None,
            "company": "Google",
            "location": "Bangalore",
            "pattern": "two_field",
        }
