"""Unit tests for building and parsing jobs-listing query strings."""

import pytest

from jobsearch.aliases import AliasEntry, AliasTable
from jobsearch.search import (
    EmptySearchError,
    SearchFilters,
    SearchQueryNormalizer,
    build_jobs_url,
    build_search_params,
    parse_search_params,
)

BASE_URL = "http://localhost:3000/jobs"


@pytest.fixture
def normalizer():
    table = AliasTable(
        entries=[
            AliasEntry(canonical_term="software engineer", surface_forms=["software engineer", "swe"]),
        ]
    )
    return SearchQueryNormalizer(alias_table=table)


class TestBuildSearchParams:
    """Test suite for build_search_params."""

    def test_free_text_uses_canonical_term(self, normalizer):
        assert build_search_params("Senior SWE", normalizer=normalizer) == [
            ("search", "software engineer")
        ]

    def test_structured_query(self, normalizer):
        params = build_search_params("SWE at Google in Dublin", normalizer=normalizer)

        assert params == [
            ("search", "SWE at Google in Dublin"),
            ("exactMatch", "true"),
            ("jobTitle", "SWE"),
            ("company", "Google"),
            ("location", "Dublin"),
        ]

    def test_only_populated_fields(self, normalizer):
        params = build_search_params("Google in Bangalore", normalizer=normalizer)

        assert params == [
            ("search", "Google in Bangalore"),
            ("exactMatch", "true"),
            ("company", "Google"),
            ("location", "Bangalore"),
        ]

    def test_location_field_replaces_structured_location(self, normalizer):
        params = build_search_params("SWE at Google in Dublin", location=" Remote ", normalizer=normalizer)

        assert [value for name, value in params if name == "location"] == ["Remote"]

    def test_location_field_with_free_text(self, normalizer):
        assert build_search_params("swe", location="Berlin", normalizer=normalizer) == [
            ("search", "software engineer"),
            ("location", "Berlin"),
        ]

    def test_location_only(self, normalizer):
        assert build_search_params("  ", location="Berlin", normalizer=normalizer) == [
            ("location", "Berlin")
        ]

    @pytest.mark.parametrize("query,location", [(None, None), ("", "  "), ("   ", None)])
    def test_blank_search_rejected(self, normalizer, query, location):
        with pytest.raises(EmptySearchError):
            build_search_params(query, location=location, normalizer=normalizer)


class TestBuildJobsUrl:
    """Test suite for build_jobs_url."""

    def test_free_text(self, normalizer):
        url = build_jobs_url(BASE_URL, "swe", normalizer=normalizer)

        assert url == "http://localhost:3000/jobs?search=software+engineer"

    def test_structured_query_encoded(self, normalizer):
        url = build_jobs_url(BASE_URL, "SWE @ Google", normalizer=normalizer)

        assert url == (
            "http://localhost:3000/jobs?search=SWE+%40+Google&exactMatch=true"
            "&jobTitle=SWE&company=Google"
        )

    def test_keeps_existing_query_string(self, normalizer):
        url = build_jobs_url("https://jobs.example.com/search?page=2", "swe", normalizer=normalizer)

        assert url == "https://jobs.example.com/search?page=2&search=software+engineer"


class TestParseSearchParams:
    """Test suite for parse_search_params."""

    def test_reads_back_built_url(self, normalizer):
        url = build_jobs_url(BASE_URL, "SWE at Google in Dublin", normalizer=normalizer)

        assert parse_search_params(url) == SearchFilters(
            search="SWE at Google in Dublin",
            exact_match=True,
            job_title="SWE",
            company="Google",
            location="Dublin",
        )

    def test_raw_query_string(self):
        filters = parse_search_params("search=data+scientist&location=New%20York")

        assert filters.search == "data scientist"
        assert filters.location == "New York"
        assert filters.exact_match is False

    def test_title_and_company_need_exact_match(self):
        filters = parse_search_params({"search": "x", "jobTitle": "SWE", "company": "Google"})

        assert filters.job_title is None
        assert filters.company is None

    def test_exact_match_flag_case_insensitive(self):
        filters = parse_search_params([("exactMatch", "TRUE"), ("company", "Google")])

        assert filters.exact_match is True
        assert filters.company == "Google"

    def test_first_value_wins_and_blanks_ignored(self):
        filters = parse_search_params([("location", " "), ("location", "Paris"), ("location", "Rome")])

        assert filters.location == "Paris"

    def test_empty(self):
        assert parse_search_params("") == SearchFilters()
