"""Query-string building and parsing for the jobs listing page.

The search box turns a normalization result into request parameters:

- free text: ``search=<canonical term or query>``
- structured: ``search=<original query>&exactMatch=true`` plus ``jobTitle``,
  ``company`` and ``location`` for each populated field

A location typed into the separate location field is sent as ``location`` and
replaces any location taken from a structured query.
"""

from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence, Tuple, Union
from urllib.parse import parse_qsl, urlsplit

import requests

from jobsearch.classification import StructuredQuery

from .exceptions import EmptySearchError
from .service import SearchQueryNormalizer, get_default_normalizer

PARAM_SEARCH = "search"
PARAM_EXACT_MATCH = "exactMatch"
PARAM_JOB_TITLE = "jobTitle"
PARAM_COMPANY = "company"
PARAM_LOCATION = "location"

QueryParams = List[Tuple[str, str]]


@dataclass(frozen=True)
class SearchFilters:
    """Search filters as the jobs listing page reads them from its URL.

    Attributes:
        search: Value of the search parameter
        exact_match: Whether exactMatch=true was present
        job_title: jobTitle, only honoured for exact-match searches
        company: company, only honoured for exact-match searches
        location: location parameter
    """

    search: Optional[str] = None
    exact_match: bool = False
    job_title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None


def build_search_params(
    query: Optional[str] = None,
    location: Optional[str] = None,
    normalizer: Optional[SearchQueryNormalizer] = None,
) -> QueryParams:
    """
    Build jobs-listing request parameters from the search box fields.

    Args:
        query: Text of the search box
        location: Text of the separate location field
        normalizer: Normalizer to use (defaults to the process-wide one)

    Returns:
        Ordered list of (name, value) pairs

    Raises:
        EmptySearchError: If both query and location are blank
    """
    query_text = (query or "").strip()
    location_text = (location or "").strip()

    if not query_text and not location_text:
        raise EmptySearchError()

    params: QueryParams = []

    if query_text:
        result = (normalizer or get_default_normalizer()).normalize(query_text)

        if isinstance(result, StructuredQuery):
            params.append((PARAM_SEARCH, result.original_query))
            params.append((PARAM_EXACT_MATCH, "true"))
            if result.job_title:
                params.append((PARAM_JOB_TITLE, result.job_title))
            if result.company:
                params.append((PARAM_COMPANY, result.company))
            if result.location and not location_text:
                params.append((PARAM_LOCATION, result.location))
        else:
            params.append((PARAM_SEARCH, result))

    if location_text:
        params.append((PARAM_LOCATION, location_text))

    return params


def build_jobs_url(
    base_url: str,
    query: Optional[str] = None,
    location: Optional[str] = None,
    normalizer: Optional[SearchQueryNormalizer] = None,
) -> str:
    """
    Build the full jobs-listing URL for a search.

    Args:
        base_url: Jobs listing page, e.g. "https://example.com/jobs"
        query: Text of the search box
        location: Text of the separate location field
        normalizer: Normalizer to use (defaults to the process-wide one)

    Returns:
        URL with the encoded query string

    Raises:
        EmptySearchError: If both query and location are blank
    """
    params = build_search_params(query, location, normalizer=normalizer)
    return requests.Request("GET", base_url, params=params).prepare().url


def parse_search_params(
    params: Union[str, Mapping[str, str], Sequence[Tuple[str, str]]],
) -> SearchFilters:
    """
    Read search filters back from a URL, a query string or parameter pairs.

    jobTitle and company are only honoured when exactMatch is "true". When a
    parameter repeats, its first value is used.

    Args:
        params: Full URL, raw query string, mapping, or (name, value) pairs

    Returns:
        SearchFilters
    """
    if isinstance(params, str):
        query_string = urlsplit(params).query if "?" in params else params
        pairs = parse_qsl(query_string, keep_blank_values=False)
    elif isinstance(params, Mapping):
        pairs = list(params.items())
    else:
        pairs = list(params)

    values = {}
    for name, value in pairs:
        value = value.strip() if value else ""
        if value and name not in values:
            values[name] = value

    exact_match = values.get(PARAM_EXACT_MATCH, "").lower() == "true"

    return SearchFilters(
        search=values.get(PARAM_SEARCH),
        exact_match=exact_match,
        job_title=values.get(PARAM_JOB_TITLE) if exact_match else None,
        company=values.get(PARAM_COMPANY) if exact_match else None,
        location=values.get(PARAM_LOCATION),
    )
