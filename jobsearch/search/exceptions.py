"""Exceptions raised at the search boundary."""


class EmptyQueryError(ValueError):
    """Raised when normalization is requested for an empty or blank query."""

    def __init__(self, message: str = "Search query must not be empty"):
        super().__init__(message)


class EmptySearchError(ValueError):
    """Raised when a search is built with neither a query nor a location."""

    def __init__(self, message: str = "Provide a search query or a location"):
        super().__init__(message)
