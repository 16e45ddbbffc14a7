"""Alias table models: canonical search terms and the surface forms that map to them."""

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator


class AliasEntry(BaseModel):
    """One canonical search term and its accepted surface forms.

    Surface forms are synonyms, abbreviations and common misspellings. Their
    order only fixes iteration order; it does not rank them. The canonical term
    must be one of its own surface forms so that typing the canonical term
    always matches.
    """

    canonical_term: str = Field(..., min_length=1, description="Normalized category name")
    surface_forms: Tuple[str, ...] = Field(..., min_length=1, description="Accepted variants")
    category: Optional[str] = Field(None, description="Descriptive grouping, informational only")
    priority: int = Field(0, description="Higher priority entries are tried first")

    model_config = {"frozen": True}

    @field_validator("canonical_term")
    @classmethod
    def normalize_canonical_term(cls, v: str) -> str:
        """Lowercase and trim the canonical term."""
        normalized = " ".join(v.lower().split())
        if not normalized:
            raise ValueError("canonical_term cannot be empty or whitespace-only")
        return normalized

    @field_validator("surface_forms")
    @classmethod
    def normalize_surface_forms(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Lowercase, trim and deduplicate surface forms, keeping first occurrence."""
        seen = set()
        normalized = []
        for form in v:
            cleaned = " ".join(form.lower().split())
            if cleaned and cleaned not in seen:
                seen.add(cleaned)
                normalized.append(cleaned)
        if not normalized:
            raise ValueError("surface_forms must contain at least one non-empty form")
        return tuple(normalized)

    @field_validator("category")
    @classmethod
    def strip_category(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        stripped = v.strip()
        return stripped if stripped else None

    @model_validator(mode="after")
    def check_self_inclusion(self):
        """The canonical term must be listed among its own surface forms."""
        if self.canonical_term not in self.surface_forms:
            raise ValueError(
                f"canonical_term '{self.canonical_term}' must also be listed in its surface_forms"
            )
        return self


class AliasTable(BaseModel):
    """Immutable, validated collection of alias entries.

    Built once (usually from the packaged YAML file) and shared read-only
    between every canonicalizer in the process.
    """

    version: int = Field(1, ge=1, description="Data file format/content version")
    entries: Tuple[AliasEntry, ...] = Field(..., min_length=1)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_unique_canonical_terms(self):
        """Reject tables that declare the same canonical term twice."""
        seen = set()
        duplicates = []
        for entry in self.entries:
            if entry.canonical_term in seen:
                duplicates.append(entry.canonical_term)
            seen.add(entry.canonical_term)
        if duplicates:
            raise ValueError(
                f"Duplicate canonical terms: {', '.join(sorted(set(duplicates)))}"
            )
        return self

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, canonical_term: object) -> bool:
        return any(entry.canonical_term == canonical_term for entry in self.entries)

    @property
    def canonical_terms(self) -> List[str]:
        """Canonical terms in declaration order."""
        return [entry.canonical_term for entry in self.entries]

    def get(self, canonical_term: str) -> Optional[AliasEntry]:
        """Look up an entry by canonical term (case-insensitive)."""
        wanted = " ".join(canonical_term.lower().split())
        for entry in self.entries:
            if entry.canonical_term == wanted:
                return entry
        return None

    def ordered_entries(self) -> Tuple[AliasEntry, ...]:
        """Entries in matching order: descending priority, then declaration order."""
        # sorted() is stable, so equal priorities keep declaration order
        return tuple(sorted(self.entries, key=lambda entry: -entry.priority))

    def find_ambiguous_forms(self) -> Dict[str, List[str]]:
        """Map every surface form shared by several entries to those canonical terms.

        The canonical terms are listed in matching order, so the first one is
        the term a query equal to that form resolves to.

        Returns:
            Dict of surface form -> canonical terms, only for shared forms
        """
        owners: Dict[str, List[str]] = {}
        for entry in self.ordered_entries():
            for form in entry.surface_forms:
                owners.setdefault(form, []).append(entry.canonical_term)
        return {form: terms for form, terms in owners.items() if len(terms) > 1}
