"""
Base extractor for query extraction passes.

Extraction passes are responsible for:
- Reading the normalized query
- Filling their own fields of the shared FilterDraft
- Recording which rule fired, for logging and tests
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable

from aqar_query.core.enums import Amenity, City, PropertyType, Status, ViewType
from aqar_query.core.normalization import NormalizedQuery
from aqar_query.core.rules import Rule, RuleHit, first_match
from aqar_query.logger_setup import get_logger

logger = get_logger(__name__)


@dataclass
class FilterDraft:
    """Mutable, per-call result that the passes fill in order."""

    property_type: PropertyType | None = None
    status: Status | None = None
    bedrooms: int | None = None
    bathrooms: int | None = None
    price_min: float | None = None
    price_max: float | None = None
    size_min: float | None = None
    size_max: float | None = None
    city: City | None = None
    neighborhood: str | None = None
    amenities: set[Amenity] = field(default_factory=set)
    furnished: bool | None = None
    garages: bool | None = None
    keywords: list[str] = field(default_factory=list)
    view_type: ViewType | None = None

    # Signals read by the assembler
    salon_seen: bool = False
    utility_seen: bool = False

    # Name of the rule that fired per field, for diagnostics
    matched_rules: dict[str, str] = field(default_factory=dict)


@dataclass
class ParseContext:
    """Everything a pass can read plus the draft it writes to."""

    query: NormalizedQuery
    draft: FilterDraft = field(default_factory=FilterDraft)

    @property
    def raw(self) -> str:
        return self.query.raw

    @property
    def text(self) -> str:
        return self.query.text

    def contains_any(self, phrases: Iterable[str]) -> bool:
        """Substring check of the normalized text against literal phrases."""
        return any(phrase in self.text for phrase in phrases)


class BaseExtractor(ABC):
    """
    Abstract base class for extraction passes.

    Each pass:
    - Has a stable name used by the registry
    - Declares its rules as ordered data
    - Never raises for "nothing found"; fields simply stay unset
    """

    name: str

    @abstractmethod
    def extract(self, context: ParseContext) -> None:
        pass

    def run_rules(self, rules: Iterable[Rule], context: ParseContext, field_name: str) -> RuleHit | None:
        """Run ordered rules and remember which one fired for field_name."""
        hit = first_match(rules, context.text)
        if hit is not None:
            context.draft.matched_rules[field_name] = hit.name
        return hit
