"""
Result assembler: FilterDraft -> ExtractedFilter.

Runs after every extraction pass and applies the adjustments that need
more than one field:
- Salon adjustment: a salon counts as one more bedroom
- Utility adjustment: utility rooms imply at least one bathroom
- Range ordering: min <= max for price and size
"""

from aqar_query.core.enums import Amenity
from aqar_query.core.extractor import FilterDraft
from aqar_query.core.models import ExtractedFilter
from aqar_query.logger_setup import get_logger

logger = get_logger(__name__)

# Salon with no bedroom count: one bedroom plus the salon
SALON_ONLY_BEDROOMS = 2
UTILITY_DEFAULT_BATHROOMS = 1

_AMENITY_ORDER = {amenity: index for index, amenity in enumerate(Amenity)}


class FilterAssembler:
    """Builds the frozen ExtractedFilter from a filled draft."""

    def assemble(self, draft: FilterDraft) -> ExtractedFilter:
        self._apply_salon(draft)
        self._apply_utility(draft)
        draft.price_min, draft.price_max = self._ordered(draft.price_min, draft.price_max)
        draft.size_min, draft.size_max = self._ordered(draft.size_min, draft.size_max)

        return ExtractedFilter(
            property_type=draft.property_type,
            status=draft.status,
            bedrooms=draft.bedrooms,
            bathrooms=draft.bathrooms,
            price_min=draft.price_min,
            price_max=draft.price_max,
            size_min=draft.size_min,
            size_max=draft.size_max,
            city=draft.city,
            neighborhood=draft.neighborhood,
            amenities=sorted(draft.amenities, key=_AMENITY_ORDER.__getitem__),
            furnished=draft.furnished,
            garages=draft.garages,
            keywords=list(draft.keywords),
            view_type=draft.view_type,
        )

    # =========================================================================
    # CROSS-FIELD ADJUSTMENTS
    # =========================================================================

    def _apply_salon(self, draft: FilterDraft) -> None:
        if not draft.salon_seen:
            return
        before = draft.bedrooms
        draft.bedrooms = before + 1 if before is not None else SALON_ONLY_BEDROOMS
        logger.debug(f"Salon adjustment: bedrooms {before} -> {draft.bedrooms}")

    def _apply_utility(self, draft: FilterDraft) -> None:
        if draft.utility_seen and draft.bathrooms is None:
            draft.bathrooms = UTILITY_DEFAULT_BATHROOMS
            logger.debug("Utility adjustment: bathrooms defaulted to 1")

    @staticmethod
    def _ordered(low: float | None, high: float | None) -> tuple[float | None, float | None]:
        if low is not None and high is not None and low > high:
            return high, low
        return low, high
