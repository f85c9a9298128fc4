"""
Extraction pass registry.

Maps pass names to their extractor classes. EXTRACTION_PASSES is the fixed
order in which the parser runs them; the order is part of the result
because later passes may read or overwrite what earlier ones wrote.
"""

from aqar_query.extractors.features import FeaturesExtractor
from aqar_query.extractors.location import LocationExtractor
from aqar_query.extractors.price import PriceExtractor
from aqar_query.extractors.property_type import PropertyTypeExtractor
from aqar_query.extractors.rooms import RoomCountExtractor
from aqar_query.extractors.size import SizeExtractor
from aqar_query.extractors.status import StatusExtractor

EXTRACTION_PASSES = (
    PropertyTypeExtractor,
    StatusExtractor,
    RoomCountExtractor,
    LocationExtractor,
    PriceExtractor,
    SizeExtractor,
    FeaturesExtractor,
)

PASS_EXTRACTORS = {extractor.name: extractor for extractor in EXTRACTION_PASSES}


def get_extractor(pass_name: str):
    """Get extractor instance for a pass.

    Args:
        pass_name: Name of the pass (e.g., "price", "room_count")

    Returns:
        Extractor instance for the pass

    Raises:
        ValueError: If pass name is unknown
    """
    extractor_class = PASS_EXTRACTORS.get(pass_name)
    if not extractor_class:
        raise ValueError(f"Unknown extraction pass: {pass_name}")
    return extractor_class()


def build_passes() -> list:
    """Fresh instances of every pass in execution order."""
    return [extractor_class() for extractor_class in EXTRACTION_PASSES]
