"""
Data model for extracted search filters.

ExtractedFilter is the only output of the parser. Every field is optional;
None means "not mentioned in the query", which is different from a found
value of zero.
"""

from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel

from aqar_query.core.enums import Amenity, City, PropertyType, Status, ViewType


class ExtractedFilter(BaseModel):
    """
    Structured filter extracted from a free-form search query.

    Attribute names are snake_case; the serialized form uses the camelCase
    keys expected by the downstream query builder (propertyType, priceMin, ...).
    Enum values are stored as their string values.
    """

    property_type: PropertyType | None = Field(default=None)
    status: Status | None = Field(default=None)
    bedrooms: int | None = Field(default=None, ge=1)
    bathrooms: int | None = Field(default=None, ge=1)
    price_min: float | None = Field(default=None, ge=0)
    price_max: float | None = Field(default=None, ge=0)
    size_min: float | None = Field(default=None, ge=0)
    size_max: float | None = Field(default=None, ge=0)
    city: City | None = Field(default=None)
    neighborhood: str | None = Field(default=None)
    amenities: list[Amenity] = Field(default_factory=list)
    furnished: bool | None = Field(default=None)
    garages: bool | None = Field(default=None)
    keywords: list[str] = Field(default_factory=list)
    view_type: ViewType | None = Field(default=None)

    @model_validator(mode="after")
    def _check_invariants(self) -> "ExtractedFilter":
        if self.price_min is not None and self.price_max is not None and self.price_min > self.price_max:
            raise ValueError(f"price_min {self.price_min} is greater than price_max {self.price_max}")
        if self.size_min is not None and self.size_max is not None and self.size_min > self.size_max:
            raise ValueError(f"size_min {self.size_min} is greater than size_max {self.size_max}")
        if len(set(self.amenities)) != len(self.amenities):
            raise ValueError("amenities must be unique")
        return self

    def to_query_dict(self) -> dict:
        """
        Serialize for the downstream query builder.

        Returns:
            Plain dict with camelCase keys, enum values as strings and nulls kept.
        """
        return self.model_dump(mode="json", by_alias=True)

    def is_empty(self) -> bool:
        """True if no field was extracted."""
        return self == ExtractedFilter()

    class Config:
        """Pydantic model configuration."""

        # Serialize enums by their value
        use_enum_values = True
        frozen = True
        alias_generator = to_camel
        populate_by_name = True
