"""Pydantic schemas for Vinifera data validation."""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from vinifera.constants import (
    Acidity,
    AlcoholLevel,
    Body,
    Climate,
    FERMENTATION_FAILED_MESSAGE,
    FermentationConstants,
    Sweetness,
)
from vinifera.utils import clamp_non_negative, parse_float, parse_int


class FermentationInput(BaseModel):
    """Parameters of a single fermentation run."""

    model_config = ConfigDict(frozen=True)

    grape: str = Field("", description="Grape variety, e.g. Merlot")
    days: int = Field(0, ge=0, description="Fermentation duration in days")
    container: str = Field("", description="Fermentation vessel, e.g. Oak Barrel")
    sugar_content: float = Field(0.0, ge=0.0, allow_inf_nan=False, description="Must sugar in g/L")
    temperature_c: float = Field(0.0, allow_inf_nan=False, description="Fermentation temperature in °C")
    climate: Climate = Field(Climate.UNKNOWN, description="Vineyard climate")

    @field_validator("climate", mode="before")
    @classmethod
    def match_climate(cls, value: Any) -> Climate:
        if isinstance(value, Climate):
            return value
        return Climate.from_text(str(value) if value is not None else "")

    @classmethod
    def from_form(
        cls,
        grape: Optional[str] = "",
        days: Any = "",
        container: Optional[str] = "",
        sugar_content: Any = "",
        temperature_c: Any = "",
        climate: Optional[str] = "",
    ) -> 'FermentationInput':
        """
        Build an input from raw form fields.

        Never raises: unparsable, negative or non-finite numbers become 0,
        days are capped at FermentationConstants.MAX_DAYS and unrecognised
        climates become Climate.UNKNOWN.
        """
        return cls(
            grape=(grape or "").strip(),
            days=min(clamp_non_negative(parse_int(days, "days"), "days"), FermentationConstants.MAX_DAYS),
            container=(container or "").strip(),
            sugar_content=clamp_non_negative(parse_float(sugar_content, "sugar_content"), "sugar_content"),
            temperature_c=parse_float(temperature_c, "temperature_c"),
            climate=climate,
        )


class FermentationOutput(BaseModel):
    """Derived fermentation metrics and tasting descriptors."""

    model_config = ConfigDict(frozen=True)

    effective_sugar: float = Field(..., allow_inf_nan=False, ge=0.0, description="Sugar after climate adjustment (g/L)")
    potential_abv: float = Field(..., allow_inf_nan=False, ge=0.0, description="ABV if all sugar fermented (%)")
    actual_abv: float = Field(..., allow_inf_nan=False, ge=0.0, description="Final ABV (%)")
    fraction_fermented: float = Field(..., allow_inf_nan=False, ge=0.0, le=1.0, description="Share of sugar converted")
    residual_sugar: float = Field(..., allow_inf_nan=False, ge=0.0, description="Unfermented sugar (g/L)")

    sweetness: Sweetness
    body: Body
    tannin: str = Field(..., description="Tannin description for the grape and climate")
    acidity: Acidity
    alcohol_level: AlcoholLevel
    flavor_note: str = Field(..., description="Flavor characteristics from the dataset")
    container_note: str = Field(..., description="What the vessel adds to the wine")


class FermentationFailure(BaseModel):
    """Terminal result when the yeast cannot ferment at all."""

    model_config = ConfigDict(frozen=True)

    reason: Literal["temperature_out_of_range"] = "temperature_out_of_range"
    message: str = FERMENTATION_FAILED_MESSAGE
