"""
Vinifera Constants and Enums

Centralized constants, enums, and lookup tables for the fermentation
calculator, the flavor dataset and the form.
"""

from enum import Enum
from typing import Dict, NamedTuple, Tuple


# =======================
# CLIMATE
# =======================

class Climate(str, Enum):
    """Growing climate of the vineyard."""
    COOL = "Cool"
    MODERATE = "Moderate"
    WARM = "Warm"
    UNKNOWN = "Unknown"

    @classmethod
    def from_text(cls, text: str) -> 'Climate':
        """Match a climate name case-insensitively, falling back to UNKNOWN."""
        normalized = (text or "").strip().lower()
        for climate in cls:
            if climate.value.lower() == normalized:
                return climate
        return cls.UNKNOWN


class ClimateModifiers(NamedTuple):
    """Multipliers a climate applies to the must."""
    sugar: float
    acidity: float
    tannin: float


# Acidity is carried for completeness; no numeric output uses it.
CLIMATE_MODIFIERS: Dict[Climate, ClimateModifiers] = {
    Climate.COOL: ClimateModifiers(sugar=0.90, acidity=1.10, tannin=1.00),
    Climate.MODERATE: ClimateModifiers(sugar=1.00, acidity=1.00, tannin=1.00),
    Climate.WARM: ClimateModifiers(sugar=1.10, acidity=0.90, tannin=1.10),
    Climate.UNKNOWN: ClimateModifiers(sugar=1.00, acidity=1.00, tannin=1.00),
}


# =======================
# DESCRIPTOR ENUMS
# =======================

class Sweetness(str, Enum):
    """Sweetness by residual sugar."""
    EXTREMELY_SWEET = "extremely sweet"
    NOTICEABLY_SWEET = "noticeably sweet"
    HINT_OF_SWEETNESS = "with just a subtle hint of sweetness"
    BONE_DRY = "bone dry"

    @classmethod
    def from_residual_sugar(cls, residual_sugar: float) -> 'Sweetness':
        """Get sweetness from residual sugar in g/L."""
        if residual_sugar > 35.0:
            return cls.EXTREMELY_SWEET
        elif residual_sugar > 20.0:
            return cls.NOTICEABLY_SWEET
        elif residual_sugar > 5.0:
            return cls.HINT_OF_SWEETNESS
        else:
            return cls.BONE_DRY


class Body(str, Enum):
    """Body by final alcohol."""
    FULL = "full-bodied"
    MEDIUM = "medium-bodied"
    LIGHT = "light-bodied"

    @classmethod
    def from_abv(cls, abv: float) -> 'Body':
        """Get body from actual ABV."""
        if abv > 12.0:
            return cls.FULL
        elif abv >= 10.0:
            return cls.MEDIUM
        else:
            return cls.LIGHT


class AlcoholLevel(str, Enum):
    """Alcohol classification by final ABV."""
    EXTREMELY_LOW = "extremely low"
    VERY_LOW = "very low"
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very high"
    EXTREMELY_HIGH = "extremely high"

    @classmethod
    def from_abv(cls, abv: float) -> 'AlcoholLevel':
        """Get alcohol level from actual ABV."""
        if abv <= 1.0:
            return cls.EXTREMELY_LOW
        elif abv < 5.0:
            return cls.VERY_LOW
        elif abv < 10.0:
            return cls.LOW
        elif abv < 13.5:
            return cls.MODERATE
        elif abv < 15.0:
            return cls.HIGH
        elif abv < 20.0:
            return cls.VERY_HIGH
        else:
            return cls.EXTREMELY_HIGH


class Acidity(str, Enum):
    """Acidity, driven by climate alone."""
    HIGH = "high"
    MODERATE = "moderate"
    LOW = "low"
    UNKNOWN = "unknown"

    @classmethod
    def from_climate(cls, climate: Climate) -> 'Acidity':
        """Cool climates keep acidity, warm ones lose it."""
        return {
            Climate.COOL: cls.HIGH,
            Climate.MODERATE: cls.MODERATE,
            Climate.WARM: cls.LOW,
        }.get(climate, cls.UNKNOWN)


# =======================
# LOOKUP TABLES
# =======================

# Keys are lower-case grape names
GRAPE_TANNINS: Dict[str, str] = {
    "cabernet sauvignon": "robust, high tannins",
    "merlot": "smooth, moderate tannins",
    "pinot noir": "delicate, low tannins",
    "syrah": "moderate tannins",
    "shiraz": "moderate tannins",
    "tempranillo": "moderate tannins",
    "zinfandel": "spicy, moderately high tannins",
    "sangiovese": "moderate tannins",
    "chardonnay": "minimal tannins",
    "sauvignon blanc": "minimal tannins",
    "riesling": "very minimal tannins",
}
UNKNOWN_TANNINS = "unknown tannin levels"

WARM_TANNIN_SUFFIX = " (slightly accentuated by the warm climate)"
COOL_TANNIN_SUFFIX = " (somewhat less pronounced in the cool climate)"

# Keys are lower-case container names
CONTAINER_NOTES: Dict[str, str] = {
    "oak barrel": "woody, oaky undertones",
    "steel tank": "a pristine, clean character",
    "clay amphora": "earthy nuances",
}
UNKNOWN_CONTAINER_NOTE = "a distinct vessel charm"

UNKNOWN_FLAVOR_PROFILE = "unknown flavor profile"

FERMENTATION_FAILED_MESSAGE = (
    "Fermentation failed: temperature out of range for yeast activity."
)


# =======================
# ALGORITHM CONSTANTS
# =======================

class FermentationConstants:
    """
    Fermentation constants with documentation.
    """

    # SUGAR TO ALCOHOL
    # ~16.83 g/L of sugar yields 1% ABV
    SUGAR_PER_ABV_POINT = 16.83

    # Q10 KINETICS
    # k = K_REF * Q10 ** ((T - REFERENCE_TEMP_C) / 10)
    K_REF = 0.20
    REFERENCE_TEMP_C = 20.0
    Q10 = 2.0

    # YEAST VIABILITY WINDOW (inclusive)
    MIN_TEMP_C = 5.0
    MAX_TEMP_C = 40.0

    # Yeast dies off above this alcohol level
    MAX_ABV = 15.0

    # Longest run the form accepts; every temperature in the window is
    # fully fermented well before this
    MAX_DAYS = 100_000


# =======================
# DATASET COLUMN NAMES
# =======================

class ColumnNames:
    """Flavor dataset column names to avoid string hardcoding."""

    GRAPE = "Grape"
    CHARACTERISTICS = "Characteristics"

    @classmethod
    def required(cls) -> list:
        """Columns the flavor dataset must provide."""
        return [cls.GRAPE, cls.CHARACTERISTICS]


# =======================
# UI CONSTANTS
# =======================

class UIConstants:
    """Form options and labels."""

    GRAPES: Tuple[str, ...] = (
        "Cabernet Sauvignon",
        "Merlot",
        "Pinot Noir",
        "Chardonnay",
        "Sauvignon Blanc",
        "Riesling",
        "Syrah",
        "Shiraz",
        "Zinfandel",
        "Tempranillo",
        "Sangiovese",
    )

    CONTAINERS: Tuple[str, ...] = ("Oak Barrel", "Steel Tank", "Clay Amphora")

    CLIMATES: Tuple[str, ...] = (
        Climate.COOL.value,
        Climate.MODERATE.value,
        Climate.WARM.value,
    )

    DAYS_LABEL = "Fermentation Days (Usually 5-21):"
    SUGAR_LABEL = "Sugar Content (g/L) (Usually 180g-300g):"
    TEMPERATURE_LABEL = "Temperature (°C) (Usually 10.0°C to 30.0°C):"
