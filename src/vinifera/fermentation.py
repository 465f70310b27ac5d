"""
Fermentation Calculator

Turns a FermentationInput into potential/actual ABV, residual sugar and
tasting descriptors using closed-form formulas:

    effective_sugar = sugar_content * climate_sugar_modifier
    potential_abv   = effective_sugar / 16.83
    k               = 0.20 * 2 ** ((T - 20) / 10)         (Q10 kinetics)
    fraction        = min(1, 1 - e^(-k * days))
    actual_abv      = fraction * effective_sugar / 16.83  (capped at 15%)
    residual_sugar  = effective_sugar - sugar_consumed    (consumed before the cap)

The only failure is a temperature outside the 5-40°C yeast window, which
returns a FermentationFailure instead of raising.
"""

import math
import random
from typing import Optional, Tuple, Union

from vinifera.constants import (
    Acidity,
    AlcoholLevel,
    Body,
    CLIMATE_MODIFIERS,
    COOL_TANNIN_SUFFIX,
    CONTAINER_NOTES,
    Climate,
    ClimateModifiers,
    FermentationConstants,
    GRAPE_TANNINS,
    Sweetness,
    UNKNOWN_CONTAINER_NOTE,
    UNKNOWN_TANNINS,
    WARM_TANNIN_SUFFIX,
)
from vinifera.flavor_table import FlavorTable
from vinifera.schema import FermentationFailure, FermentationInput, FermentationOutput
from vinifera.utils import logger, safe_divide

FermentationResult = Union[FermentationOutput, FermentationFailure]


def climate_modifiers(climate: Climate) -> ClimateModifiers:
    """Sugar, acidity and tannin multipliers for a climate."""
    return CLIMATE_MODIFIERS.get(climate, CLIMATE_MODIFIERS[Climate.UNKNOWN])


def potential_abv(effective_sugar: float) -> float:
    """ABV reached if every gram of sugar ferments."""
    return effective_sugar / FermentationConstants.SUGAR_PER_ABV_POINT


def temperature_in_range(temperature_c: float) -> bool:
    """Whether yeast can ferment at this temperature (bounds inclusive)."""
    return FermentationConstants.MIN_TEMP_C <= temperature_c <= FermentationConstants.MAX_TEMP_C


def fermentation_rate(temperature_c: float) -> float:
    """
    First-order rate constant per day from Q10 temperature scaling.

    The rate doubles for every 10°C above the 20°C reference.
    """
    exponent = (temperature_c - FermentationConstants.REFERENCE_TEMP_C) / 10.0
    return FermentationConstants.K_REF * FermentationConstants.Q10 ** exponent


def fraction_fermented(temperature_c: float, days: int) -> float:
    """Share of sugar converted after `days`: 1 - e^(-k*days), at most 1."""
    k = fermentation_rate(temperature_c)
    try:
        decay = math.exp(-k * days)
    except OverflowError:
        # days too large to convert to float; fermentation is long complete
        decay = 0.0
    return min(1.0, 1.0 - decay)


def apply_abv_cap(actual_abv: float, fraction: float, effective_sugar: float) -> Tuple[float, float]:
    """
    Clamp ABV at the yeast tolerance limit.

    When clamped, the fraction is recomputed so that fraction * sugar
    still matches the capped alcohol.

    Returns:
        (actual_abv, fraction_fermented)
    """
    max_abv = FermentationConstants.MAX_ABV
    if actual_abv <= max_abv:
        return actual_abv, fraction

    capped_sugar = max_abv * FermentationConstants.SUGAR_PER_ABV_POINT
    capped_fraction = safe_divide(capped_sugar, effective_sugar, default=fraction)
    logger.info(
        f"ABV {actual_abv:.2f}% exceeds yeast tolerance, capping at {max_abv}% "
        f"(fraction {fraction:.4f} -> {capped_fraction:.4f})"
    )
    return max_abv, capped_fraction


def describe_tannin(grape: str, tannin_modifier: float) -> str:
    """Grape's base tannin description, nudged by the climate."""
    base = GRAPE_TANNINS.get(grape.strip().lower(), UNKNOWN_TANNINS)
    if tannin_modifier > 1.0:
        return base + WARM_TANNIN_SUFFIX
    elif tannin_modifier < 1.0:
        return base + COOL_TANNIN_SUFFIX
    return base


def describe_container(container: str) -> str:
    return CONTAINER_NOTES.get(container.strip().lower(), UNKNOWN_CONTAINER_NOTE)


def compute(
    fermentation_input: FermentationInput,
    flavor_table: FlavorTable,
    rng: Optional[random.Random] = None
) -> FermentationResult:
    """
    Run the fermentation calculation.

    Args:
        fermentation_input: Validated run parameters
        flavor_table: Grape flavor reference data
        rng: Optional seeded random source for the flavor pick

    Returns:
        FermentationOutput, or FermentationFailure when the temperature
        is outside the yeast viability window
    """
    modifiers = climate_modifiers(fermentation_input.climate)

    effective_sugar = fermentation_input.sugar_content * modifiers.sugar
    if not math.isfinite(effective_sugar):
        logger.warning(f"Sugar {fermentation_input.sugar_content} g/L overflows after climate adjustment, using 0")
        effective_sugar = 0.0
    potential = potential_abv(effective_sugar)

    if not temperature_in_range(fermentation_input.temperature_c):
        logger.debug(f"No fermentation at {fermentation_input.temperature_c}°C")
        return FermentationFailure()

    fraction = fraction_fermented(fermentation_input.temperature_c, fermentation_input.days)
    sugar_consumed = fraction * effective_sugar
    actual_abv = sugar_consumed / FermentationConstants.SUGAR_PER_ABV_POINT

    actual_abv, fraction = apply_abv_cap(actual_abv, fraction, effective_sugar)

    # Residual follows the sugar actually consumed before the cap
    residual_sugar = max(0.0, effective_sugar - sugar_consumed)

    return FermentationOutput(
        effective_sugar=effective_sugar,
        potential_abv=potential,
        actual_abv=actual_abv,
        fraction_fermented=fraction,
        residual_sugar=residual_sugar,
        sweetness=Sweetness.from_residual_sugar(residual_sugar),
        body=Body.from_abv(actual_abv),
        tannin=describe_tannin(fermentation_input.grape, modifiers.tannin),
        acidity=Acidity.from_climate(fermentation_input.climate),
        alcohol_level=AlcoholLevel.from_abv(actual_abv),
        flavor_note=flavor_table.lookup(fermentation_input.grape, rng=rng),
        container_note=describe_container(fermentation_input.container),
    )


__all__ = [
    'FermentationResult',
    'climate_modifiers',
    'potential_abv',
    'temperature_in_range',
    'fermentation_rate',
    'fraction_fermented',
    'apply_abv_cap',
    'describe_tannin',
    'describe_container',
    'compute',
]
