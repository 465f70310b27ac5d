"""
Form boundary for the fermentation simulator.

Accepts the raw text of the six form fields and always returns a string
ready for display.
"""

import random
from typing import Any, Optional

from vinifera.fermentation import compute
from vinifera.flavor_table import FlavorTable, get_flavor_table
from vinifera.report import render_report
from vinifera.schema import FermentationInput
from vinifera.utils import logger


def simulate(
    grape: Optional[str] = "",
    days: Any = "",
    container: Optional[str] = "",
    sugar_content: Any = "",
    temperature_c: Any = "",
    climate: Optional[str] = "",
    flavor_table: Optional[FlavorTable] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Simulate a fermentation from form values.

    Args:
        grape, days, container, sugar_content, temperature_c, climate:
            Raw form values; malformed numbers are treated as 0
        flavor_table: Flavor reference data, defaults to the bundled dataset
        rng: Optional seeded random source for the flavor pick

    Returns:
        Fermentation summary or the failure message
    """
    fermentation_input = FermentationInput.from_form(
        grape=grape,
        days=days,
        container=container,
        sugar_content=sugar_content,
        temperature_c=temperature_c,
        climate=climate,
    )
    table = flavor_table if flavor_table is not None else get_flavor_table()

    result = compute(fermentation_input, table, rng=rng)
    logger.debug(f"Simulated {fermentation_input!r} -> {type(result).__name__}")

    return render_report(fermentation_input, result)
