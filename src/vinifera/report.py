"""Plain-text fermentation summary."""

from vinifera.schema import FermentationFailure, FermentationInput, FermentationOutput


def render_report(fermentation_input: FermentationInput, result) -> str:
    """
    Format a fermentation result for display.

    Args:
        fermentation_input: The run parameters, echoed in the summary
        result: FermentationOutput or FermentationFailure

    Returns:
        Multi-line summary, or only the failure message
    """
    if isinstance(result, FermentationFailure):
        return result.message

    if not isinstance(result, FermentationOutput):
        raise TypeError(f"Cannot render {type(result).__name__}")

    climate = fermentation_input.climate.value.lower()
    paragraphs = [
        (
            f"Your {fermentation_input.grape} wine was fermented over {fermentation_input.days} days "
            f"in a {fermentation_input.container} that adds {result.container_note}. "
            f"The initial sugar level was {result.effective_sugar:.1f} g/L (adjusted for a {climate} climate), "
            f"which could have reached a potential of {result.potential_abv:.1f}% ABV."
        ),
        (
            f"Fermenting at {fermentation_input.temperature_c:g}°C, "
            f"about {result.fraction_fermented * 100:.1f}% of that potential was met, "
            f"resulting in a final ABV of {result.actual_abv:.1f}% "
            f"and leaving behind a residual sugar of {result.residual_sugar:.1f} g/L, "
            f"making it {result.sweetness.value}."
        ),
        (
            f"The wine is {result.body.value}, with {result.tannin} and {result.acidity.value} acidity. "
            f"It shows hints of {result.flavor_note.lower()} in its flavor profile."
        ),
        f"The alcohol content is classified as {result.alcohol_level.value}.",
        "Enjoy your wine.",
    ]
    return "\n\n".join(paragraphs)
