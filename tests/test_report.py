"""
Tests for the fermentation summary and the form entry point.
"""

import pytest

from vinifera.fermentation import compute
from vinifera.flavor_table import FlavorTable
from vinifera.report import render_report
from vinifera.schema import FermentationFailure, FermentationInput
from vinifera.simulator import simulate

FAILED = "Fermentation failed: temperature out of range for yeast activity."


@pytest.fixture
def flavor_table():
    return FlavorTable({"Merlot": ["Plum and Black Cherry"]})


@pytest.fixture
def merlot_input():
    return FermentationInput(
        grape="Merlot",
        days=14,
        container="Oak Barrel",
        sugar_content=220,
        temperature_c=22,
        climate="Moderate"
    )


class TestRenderReport:
    """Test the summary text."""

    def test_failure_renders_message_only(self, merlot_input):
        assert render_report(merlot_input, FermentationFailure()) == FAILED

    def test_merlot_summary(self, merlot_input, flavor_table):
        report = render_report(merlot_input, compute(merlot_input, flavor_table))

        assert report.startswith(
            "Your Merlot wine was fermented over 14 days in a Oak Barrel "
            "that adds woody, oaky undertones."
        )
        assert "The initial sugar level was 220.0 g/L (adjusted for a moderate climate)" in report
        assert "potential of 13.1% ABV" in report
        assert "Fermenting at 22°C" in report
        assert "about 96.0% of that potential was met" in report
        assert "final ABV of 12.5%" in report
        assert "residual sugar of 8.8 g/L, making it with just a subtle hint of sweetness." in report
        assert "The wine is full-bodied, with smooth, moderate tannins and moderate acidity." in report
        assert "hints of plum and black cherry in its flavor profile" in report
        assert "The alcohol content is classified as moderate." in report
        assert report.endswith("Enjoy your wine.")

    def test_paragraphs(self, merlot_input, flavor_table):
        report = render_report(merlot_input, compute(merlot_input, flavor_table))
        assert len(report.split("\n\n")) == 5

    def test_unknown_flavor_in_summary(self, merlot_input):
        report = render_report(merlot_input, compute(merlot_input, FlavorTable()))
        assert "hints of unknown flavor profile" in report

    def test_rejects_other_types(self, merlot_input):
        with pytest.raises(TypeError):
            render_report(merlot_input, "not a result")


class TestSimulate:
    """Test the form entry point end to end."""

    def test_simulate_returns_summary(self, flavor_table):
        report = simulate(
            grape="merlot",
            days="14",
            container="Oak Barrel",
            sugar_content="220",
            temperature_c="22",
            climate="Moderate",
            flavor_table=flavor_table
        )
        assert "final ABV of 12.5%" in report
        assert "plum and black cherry" in report

    def test_hot_fermentation_fails(self, flavor_table):
        report = simulate(
            grape="Merlot",
            days="14",
            container="Oak Barrel",
            sugar_content="220",
            temperature_c="45",
            climate="Warm",
            flavor_table=flavor_table
        )
        assert report == FAILED

    def test_garbage_temperature_fails_gracefully(self, flavor_table):
        """Unparsable temperature is read as 0°C, which is too cold."""
        report = simulate(grape="Merlot", temperature_c="hot", flavor_table=flavor_table)
        assert report == FAILED

    def test_garbage_numbers_never_raise(self, flavor_table):
        report = simulate(
            grape="???",
            days="soon",
            container="",
            sugar_content="a lot",
            temperature_c="20",
            climate="Martian",
            flavor_table=flavor_table
        )
        assert "fermented over 0 days" in report
        assert "adjusted for a unknown climate" in report
        assert "unknown tannin levels" in report
        assert "classified as extremely low" in report

    def test_enormous_day_count(self, flavor_table):
        report = simulate(
            grape="Merlot",
            days="1" + "0" * 400,
            container="Oak Barrel",
            sugar_content="220",
            temperature_c="22",
            climate="Moderate",
            flavor_table=flavor_table
        )
        assert "about 100.0% of that potential was met" in report
        assert "making it bone dry" in report

    def test_overflowing_sugar_reads_as_zero(self, flavor_table):
        report = simulate(
            grape="Merlot",
            days="14",
            container="Oak Barrel",
            sugar_content="1.7e308",
            temperature_c="22",
            climate="Warm",
            flavor_table=flavor_table
        )
        assert "inf g/L" not in report
        assert "inf% ABV" not in report
        assert "The initial sugar level was 0.0 g/L" in report
        assert "final ABV of 0.0%" in report

    def test_uses_bundled_dataset_by_default(self):
        report = simulate(
            grape="Riesling",
            days="10",
            container="Steel Tank",
            sugar_content="190",
            temperature_c="16",
            climate="Cool"
        )
        assert "a pristine, clean character" in report
        assert "unknown flavor profile" not in report
