"""Vinifera - Wine fermentation simulator."""

from vinifera.fermentation import compute
from vinifera.flavor_table import FlavorTable, load_flavor_table, get_flavor_table
from vinifera.schema import FermentationInput, FermentationOutput, FermentationFailure
from vinifera.simulator import simulate

__version__ = "0.1.0"

__all__ = [
    'compute',
    'simulate',
    'FlavorTable',
    'load_flavor_table',
    'get_flavor_table',
    'FermentationInput',
    'FermentationOutput',
    'FermentationFailure',
    '__version__',
]
