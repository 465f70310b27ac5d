"""
Flavor dataset access.

Maps grape varieties to the flavor characteristics listed in the bundled
wine dataset. The default table is loaded once per process and treated as
read-only afterwards.
"""

import random
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

import pandas as pd

from vinifera.config import DATASET_PATH
from vinifera.constants import ColumnNames, UNKNOWN_FLAVOR_PROFILE
from vinifera.error_handling import DatasetError, handle_dataset_error
from vinifera.utils import logger


def _normalize_grape(grape: str) -> str:
    return (grape or "").strip().lower()


class FlavorTable:
    """Case-insensitive grape -> flavor characteristics mapping."""

    def __init__(self, entries: Optional[Dict[str, Iterable[str]]] = None):
        self._entries: Dict[str, Tuple[str, ...]] = {}
        for grape, notes in (entries or {}).items():
            key = _normalize_grape(grape)
            if not key:
                continue
            merged = self._entries.get(key, ()) + tuple(notes)
            if merged:
                self._entries[key] = merged

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> 'FlavorTable':
        """
        Build a table from a DataFrame with Grape and Characteristics columns.

        Rows with a blank grape or blank characteristics are skipped.

        Raises:
            DatasetError: if a required column is missing
        """
        missing = [col for col in ColumnNames.required() if col not in df.columns]
        if missing:
            raise DatasetError(f"Flavor dataset missing columns: {missing}")

        rows = df[ColumnNames.required()].copy()
        rows = rows.dropna()
        rows[ColumnNames.GRAPE] = rows[ColumnNames.GRAPE].astype(str).str.strip()
        rows[ColumnNames.CHARACTERISTICS] = rows[ColumnNames.CHARACTERISTICS].astype(str).str.strip()
        rows = rows[(rows[ColumnNames.GRAPE] != "") & (rows[ColumnNames.CHARACTERISTICS] != "")]

        skipped = len(df) - len(rows)
        if skipped:
            logger.warning(f"Skipped {skipped} malformed flavor dataset rows")

        entries: Dict[str, List[str]] = {}
        for grape, characteristics in zip(rows[ColumnNames.GRAPE], rows[ColumnNames.CHARACTERISTICS]):
            entries.setdefault(grape, []).append(characteristics)

        table = cls(entries)
        logger.info(f"Loaded {len(rows)} flavor notes for {len(table)} grapes")
        return table

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, grape: str) -> bool:
        return _normalize_grape(grape) in self._entries

    def grapes(self) -> List[str]:
        """Lower-cased grape names with at least one flavor note."""
        return sorted(self._entries)

    def candidates(self, grape: str) -> Tuple[str, ...]:
        """All flavor notes recorded for a grape (empty if unknown)."""
        return self._entries.get(_normalize_grape(grape), ())

    def lookup(self, grape: str, rng: Optional[random.Random] = None) -> str:
        """
        Pick one flavor note for a grape.

        Multiple notes per grape are intentional variety, so the pick is
        random unless a seeded rng is passed in.

        Returns:
            A recorded flavor note, or "unknown flavor profile"
        """
        notes = self.candidates(grape)
        if not notes:
            return UNKNOWN_FLAVOR_PROFILE
        return (rng or random).choice(notes)


def load_flavor_table(path: Optional[Union[str, Path]] = None) -> FlavorTable:
    """
    Load the flavor dataset from CSV.

    Any unreadable, malformed or incomplete file degrades to an empty
    table so every grape resolves to "unknown flavor profile".

    Args:
        path: CSV path, defaults to the configured dataset

    Returns:
        FlavorTable (possibly empty)
    """
    csv_path = Path(path) if path is not None else DATASET_PATH
    try:
        df = pd.read_csv(csv_path, dtype=str, skipinitialspace=True)
        return FlavorTable.from_dataframe(df)
    except Exception as e:
        return handle_dataset_error(e, f"loading flavor dataset {csv_path}", fallback_value=FlavorTable())


@lru_cache(maxsize=1)
def get_flavor_table() -> FlavorTable:
    """Process-wide flavor table, loaded on first use."""
    return load_flavor_table()


__all__ = [
    'FlavorTable',
    'load_flavor_table',
    'get_flavor_table',
]
