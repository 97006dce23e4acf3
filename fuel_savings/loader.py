"""
Data loader for fuel savings calculations.
Loads batches of driver inputs from an Excel workbook or CSV file.
"""

import logging
from pathlib import Path
from typing import List, Optional

import pandas as pd

from .models import SavingsInput

logger = logging.getLogger(__name__)

# Cleaned column name -> SavingsInput field
COLUMN_MAP = {
    'miles driven': 'miles_driven',
    'timeframe': 'miles_driven_timeframe',
    'trade ppg': 'trade_ppg',
    'trade mpg': 'trade_mpg',
    'new ppg': 'new_ppg',
    'new mpg': 'new_mpg',
}

EXCEL_SUFFIXES = {'.xlsx', '.xlsm', '.xls'}


class DataLoader:
    """Load savings inputs from a tabular file."""

    def __init__(self, path: str, sheet_name: str = 'Savings inputs'):
        """
        Initialize data loader with an input file.

        Args:
            path: Path to an Excel workbook or CSV file, one input per row
            sheet_name: Worksheet holding the inputs (Excel only)
        """
        self.path = Path(path)
        if not self.path.exists():
            raise FileNotFoundError(f"Input file not found: {path}")

        self.sheet_name = sheet_name
        self._load_data()

    def _load_data(self):
        """Read the input rows."""
        if self.path.suffix.lower() in EXCEL_SUFFIXES:
            self.inputs = pd.read_excel(self.path, sheet_name=self.sheet_name)
        else:
            self.inputs = pd.read_csv(self.path)

        self._clean_column_names()

        missing = [col for col in COLUMN_MAP if col not in self.inputs.columns]
        if missing:
            raise ValueError(f"Input file {self.path.name} is missing columns: {', '.join(missing)}")

        logger.info("Loaded %d savings inputs from %s", len(self.inputs), self.path)

    def _clean_column_names(self):
        """Standardize column names."""
        self.inputs.columns = self.inputs.columns.astype(str).str.strip().str.lower()

    def __len__(self) -> int:
        return len(self.inputs)

    def get_inputs(self) -> List[SavingsInput]:
        """
        Get every row as a SavingsInput.

        Returns:
            Inputs in file order; empty cells become None
        """
        return [self._row_to_input(row) for _, row in self.inputs.iterrows()]

    @staticmethod
    def _row_to_input(row: pd.Series) -> SavingsInput:
        values = {}
        for column, name in COLUMN_MAP.items():
            values[name] = _cell_value(row[column])

        timeframe = values['miles_driven_timeframe']
        if isinstance(timeframe, str):
            values['miles_driven_timeframe'] = timeframe.strip().lower()

        return SavingsInput(**values)


def _cell_value(value) -> Optional[object]:
    if pd.isna(value):
        return None
    # Unwrap numpy scalars
    if hasattr(value, 'item'):
        return value.item()
    return value
