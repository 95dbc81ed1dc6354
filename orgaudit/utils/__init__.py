"""Shared utilities for loading and validating tabular data."""

from orgaudit.utils.io import read_text_csv
from orgaudit.utils.transforms import normalize_columns, strip_text_cells
from orgaudit.utils.validators import validate_dataframe, validate_required_columns
