"""Common data transformation utilities."""

import pandas as pd

type ColumnMapping = dict[str, str]


def normalize_columns(df: pd.DataFrame, mapping: ColumnMapping | None = None) -> pd.DataFrame:
    """Normalize column names to snake_case and apply optional mapping."""
    df = df.copy()
    df.columns = [str(col).strip().lower().replace(" ", "_").replace("-", "_") for col in df.columns]

    if mapping:
        df = df.rename(columns=mapping)

    return df


def strip_text_cells(df: pd.DataFrame) -> pd.DataFrame:
    """Trim whitespace in every text cell; cells left empty become NA."""
    result = df.copy()
    for col in result.columns:
        stripped = result[col].str.strip()
        result[col] = stripped.mask(stripped == "")
    return result
