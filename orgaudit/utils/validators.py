"""Data validation utilities using pandera."""

import pandera as pa
import pandas as pd
from pandera import DataFrameSchema

type ValidationResult = dict[str, str | bool | list[str]]


def validate_dataframe(df: pd.DataFrame, schema: DataFrameSchema) -> ValidationResult:
    """Validate a DataFrame against a pandera schema, collecting every failure."""
    try:
        schema.validate(df, lazy=True)
        return {"valid": True, "status": "ok", "errors": []}
    except pa.errors.SchemaErrors as e:
        errors = []
        for _, row in e.failure_cases.iterrows():
            match row.to_dict():
                case {"column": col, "check": check, "failure_case": val, "index": idx} if idx is not None and not pd.isna(idx):
                    errors.append(f"Row {int(idx) + 1}: column '{col}' failed check '{check}': {val!r}")
                case {"column": col, "check": check, "failure_case": val}:
                    errors.append(f"Column '{col}' failed check '{check}': {val!r}")
                case failure:
                    errors.append(f"Validation failure: {failure}")
        return {"valid": False, "status": "error", "errors": errors}


def validate_required_columns(df: pd.DataFrame, required: list[str]) -> ValidationResult:
    """Check that every required column is present."""
    missing = [col for col in required if col not in df.columns]

    match missing:
        case []:
            return {"valid": True, "status": "ok", "errors": []}
        case cols:
            return {
                "valid": False,
                "status": "error",
                "errors": [
                    f"CSV file is missing one or more required columns. "
                    f"Required columns are: {required}. Found columns are: {list(df.columns)}. "
                    f"Missing: {cols}."
                ],
            }
