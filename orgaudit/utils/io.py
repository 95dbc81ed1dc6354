"""File I/O utilities for reading employee exports."""

import logging
from pathlib import Path

import pandas as pd

from orgaudit.errors import InvalidInputError

type FilePath = str | Path

logger = logging.getLogger(__name__)

ENCODINGS = ("utf-8-sig", "latin-1")


def read_text_csv(path: FilePath) -> pd.DataFrame:
    """Read a CSV keeping every cell as text; only blank cells become NA.

    Numbers are left as strings so callers decide how to parse them, which
    keeps salaries away from float conversion.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {path}")

    for encoding in ENCODINGS:
        try:
            return pd.read_csv(
                path,
                dtype=str,
                encoding=encoding,
                keep_default_na=False,
                na_values=[""],
                skipinitialspace=True,
            )
        except UnicodeDecodeError:
            continue
        except pd.errors.EmptyDataError:
            logger.info("No data in %s", path.name)
            return pd.DataFrame()
        except pd.errors.ParserError as exc:
            raise InvalidInputError(f"Malformed CSV in {path}: {exc}") from exc
    raise InvalidInputError(f"Could not decode {path}")
