"""Convenience helpers for running the pipelines on files."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd

from .pipeline import (
    ComponentsConfig,
    ComponentsPipeline,
    ComponentsResult,
    PrefixSumConfig,
    PrefixSumPipeline,
)


def components_file(
    input_path: str | Path,
    output_path: str | Path,
    config: Optional[ComponentsConfig] = None,
) -> ComponentsResult | None:
    """Group the edge list in `input_path` into components and write the labelled nodes."""

    input_path = Path(input_path)
    config = config or ComponentsConfig()
    dataframe = _load_checked(input_path, (config.left_column, config.right_column), dtype=str)
    if dataframe is None:
        return None

    try:
        return ComponentsPipeline(config).run(dataframe, output_path)
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return None


def prefix_sums_file(
    input_path: str | Path,
    output_path: str | Path,
    config: Optional[PrefixSumConfig] = None,
) -> pd.DataFrame | None:
    """Append running totals of a numeric column in `input_path` and write the result."""

    input_path = Path(input_path)
    config = config or PrefixSumConfig()
    dataframe = _load_checked(input_path, (config.value_column,))
    if dataframe is None:
        return None

    try:
        return PrefixSumPipeline(config).run(dataframe, output_path)
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return None


def _load_checked(path: Path, columns: tuple[str, ...], dtype=None) -> pd.DataFrame | None:
    try:
        dataframe = load_dataframe(path, dtype=dtype)
    except FileNotFoundError:
        print(f"ERROR: Input file not found at '{path}'.")
        return None
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as exc:
        print(f"ERROR: Could not parse '{path}': {exc}")
        return None
    except ValueError:
        print(f"ERROR: Unsupported file format for '{path}'. Please provide a CSV or Excel file.")
        return None

    for column in columns:
        if column not in dataframe.columns:
            print(f"ERROR: Column '{column}' not found in '{path}'.")
            return None
    return dataframe


def load_dataframe(path: Path, dtype=None) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return pd.read_csv(path, dtype=dtype)
    if suffix == ".xlsx":
        return pd.read_excel(path, dtype=dtype)
    raise ValueError("unsupported format")
