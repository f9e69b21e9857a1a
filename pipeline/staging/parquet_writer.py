# pipeline/staging/parquet_writer.py
#
# Standardised Parquet read/write for staging data.
#
# Design decisions:
#   - Thin wrappers around Polars I/O so the rest of the pipeline never calls
#     polars directly for file I/O.
#   - write_parquet writes to a sibling .tmp file and renames it, so a crash
#     mid-write never leaves a truncated staging file for the next
#     --skip-download run to pick up.
#   - No schema enforcement here. That happens in the validate() step of each
#     SourcePipeline and in the transforms.
from __future__ import annotations

from pathlib import Path

import polars as pl


def write_parquet(df: pl.DataFrame, path: Path) -> Path:
    """Write a DataFrame to a Parquet file, creating parent directories as needed.

    Returns:
        ``path``, for call-chain convenience.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(".tmp.parquet")
    df.write_parquet(tmp_path)
    tmp_path.replace(path)
    return path


def read_parquet(path: Path) -> pl.DataFrame:
    """Read a Parquet file into a DataFrame.

    Raises:
        FileNotFoundError: if ``path`` does not exist (raised by Polars).
    """
    return pl.read_parquet(path)
