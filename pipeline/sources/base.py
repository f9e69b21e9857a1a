# pipeline/sources/base.py
#
# Protocol definition for pipeline source implementations.
#
# Design decisions:
#   - typing.Protocol (structural subtyping) rather than ABC so that concrete
#     sources do not need to inherit from a base.
#   - runtime_checkable so the orchestrator can assert the contract with
#     isinstance() before running a source.
#   - One raw export may feed several staging tables (a Firestore document
#     holds the submission, its answers and its evidences), so parse and
#     validate work on a mapping of staging stem -> DataFrame.
#       download  - side-effectful: fetches data, writes to raw_dir.
#       parse     - pure: raw file -> typed DataFrames.
#       validate  - pure: DataFrames in, clean DataFrames out.
from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

import polars as pl

StagingFrames = dict[str, pl.DataFrame]


@runtime_checkable
class SourcePipeline(Protocol):
    """Contract for pipeline source implementations.

    Invariant: parse(raw_path) accepts the exact path returned by
    download(raw_dir), and validate() accepts the mapping returned by parse().
    Keys of the returned mapping are staging file stems.
    """

    name: str

    def download(self, raw_dir: Path) -> Path:
        """Download raw data to raw_dir (created if absent) and return its path."""
        ...

    def parse(self, raw_path: Path) -> StagingFrames:
        """Parse the raw file into typed DataFrames keyed by staging stem."""
        ...

    def validate(self, frames: StagingFrames) -> StagingFrames:
        """Clean and deduplicate; invalid rows are dropped, never repaired silently."""
        ...
