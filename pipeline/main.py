# pipeline/main.py
#
# Pipeline orchestrator: syncs submissions from Firestore, recomputes scores,
# consolidates the municipal view and builds the DuckDB database.
#
# Design decisions:
#   - run_pipeline is the single entry point. It accepts a PipelineConfig and an
#     optional skip_download flag (rebuild from existing staging data).
#   - Strict order:
#       1. Download + parse + validate the source (staging parquets)
#       2. Recompute per-category and overall scores from the answers
#       3. Consolidate categories and sector participation
#       4. Validate completude of all staging files
#       5. Build DuckDB atomically
#   - Each step logs progress to stdout. No structured logging framework is used
#     because the pipeline is a batch job, not a long-running service.
#   - `source` is injectable so tests run the whole flow against a
#     MockTransport-backed client.
#
# Invariant: the DuckDB file is never replaced unless the source completed
# successfully and completude validation passed.
from __future__ import annotations

import sys
from pathlib import Path

from pipeline.config import PipelineConfig, load_config
from pipeline.log import log
from pipeline.output.build_duckdb import build_duckdb
from pipeline.output.completude import validar_completude
from pipeline.sources.base import SourcePipeline
from pipeline.sources.firestore.source import FirestoreSubmissoes
from pipeline.staging.parquet_writer import read_parquet, write_parquet
from pipeline.transform.consolidacao import (
    calcular_categoria_scores,
    calcular_resultados,
    consolidar_categorias,
    contar_setores,
)


def run_pipeline(
    config: PipelineConfig,
    *,
    skip_download: bool = False,
    source: SourcePipeline | None = None,
) -> Path:
    """Execute the full pipeline and produce the DuckDB database.

    Args:
        config: Pipeline configuration with paths and Firestore location.
        skip_download: If True, skip download+parse+validate and read the
            existing staging parquets.
        source: Source override. Defaults to the Firestore collection in config.

    Returns:
        Path to the final DuckDB database file.

    Raises:
        pipeline.output.completude.CompletudeError: if any required staging file
            is missing or empty before the build.
    """
    staging_dir = config.staging_dir
    staging_dir.mkdir(parents=True, exist_ok=True)

    if not skip_download:
        if source is None:
            source = FirestoreSubmissoes(config.firestore, config.download_timeout, config.download_retries)
        _run_source(source, config)

    # ---- Read staging data ----
    log("Reading staging parquets...")
    submissoes_df = read_parquet(staging_dir / "submissoes.parquet")
    respostas_df = read_parquet(staging_dir / "respostas.parquet")

    # ---- Transforms ----
    log("Recomputing scores...")
    categoria_scores_df = calcular_categoria_scores(submissoes_df, respostas_df)
    write_parquet(categoria_scores_df, staging_dir / "categoria_scores.parquet")
    log(f"  Category scores: {len(categoria_scores_df):,} rows")

    submissoes_df = calcular_resultados(submissoes_df, categoria_scores_df)
    write_parquet(submissoes_df, staging_dir / "submissoes.parquet")

    log("Consolidating municipal view...")
    consolidado_df = consolidar_categorias(categoria_scores_df)
    write_parquet(consolidado_df, staging_dir / "consolidado_categorias.parquet")
    setores_df = contar_setores(submissoes_df)
    write_parquet(setores_df, staging_dir / "setores.parquet")
    log(f"  {len(submissoes_df):,} submissions from {len(setores_df):,} sector(s)")

    # ---- Validate completude ----
    log("Validating completude...")
    validar_completude(staging_dir)

    # ---- Build DuckDB ----
    log("Building DuckDB...")
    output_path = build_duckdb(staging_dir, config.duckdb_output_path)
    log(f"Done. DuckDB written to: {output_path}")
    return output_path


def _run_source(source: SourcePipeline, config: PipelineConfig) -> None:
    """Download, parse and validate one source into staging parquets.

    Errors abort the pipeline; staging files from a previous run are only
    overwritten after validate() succeeded.
    """
    if not isinstance(source, SourcePipeline):
        raise TypeError(f"{source!r} does not implement SourcePipeline")

    log(f"Downloading {source.name}...")
    raw_path = source.download(config.raw_dir / source.name)

    log(f"Parsing and validating {source.name}...")
    frames = source.validate(source.parse(raw_path))
    for stem, df in frames.items():
        write_parquet(df, config.staging_dir / f"{stem}.parquet")
        log(f"  {stem}: {len(df):,} rows")


if __name__ == "__main__":
    skip = "--skip-download" in sys.argv[1:]
    cfg = load_config(require_source=not skip)
    run_pipeline(cfg, skip_download=skip)
