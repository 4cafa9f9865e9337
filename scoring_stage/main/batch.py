"""
Batch Entry Point - Main Layer

Entry point of the batch row adapter: reads a table export, scores every
row and writes the predictions next to the row keys.

    python -m scoring_stage.main.batch rows.csv --output predictions.csv
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from scoring_stage.application.scoring_stage import ScoringStage
from scoring_stage.application.use_cases.scoring_use_cases import ScoreBatchUseCase
from scoring_stage.domain.entities.errors import SpecificationError
from scoring_stage.infrastructure.adapters.table_adapter import (
    ERROR_COLUMN,
    read_table,
    score_dataframe,
    write_table,
)
from scoring_stage.main.config import get_settings
from scoring_stage.shared import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_ROWS_FAILED = 1
EXIT_LOAD_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Score table rows against a model specification",
    )
    parser.add_argument(
        "input",
        type=Path,
        help="CSV, JSON or JSON-lines file with one column per field",
    )
    parser.add_argument(
        "--output",
        type=Path,
        required=True,
        help="Where to write predictions (format follows the suffix)",
    )
    parser.add_argument(
        "--specification",
        type=Path,
        default=None,
        help="Model specification (defaults to SCORING_SPECIFICATION_PATH)",
    )
    parser.add_argument(
        "--key-column",
        dest="key_columns",
        action="append",
        default=[],
        help="Column copied to the output to identify rows (repeatable)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Scoring threads (defaults to SCORING_BATCH_WORKERS)",
    )
    return parser


def run(argv: Optional[List[str]] = None) -> int:
    """Run the batch job and return the process exit code."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    update_logging_from_settings(settings)

    source = args.specification or Path(settings.scoring.specification_path)
    try:
        stage = ScoringStage.from_source(source)
    except (SpecificationError, OSError) as exc:
        logger.error("batch.load_failed", source=str(source), error=str(exc))
        return EXIT_LOAD_FAILED

    workers = args.workers or settings.scoring.batch_workers
    use_case = ScoreBatchUseCase(stage, max_workers=workers)

    frame = read_table(args.input)
    logger.info("batch.started", input=str(args.input), rows=len(frame))

    result = score_dataframe(use_case, frame, key_columns=args.key_columns)
    write_table(result, args.output)

    failed = int(result[ERROR_COLUMN].notna().sum())
    logger.info(
        "batch.completed",
        output=str(args.output),
        rows=len(result),
        failed=failed,
    )
    return EXIT_ROWS_FAILED if failed else EXIT_OK


def main() -> None:
    configure_logging()
    raise SystemExit(run())


if __name__ == "__main__":
    main()
