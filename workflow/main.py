from __future__ import annotations

import json
import sys
from typing import List

import typer

from workflow.config import get_settings
from workflow.domain.models import SomeRecord
from workflow.reporter import print_records
from workflow.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Workflow CLI.")

log = get_logger(__name__)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} | "
        f"log_json={settings.log_json}"
    )


@app.command()
def new(
    values: List[int] = typer.Argument(
        ...,
        help="Integers to wrap in records. Pass negative values after '--'.",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print records as JSON instead of a table.",
    ),
) -> None:
    """
    Construct one record per integer and print them.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    records = []
    for value in values:
        record = SomeRecord(value)
        log.debug("Constructed record", extra={"value": record.value})
        records.append(record)
    log.info("Constructed %d record(s)", len(records))

    if as_json:
        typer.echo(json.dumps([r.model_dump() for r in records], indent=2))
    else:
        print_records(records)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
