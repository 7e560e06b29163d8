"\"\"\"Typer CLI entrypoint for running and reviewing interviews.\"\"\""

from __future__ import annotations

import queue
import sys
import threading
from pathlib import Path
from typing import Any, Optional, TextIO

import typer
import yaml
from pydantic import ValidationError

from .container import create_container
from .core import SessionPhase
from .engine import InterviewEngine
from .errors import UnsupportedDocumentError
from .logging import configure_logging
from .questions import total_time_limit
from .schemas import Candidate, Sender
from .schemas.config import load_config
from .ticker import Ticker

app = typer.Typer(help="Timed technical interview CLI.")


def _load_settings(config: Optional[Path], store: Optional[Path]) -> dict[str, Any]:
    settings: dict[str, Any] = {}
    if config:
        with config.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle) or {}
        try:
            settings = load_config(loaded).to_settings()
        except ValidationError as exc:
            raise typer.BadParameter(f"Invalid config file: {exc}", param_name="config") from exc
    if store:
        settings["store"] = {"backend": "sqlite", "path": str(store)}
    return settings


class TranscriptPrinter:
    """Echo transcript messages not yet shown. Safe to call from the ticker."""

    def __init__(self, engine: InterviewEngine) -> None:
        self._engine = engine
        self._shown = 0
        self._lock = threading.Lock()

    def flush(self, _fired: bool = False) -> None:
        with self._lock:
            messages = self._engine.current_messages()
            for message in messages[self._shown :]:
                if message.sender is Sender.SYSTEM:
                    typer.echo(f"AI: {message.text}")
            self._shown = len(messages)
            remaining = self._engine.remaining_seconds()
            if remaining and (remaining % 10 == 0 or remaining <= 5):
                typer.echo(f"Time left: {remaining}s")


def start_line_reader(stream: TextIO) -> "queue.Queue[str | None]":
    """Feed lines from ``stream`` into a queue; ``None`` marks end of input."""

    lines: "queue.Queue[str | None]" = queue.Queue()

    def _pump() -> None:
        for line in iter(stream.readline, ""):
            lines.put(line)
        lines.put(None)

    threading.Thread(target=_pump, name="stdin-reader", daemon=True).start()
    return lines


def run_input_loop(
    engine: InterviewEngine,
    lines: "queue.Queue[str | None]",
    printer: TranscriptPrinter,
    *,
    poll: float = 0.2,
) -> None:
    """Submit queued lines until the session finishes or input ends.

    Polls so a session finished by the ticker ends the loop without
    waiting for another line.
    """
    while engine.state().phase is not SessionPhase.FINISHED:
        try:
            line = lines.get(timeout=poll)
        except queue.Empty:
            continue
        if line is None:
            break
        engine.submit_text(line.rstrip("\r\n"))
        printer.flush()


@app.command()
def interview(
    resume: Optional[Path] = typer.Option(
        None, exists=True, readable=True, dir_okay=False, help="Resume (PDF) used to pre-fill your details."
    ),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    store: Optional[Path] = typer.Option(None, dir_okay=False, help="SQLite file for candidate records."),
    log_level: str = typer.Option("WARNING", help="Log level for structured logging."),
    log_json: bool = typer.Option(True, "--log-json/--log-console", help="Render logs as JSON or for a console."),
    tick_interval: float = typer.Option(1.0, min=0.01, help="Seconds between timer ticks."),
) -> None:
    """Run one interview session in the terminal."""
    settings = _load_settings(config, store)
    configure_logging(log_level, json=log_json)

    container = create_container(settings=settings)
    engine = container.engine()
    printer = TranscriptPrinter(engine)

    typer.echo(
        f"Session {engine.session_id}: {len(engine.questions)} questions, "
        f"{total_time_limit(engine.questions)}s total."
    )
    if resume:
        try:
            engine.upload_document(resume.read_bytes(), resume.name)
        except UnsupportedDocumentError as exc:
            typer.echo(f"{exc.reason} Please type your details instead.", err=True)
    printer.flush()

    ticker = Ticker(engine, interval=tick_interval, on_tick=printer.flush)
    ticker.start()
    try:
        run_input_loop(engine, start_line_reader(sys.stdin), printer, poll=min(tick_interval, 0.2))
    finally:
        ticker.stop()
    printer.flush()

    record = engine.candidate()
    if record is not None and record.is_complete:
        typer.echo(f"Score: {record.score}/100. {record.summary}")
    else:
        typer.echo("Interview ended before completion.")


@app.command()
def candidates(
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    store: Optional[Path] = typer.Option(None, dir_okay=False, help="SQLite file for candidate records."),
) -> None:
    """List stored candidates with their scores."""
    settings = _load_settings(config, store)
    if settings.get("store", {}).get("backend") != "sqlite":
        raise typer.BadParameter("A sqlite store is required to review candidates.", param_name="store")

    container = create_container(settings=settings)
    records = container.candidate_store().list_all()
    if not records:
        typer.echo("No candidates recorded.")
        return
    for line in _render_table(records):
        typer.echo(line)


_COLUMNS: tuple[tuple[str, str], ...] = (
    ("Name", "name"),
    ("Email", "email"),
    ("Phone", "phone"),
    ("Score", "score"),
    ("Summary", "summary"),
)


def _render_table(records: list[Candidate]) -> list[str]:
    rows = [
        [_cell(getattr(record, attr)) for _, attr in _COLUMNS]
        for record in records
    ]
    widths = [
        max(len(title), *(len(row[idx]) for row in rows))
        for idx, (title, _) in enumerate(_COLUMNS)
    ]
    header = "  ".join(title.ljust(width) for (title, _), width in zip(_COLUMNS, widths))
    lines = [header.rstrip(), "  ".join("-" * width for width in widths)]
    lines.extend("  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip() for row in rows)
    return lines


def _cell(value: Any) -> str:
    return "-" if value is None else str(value)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
