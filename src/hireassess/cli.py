"\"\"\"Typer CLI entrypoint for the assessment service.\"\"\""

from __future__ import annotations

import json
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, List, Optional

import typer
import yaml

from .config import load_settings_file
from .container import create_container
from .logging import configure_logging
from .service import AssessmentError, AssessmentService

DEFAULT_STORE_PATH = "store.json"

app = typer.Typer(help="Role-based technical assessment CLI.")


@app.callback()
def main_options(
    ctx: typer.Context,
    store: Optional[Path] = typer.Option(None, dir_okay=False, help="JSON record store path (overrides storage.path)."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("WARNING", help="Log level for structured logging."),
    log_format: str = typer.Option("json", help="Log rendering: json or console."),
) -> None:
    """Shared options for all commands."""
    settings: dict[str, Any] = {}
    if config:
        try:
            settings = load_settings_file(config).to_settings()
        except (ValueError, yaml.YAMLError) as exc:
            raise typer.BadParameter(f"Invalid config file: {exc}", param_name="config") from exc
    if store is not None:
        settings.setdefault("storage", {})["path"] = str(store)
    elif not settings.get("storage", {}).get("path"):
        settings.setdefault("storage", {})["path"] = DEFAULT_STORE_PATH

    if log_format not in ("json", "console"):
        raise typer.BadParameter("Expected json or console", param_name="log_format")
    configure_logging(log_level, log_format=log_format)  # type: ignore[arg-type]
    ctx.obj = create_container(settings=settings).service()


@app.command()
def blueprint(
    ctx: typer.Context,
    role: Optional[str] = typer.Option(None, help="Role being hired for."),
    stack: Optional[List[str]] = typer.Option(None, "--stack", help="Skill in the tech stack (repeatable)."),
    experience: Optional[str] = typer.Option(None, help="Experience band, e.g. '3-5 years'."),
    types: Optional[List[str]] = typer.Option(None, "--type", help="Question type: MCQ, short, coding, scenario (repeatable)."),
    duration: Optional[int] = typer.Option(None, help="Target duration in minutes."),
    notes: str = typer.Option("", help="Free-text hiring note."),
) -> None:
    """Compile a blueprint and print it as JSON."""
    service: AssessmentService = ctx.obj
    compiled = service.create_blueprint(
        role=role,
        stack=stack,
        experience=experience,
        types=types,
        duration=duration,
        notes=notes,
    )
    _echo_json(compiled.model_dump(mode="json", by_alias=True))


@app.command()
def generate(
    ctx: typer.Context,
    blueprint_path: Path = typer.Option(..., "--blueprint", exists=True, readable=True, dir_okay=False, help="Blueprint JSON path."),
) -> None:
    """Generate and store an assessment from a blueprint file."""
    service: AssessmentService = ctx.obj
    payload = _read_json(blueprint_path, param_name="blueprint")
    if isinstance(payload, dict) and "blueprint" in payload:
        payload = payload["blueprint"]
    with _boundary_errors():
        assessment = service.generate_test(payload)
    _echo_json(assessment.to_record())


@app.command()
def submit(
    ctx: typer.Context,
    test_id: str = typer.Option(..., help="Stored assessment id."),
    responses_path: Optional[Path] = typer.Option(None, "--responses", exists=True, readable=True, dir_okay=False, help="Responses JSON path."),
) -> None:
    """Score responses for a stored assessment and print the report."""
    service: AssessmentService = ctx.obj
    responses = _read_json(responses_path, param_name="responses") if responses_path else {}
    if not isinstance(responses, dict):
        raise typer.BadParameter("Responses file must be a JSON object", param_name="responses")
    with _boundary_errors():
        report = service.submit_answers(test_id, responses)
    _echo_json(report.to_record())


@app.command()
def show(
    ctx: typer.Context,
    test_id: str = typer.Option(..., help="Stored assessment id."),
) -> None:
    """Print a stored assessment."""
    service: AssessmentService = ctx.obj
    with _boundary_errors():
        assessment = service.fetch_test(test_id)
    _echo_json(assessment.to_record())


@app.command()
def result(
    ctx: typer.Context,
    test_id: str = typer.Option(..., help="Stored assessment id."),
) -> None:
    """Print the stored submission result for an assessment."""
    service: AssessmentService = ctx.obj
    with _boundary_errors():
        record = service.fetch_result(test_id)
    _echo_json(record.to_record())


@contextmanager
def _boundary_errors() -> Iterator[None]:
    """Turn boundary errors into a non-zero exit with a message."""
    try:
        yield
    except AssessmentError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _read_json(path: Path, *, param_name: str) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"Invalid JSON: {exc}", param_name=param_name) from exc


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
