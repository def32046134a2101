"""
CLI: kennel-report
Render daily reports from a JSON snapshot of a dog's day.

Snapshot format:
    {"dog": {...}, "activities": [...], "skill_assessments": [...]}
"""
import json
import logging
import sys
from collections import Counter
from pathlib import Path
from typing import Any, Dict

import click

# Add project root to sys.path so the core package resolves from a checkout
project_root = Path(__file__).parent.parent
sys.path.append(str(project_root))

from core.exceptions import KennelReportError
from core.logger import setup_logging
from core.models import ACTIVITY_LABELS, GeneratedReport
from core.report_generator import (
    build_quick_report_from_payload,
    build_report_from_payload,
    parse_activities,
)
from core.templates import apply_template, list_templates


def _load_snapshot(path: Path) -> Dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise click.ClickException(f"{path.name} is not valid JSON: {e}")
    if not isinstance(data, dict):
        raise click.ClickException(f"{path.name} must contain a JSON object")
    return data


def _echo_json(data: Dict[str, Any]) -> None:
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _render_text(report: GeneratedReport, snapshot: Dict[str, Any]) -> str:
    lines = [report.summary, ""]
    lines.append(
        f"Mood: {report.mood.value} | Energy: {report.energy_level.value} | "
        f"Appetite: {report.appetite.value} | Potty: {report.potty.value}"
    )

    counts = Counter(a.type for a in parse_activities(snapshot.get("activities") or []))
    if counts:
        parts = [
            f"{count} {ACTIVITY_LABELS[activity_type]}{'' if count == 1 else 's'}"
            for activity_type, count in counts.items()
        ]
        lines.append(f"Logged: {', '.join(parts)}")

    lines.append("")
    lines.append("Highlights:")
    lines.extend(f"  - {item}" for item in report.highlights)
    lines.append("Areas to improve:")
    lines.extend(f"  - {item}" for item in report.areas_to_improve)
    lines.append(f"Tomorrow: {report.tomorrow_focus}")
    return "\n".join(lines)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Show engine debug logs on stderr")
def cli(verbose: bool):
    """Daily report synthesis for training dogs"""
    # Console only: a one-shot command leaves no log files behind
    setup_logging(console_level=logging.DEBUG if verbose else logging.WARNING, log_to_file=False)


@cli.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--format", "output_format", type=click.Choice(["json", "text"]), default="json")
def generate(snapshot: Path, output_format: str):
    """Generate the full report for a day snapshot"""
    data = _load_snapshot(snapshot)
    try:
        report = build_report_from_payload(data)
    except KennelReportError as e:
        raise click.ClickException(e.get_user_message())

    if output_format == "text":
        click.echo(_render_text(report, data))
    else:
        _echo_json(report.to_dict())


@cli.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def quick(snapshot: Path):
    """Classifier-only preview of a day snapshot"""
    data = _load_snapshot(snapshot)
    try:
        report = build_quick_report_from_payload(data)
    except KennelReportError as e:
        raise click.ClickException(e.get_user_message())
    _echo_json(report.to_dict())


@cli.command()
@click.argument("template_key")
@click.argument("dog_name")
def template(template_key: str, dog_name: str):
    """Fill a canned template with the dog's name"""
    try:
        report = apply_template(template_key, dog_name)
    except KennelReportError as e:
        raise click.ClickException(e.get_user_message())
    _echo_json(report.to_dict())


@cli.command()
def templates():
    """List the canned template keys"""
    for key in list_templates():
        click.echo(key)


if __name__ == "__main__":
    cli()
