"""Worklog CLI - record work wins and generate reports."""

import logging
import sys
from datetime import date, timedelta
from pathlib import Path

import click

from .config import load_config
from .core.prompts import ReportStyle
from .errors import WorklogError
from .workflows import (
    api_key_status,
    append_entries,
    delete_api_key,
    generate_report,
    list_backups,
    parse_report_date,
    read_worklog,
    save_api_key,
    undo_last_change,
)


def _fail(e: Exception) -> None:
    click.echo(f"Error: {e}", err=True)
    sys.exit(1)


def _six_months_before(d: date) -> date:
    month = d.month - 6
    year = d.year
    if month < 1:
        month += 12
        year -= 1
    # Clamp to the last valid day of the target month
    while True:
        try:
            return d.replace(year=year, month=month)
        except ValueError:
            d -= timedelta(days=1)


@click.group()
@click.version_option(package_name="worklog")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, debug: bool):
    """Worklog - track your work wins."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )
    ctx.obj = load_config()


@main.command()
@click.argument("entries", nargs=-1)
@click.option("--file", "-f", "entries_file", type=click.File("r"), default=None,
              help="Read entries from a file, one per line ('-' for stdin)")
@click.pass_obj
def add(config, entries: tuple[str, ...], entries_file):
    """Add work wins to the log."""
    lines = list(entries)
    if entries_file is not None:
        lines.extend(entries_file.read().splitlines())
    elif not lines and not sys.stdin.isatty():
        lines.extend(sys.stdin.read().splitlines())

    lines = [line.strip() for line in lines if line.strip()]
    if not lines:
        click.echo("Error: Please enter at least one work entry", err=True)
        sys.exit(1)

    try:
        append_entries(config, lines)
    except WorklogError as e:
        _fail(e)

    noun = "entry" if len(lines) == 1 else "entries"
    click.echo(f"✓ Added {len(lines)} {noun} to {config.worklog_path}")


@main.command()
@click.pass_obj
def show(config):
    """Print the current worklog."""
    try:
        content = read_worklog(config)
    except WorklogError as e:
        _fail(e)
    click.echo(content.strip())


@main.command()
@click.pass_obj
def undo(config):
    """Undo the last change to the worklog."""
    try:
        backup = undo_last_change(config)
    except WorklogError as e:
        _fail(e)
    click.echo(f"✓ Restored worklog from {backup.name}")


@main.command()
@click.pass_obj
def history(config):
    """List available backups, newest first."""
    try:
        backups = list_backups(config)
    except WorklogError as e:
        _fail(e)

    if not backups:
        click.echo("No backups.")
        return

    for backup in backups:
        click.echo(backup.name)


@main.command()
@click.option("--start", "-s", "start_date", default=None,
              help="Start date (YYYY-MM-DD), defaults to six months ago")
@click.option("--end", "-e", "end_date", default=None,
              help="End date (YYYY-MM-DD), defaults to today")
@click.option("--style", default=ReportStyle.EXECUTIVE.value, show_default=True,
              help="Report style. " + "; ".join(f"{s.value}: {s.label}" for s in ReportStyle))
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Write the report to a file instead of stdout")
@click.pass_obj
def report(config, start_date: str | None, end_date: str | None, style: str, output: Path | None):
    """Generate a summary report for a date range."""
    today = date.today()
    start_date = start_date or _six_months_before(today).isoformat()
    end_date = end_date or today.isoformat()

    try:
        start = parse_report_date(start_date, "start")
        end = parse_report_date(end_date, "end")
    except WorklogError as e:
        _fail(e)

    if start > end:
        click.echo("Error: Start date must be before end date", err=True)
        sys.exit(1)

    try:
        text = generate_report(config, start_date, end_date, style)
    except WorklogError as e:
        _fail(e)

    if output is None:
        click.echo(text)
        return

    output.write_text(text)
    click.echo(f"✓ Report saved to {output}")


@main.group()
def key():
    """Manage the OpenAI API key."""
    pass


@key.command("set")
@click.option("--api-key", prompt="OpenAI API key", hide_input=True,
              help="API key (prompted for if omitted)")
@click.pass_obj
def key_set(config, api_key: str):
    """Store the API key in the system keyring."""
    try:
        save_api_key(config, api_key)
    except WorklogError as e:
        _fail(e)
    click.echo("✓ API key saved securely")


@key.command("status")
@click.pass_obj
def key_status(config):
    """Check whether an API key is stored."""
    try:
        configured = api_key_status(config)
    except WorklogError as e:
        _fail(e)
    click.echo("API key is configured." if configured else "No API key configured.")


@key.command("delete")
@click.pass_obj
def key_delete(config):
    """Remove the stored API key."""
    try:
        delete_api_key(config)
    except WorklogError as e:
        _fail(e)
    click.echo("✓ API key deleted")


if __name__ == "__main__":
    main()
