#!/usr/bin/env python3
"""
Resume Preview CLI

Shows the print-ready preview of the master resume and what it contains.

Commands:
    show  - Print the preview as markdown (or write it to a file)
    stats - Show selected counts per section and preview totals
    reset - Replace the stored master resume with the sample resume

Examples:\n

    preview_resume.py show                              # Print master preview

    preview_resume.py show --output previews/master.md  # Write to LOGS_PATH/previews/master.md

    preview_resume.py stats --zoom 110                  # Counts plus export settings
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from vitae.contexts.persistence import MasterResumeStore
from vitae.contexts.persistence.master_resume import MASTER_RESUME_FILE
from vitae.contexts.rendering import (
    build_export_file_name,
    count_selected_for_section,
    derive_preview_resume,
    ensure_valid_zoom,
    preview_statistics,
)
from vitae.contexts.rendering.logger import log_preview_written, setup_rendering_logger
from vitae.contexts.templating import SECTION_KEYS, SECTION_LABELS, create_sample_resume, format_resume_markdown
from vitae.contexts.templating.logger import setup_templating_logger
from vitae.utils.report_formatter import Column, TableFormatter
from vitae.utils.timestamp import session_stamp

load_dotenv()
VITAE_DATA_PATH = Path(os.getenv("VITAE_DATA_PATH", "outs/data"))
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Preview the master resume",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _master_store(resume_file: Optional[Path]) -> MasterResumeStore:
    return MasterResumeStore(resume_file or VITAE_DATA_PATH / MASTER_RESUME_FILE)


@app.command("show")
def show_command(
    resume_file: Annotated[
        Optional[Path],
        typer.Option("--resume", "-r", help="Master resume JSON (default: VITAE_DATA_PATH/master_resume.json)"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write markdown here (relative paths go under LOGS_PATH)"),
    ] = None,
):
    """Print the master resume preview as markdown."""
    store = _master_store(resume_file)
    result = store.load()
    if result.corrupted:
        typer.secho(f"Stored resume at {store.path} is unreadable; showing sample resume", fg=typer.colors.YELLOW, err=True)
    resume = result.resume or create_sample_resume()

    markdown = format_resume_markdown(derive_preview_resume(resume))

    if output:
        setup_rendering_logger(LOGS_PATH / f"preview_{session_stamp()}", resume.version_name)
        if not output.is_absolute():
            output = LOGS_PATH / output
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(markdown, encoding="utf-8")
        log_preview_written(output)
    else:
        typer.echo(markdown)


@app.command("stats")
def stats_command(
    resume_file: Annotated[
        Optional[Path],
        typer.Option("--resume", "-r", help="Master resume JSON (default: VITAE_DATA_PATH/master_resume.json)"),
    ] = None,
    zoom: Annotated[
        int,
        typer.Option("--zoom", "-z", help="Preview zoom percent (75, 90, 100, 110 or 125)"),
    ] = 100,
):
    """Show selected counts per section and preview totals."""
    resume = _master_store(resume_file).load_or_sample()

    table = TableFormatter([Column("Section", 16), Column("Selected", 8, ">")], total_width=25)
    table.add_title(resume.version_name)
    table.add_table_header()
    for section_key in SECTION_KEYS:
        table.add_row([SECTION_LABELS[section_key], count_selected_for_section(resume, section_key)])

    stats = preview_statistics(resume)
    table.add_text()
    table.add_text(f"Preview: {stats.entry_count} entries, {stats.bullet_count} bullets, {stats.skill_count} skills")
    typer.echo(table.render())

    valid_zoom = ensure_valid_zoom(zoom)
    if valid_zoom != zoom:
        typer.secho(f"Zoom {zoom}% is not supported; using {valid_zoom}%", fg=typer.colors.YELLOW, err=True)
    typer.echo(f"Zoom: {valid_zoom}%")
    typer.echo(f"Export file: {build_export_file_name(resume.personal.full_name or resume.version_name)}")


@app.command("reset")
def reset_command(
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip the confirmation prompt"),
    ] = False,
):
    """Replace the stored master resume with the sample resume."""
    store = _master_store(None)
    if not yes:
        typer.confirm(f"Overwrite {store.path} with the sample resume?", abort=True)

    setup_templating_logger(LOGS_PATH / f"reset_{session_stamp()}", phase="reset")
    store.save(create_sample_resume())
    typer.secho(f"✓ Master resume reset to sample at {store.path}", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
