#!/usr/bin/env python3
"""
Command-line interface for tailored resume versions.

Saved versions live in VITAE_DATA_PATH/resume_versions.json. Each holds the
tailored document, the job description it was built for and the bullets that
were selected.

Commands:
    generate - Build a tailored draft from the master resume and save it
    list     - List saved versions, newest first
    show     - Print a saved version's preview as markdown
    remove   - Delete a saved version
    clear    - Delete every saved version
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from omegaconf.errors import OmegaConfBaseException
from typing_extensions import Annotated

from vitae.contexts.intake import load_job_description
from vitae.contexts.persistence import MasterResumeStore, create_json_repositories
from vitae.contexts.persistence.master_resume import MASTER_RESUME_FILE
from vitae.contexts.persistence.logger import setup_persistence_logger
from vitae.contexts.rendering import derive_preview_resume
from vitae.contexts.targeting import (
    build_tailored_resume,
    create_resume_version_record,
    load_targeting_config,
    ranked_selection_ids,
    score_bullets_against_job_description,
)
from vitae.contexts.targeting.logger import setup_targeting_logger
from vitae.contexts.templating import format_resume_markdown
from vitae.utils.report_formatter import Column, TableFormatter
from vitae.utils.timestamp import format_timestamp, session_stamp

load_dotenv()
VITAE_DATA_PATH = Path(os.getenv("VITAE_DATA_PATH", "outs/data"))
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    add_completion=False,
    help="Generate and manage tailored resume versions",
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("generate")
def generate_command(
    name: Annotated[
        str,
        typer.Option("--name", "-n", help="Version name (blank uses the default draft name)"),
    ] = "",
    text: Annotated[
        Optional[str],
        typer.Option("--text", "-t", help="Job description text"),
    ] = None,
    job_file: Annotated[
        Optional[Path],
        typer.Option("--job-file", "-f", help="Path to a job description text file"),
    ] = None,
    sample: Annotated[
        Optional[str],
        typer.Option("--sample", "-s", help="Sample job description label"),
    ] = None,
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-l", help="Bullets to select (default from targeting config)", min=0),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Build and print the draft without saving it"),
    ] = False,
):
    """
    Build a tailored draft from the master resume and save it as a version.

    Examples:\n

        $ manage_versions.py generate -s "Product Intern" -n "Northstar PM"

        $ manage_versions.py generate -f posting.txt --limit 6 --dry-run
    """
    try:
        job = load_job_description(text=text, job_file=job_file, sample=sample)
        config = load_targeting_config()
    except (ValueError, FileNotFoundError, OmegaConfBaseException) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    setup_targeting_logger(LOGS_PATH / f"generate_{session_stamp()}", job_label=job.label)

    master = MasterResumeStore(VITAE_DATA_PATH / MASTER_RESUME_FILE).load_or_sample()
    matches = score_bullets_against_job_description(master, job.text, config.scoring)
    selected_ids = ranked_selection_ids(matches, config.selection.limit if limit is None else limit)
    draft = build_tailored_resume(master, selected_ids, name)

    if dry_run:
        typer.echo(format_resume_markdown(derive_preview_resume(draft)))
        typer.secho(f"\n(dry run) {len(selected_ids)} bullets selected; nothing saved", fg=typer.colors.YELLOW)
        return

    repositories = create_json_repositories(VITAE_DATA_PATH)
    saved = repositories.resume_versions.save(create_resume_version_record(draft, job.text, selected_ids))
    typer.secho(f"✓ Saved '{saved.version_name}' as {saved.id}", fg=typer.colors.GREEN)
    typer.echo(f"  Selected bullets: {len(selected_ids)}")


@app.command("list")
def list_command(
    relative: Annotated[
        bool,
        typer.Option("--relative", "-r", help="Show relative save times"),
    ] = False,
):
    """List saved versions, newest first."""
    versions = create_json_repositories(VITAE_DATA_PATH).resume_versions.list()
    if not versions:
        typer.echo("No saved versions")
        return

    table = TableFormatter(
        [Column("ID", 24), Column("Name", 32), Column("Bullets", 7, ">"), Column("Saved", 20)],
        total_width=86,
    )
    table.add_table_header()
    for version in versions:
        table.add_row(
            [
                version.id,
                version.version_name,
                len(version.selected_bullet_ids),
                format_timestamp(version.timestamp, relative=relative),
            ]
        )
    table.add_text()
    table.add_text(f"{len(versions)} version(s)")
    typer.echo(table.render())


@app.command("show")
def show_command(
    version_id: Annotated[str, typer.Argument(help="Saved version id")],
    with_job: Annotated[
        bool,
        typer.Option("--with-job", "-j", help="Also print the job description snapshot"),
    ] = False,
):
    """Print a saved version's preview as markdown."""
    version = create_json_repositories(VITAE_DATA_PATH).resume_versions.get_by_id(version_id)
    if version is None:
        typer.secho(f"Version '{version_id}' not found", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(format_resume_markdown(derive_preview_resume(version.final_resume_content)))
    if with_job:
        typer.echo("\n---\n")
        typer.echo(version.job_description_snapshot)


@app.command("remove")
def remove_command(
    version_id: Annotated[str, typer.Argument(help="Saved version id")],
):
    """Delete a saved version."""
    setup_persistence_logger(LOGS_PATH / f"remove_{session_stamp()}", VITAE_DATA_PATH)
    store = create_json_repositories(VITAE_DATA_PATH).resume_versions
    if store.get_by_id(version_id) is None:
        typer.secho(f"Version '{version_id}' not found", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    store.remove(version_id)
    typer.secho(f"✓ Removed {version_id}", fg=typer.colors.GREEN)


@app.command("clear")
def clear_command(
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip the confirmation prompt"),
    ] = False,
):
    """Delete every saved version."""
    if not yes:
        typer.confirm("Delete all saved resume versions?", abort=True)

    setup_persistence_logger(LOGS_PATH / f"clear_{session_stamp()}", VITAE_DATA_PATH)
    create_json_repositories(VITAE_DATA_PATH).resume_versions.clear()
    typer.secho("✓ Cleared saved versions", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
