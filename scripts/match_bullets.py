#!/usr/bin/env python3
"""
Bullet Matching CLI

Scores master resume bullets against a job description and shows the ranking.

Commands:
    match   - Rank bullets against a job description
    samples - List the built-in sample job descriptions

Examples:\n

    match_bullets.py match --sample "Product Intern"        # Rank against a sample

    match_bullets.py match --job-file postings/helio.txt     # Rank against a file

    match_bullets.py match -t "SQL analyst, Operations" -a   # Show every bullet
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from omegaconf.errors import OmegaConfBaseException
from typing_extensions import Annotated

from vitae.contexts.intake import SAMPLE_JOB_DESCRIPTIONS, load_job_description
from vitae.contexts.persistence import MasterResumeStore
from vitae.contexts.persistence.master_resume import MASTER_RESUME_FILE
from vitae.contexts.targeting import (
    load_targeting_config,
    pick_initial_selections,
    score_bullets_against_job_description,
)
from vitae.contexts.targeting.logger import setup_targeting_logger
from vitae.utils.report_formatter import Column, TableFormatter, format_percentage
from vitae.utils.timestamp import session_stamp

load_dotenv()
VITAE_DATA_PATH = Path(os.getenv("VITAE_DATA_PATH", "outs/data"))
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Score resume bullets against a job description",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("match")
def match_command(
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
    resume_file: Annotated[
        Optional[Path],
        typer.Option("--resume", "-r", help="Master resume JSON (default: VITAE_DATA_PATH/master_resume.json)"),
    ] = None,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Targeting config YAML (default: TARGETING_CONFIG_PATH)"),
    ] = None,
    show_all: Annotated[
        bool,
        typer.Option("--all", "-a", help="Show every bullet, not only positive matches"),
    ] = False,
):
    """
    Rank master resume bullets against a job description.

    Bullets marked with * are in the initial selection a tailored draft
    would start from.

    Examples:\n

        $ match_bullets.py match --sample "Consulting Analyst"

        $ match_bullets.py match -f posting.txt --config configs/strict.yaml
    """
    try:
        job = load_job_description(text=text, job_file=job_file, sample=sample)
        config = load_targeting_config(config_path)
    except (ValueError, FileNotFoundError, OmegaConfBaseException) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    setup_targeting_logger(LOGS_PATH / f"match_{session_stamp()}", job_label=job.label)

    store = MasterResumeStore(resume_file or VITAE_DATA_PATH / MASTER_RESUME_FILE)
    resume = store.load_or_sample()

    matches = score_bullets_against_job_description(resume, job.text, config.scoring)
    selected = pick_initial_selections(matches, config.selection.limit)
    positive = [match for match in matches if match.score > 0]
    shown = matches if show_all else positive

    table = TableFormatter(
        [
            Column("", 1),
            Column("Score", 5, ">"),
            Column("Section", 10),
            Column("Entry", 24),
            Column("Bullet", 50),
            Column("Reasons", 40),
        ],
        total_width=135,
    )
    table.add_title(f"Bullet matches for {job.label} ({resume.version_name})")
    table.add_table_header()
    for match in shown:
        table.add_row(
            [
                "*" if match.bullet_id in selected else "",
                match.score,
                match.section_key,
                match.entry_title,
                match.bullet_text,
                "; ".join(match.reasons) or "-",
            ]
        )
    table.add_text()
    table.add_text(
        f"{len(positive)}/{len(matches)} bullets matched "
        f"({format_percentage(len(positive), len(matches))}); {len(selected)} selected"
    )
    typer.echo(table.render())

    if not matches:
        typer.secho("Resume has no experience, project or leadership bullets", fg=typer.colors.YELLOW, err=True)


@app.command("samples")
def samples_command():
    """List the built-in sample job descriptions."""
    table = TableFormatter([Column("Label", 22), Column("Company", 20), Column("Role", 30)], total_width=74)
    table.add_table_header()
    for sample in SAMPLE_JOB_DESCRIPTIONS:
        table.add_row([sample.label, sample.company, sample.role])
    typer.echo(table.render())


if __name__ == "__main__":
    app()
