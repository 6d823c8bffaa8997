#!/usr/bin/env python3
"""
Tailor a master profile to a job description.

Loads a master profile document (JSON or YAML) and a job description, runs the
tailoring engine, and prints or writes the tailored preview.

Usage:
    python scripts/tailor_resume.py profile.yaml --job jobs/data_engineer.md
    python scripts/tailor_resume.py profile.json --jd-text "Python engineer for data pipelines"
    python scripts/tailor_resume.py profile.yaml --job job.json --format json --output out.json
    python scripts/tailor_resume.py profile.yaml --job job.md --max-bullets 3 --log-dir outs/logs/run1
"""

import os
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from tailor.contexts.intake.exceptions import JobInputError
from tailor.contexts.intake.job_input import JobInput
from tailor.contexts.profile.exceptions import ProfileValidationError
from tailor.contexts.profile.profile_data_structure import MasterProfile
from tailor.contexts.rendering.preview_formatter import (
    format_preview_markdown,
    format_preview_plaintext,
)
from tailor.contexts.targeting.config_resolver import load_targeting_config
from tailor.contexts.targeting.engine import tailor_resume
from tailor.contexts.targeting.exceptions import TargetingConfigError
from tailor.contexts.targeting.logger import setup_targeting_logger
from tailor.utils.logger import console_only

load_dotenv()

app = typer.Typer(
    help="Generate a tailored resume preview from a master profile and a job description",
    add_completion=False,
)


class OutputFormat(str, Enum):
    markdown = "markdown"
    plaintext = "plaintext"
    json = "json"


def configure_logging(log_dir: Optional[Path], profile_path: Path, verbose: bool) -> Optional[Path]:
    """
    Route logs to a session directory, or keep the console quiet.

    Uses --log-dir if given, else LOGS_PATH from the environment (one
    timestamped directory per run), else console-only warnings.
    """
    if log_dir is None and os.getenv("LOGS_PATH"):
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_dir = Path(os.getenv("LOGS_PATH")) / f"tailor_{timestamp}"

    if log_dir is not None:
        return setup_targeting_logger(log_dir, profile_path)

    console_only(verbose)
    return None


@app.command()
def main(
    profile_path: Annotated[Path, typer.Argument(help="Master profile document (.json/.yaml)")],
    job: Annotated[
        Optional[Path], typer.Option("--job", "-j", help="Job file (.json/.yaml structured, else raw text)")
    ] = None,
    jd_text: Annotated[Optional[str], typer.Option("--jd-text", help="Job description text")] = None,
    job_title: Annotated[Optional[str], typer.Option("--job-title", help="Explicit target job title")] = None,
    company_website: Annotated[
        Optional[str], typer.Option("--company-website", help="Company website shown in the header")
    ] = None,
    output_format: Annotated[
        OutputFormat, typer.Option("--format", "-f", help="Output format")
    ] = OutputFormat.markdown,
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Write to file instead of stdout")] = None,
    max_bullets: Annotated[
        Optional[int], typer.Option("--max-bullets", help="Bullet cap per entry", min=0)
    ] = None,
    max_total_bullets: Annotated[
        Optional[int], typer.Option("--max-total-bullets", help="Bullet cap across all entries", min=0)
    ] = None,
    config: Annotated[Optional[Path], typer.Option("--config", "-c", help="Targeting config YAML")] = None,
    log_dir: Annotated[Optional[Path], typer.Option("--log-dir", help="Write a session log here")] = None,
    lenient: Annotated[
        bool, typer.Option("--lenient", help="Fill missing profile fields instead of failing")
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logs on the console")] = False,
):
    """Tailor PROFILE_PATH to a job description and print the preview."""
    if job is not None and jd_text is not None:
        raise typer.BadParameter("Use either --job or --jd-text, not both")

    log_file = configure_logging(log_dir, profile_path, verbose)

    overrides = []
    if max_bullets is not None:
        overrides.append(f"max_bullets_per_entry={max_bullets}")
    if max_total_bullets is not None:
        overrides.append(f"max_total_bullets={max_total_bullets}")

    try:
        targeting_config = load_targeting_config(config, overrides)
        profile = MasterProfile.from_file(profile_path, strict=not lenient)
        job_input = JobInput.from_file(job) if job is not None else JobInput.from_text(jd_text)
    except (ProfileValidationError, JobInputError, TargetingConfigError) as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    # Command-line values win over the job file
    if job_title or company_website:
        job_input = JobInput.from_text(
            job_input.jd_text,
            job_title=job_title or job_input.job_title,
            company_website=company_website or job_input.company_website,
        )

    if job_input.is_empty:
        typer.secho(
            "No job description given; keeping entered order everywhere", fg=typer.colors.YELLOW, err=True
        )

    resume = tailor_resume(profile, job_input, targeting_config)

    if output_format == OutputFormat.json:
        rendered = resume.to_json() + "\n"
    elif output_format == OutputFormat.plaintext:
        rendered = format_preview_plaintext(resume, profile, job_input)
    else:
        rendered = format_preview_markdown(resume, profile, job_input)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(rendered, encoding="utf-8")
        typer.secho(f"Wrote {output_format.value} preview to {output}", fg=typer.colors.GREEN, err=True)
    else:
        typer.echo(rendered, nl=False)

    if log_file is not None:
        typer.echo(f"Log: {log_file}", err=True)


if __name__ == "__main__":
    app()
