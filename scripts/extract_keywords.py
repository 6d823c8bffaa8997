#!/usr/bin/env python3
"""
Inspect the keyword set extracted from a job description.

Usage:
    python scripts/extract_keywords.py --job jobs/data_engineer.md
    python scripts/extract_keywords.py --jd-text "Python engineer for data pipelines" --top 10
    python scripts/extract_keywords.py --job jobs/data_engineer.md --log-dir outs/logs/keywords
"""

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from tailor.contexts.intake.exceptions import JobInputError
from tailor.contexts.intake.job_input import JobInput
from tailor.contexts.intake.keyword_extractor import build_tokenizer, extract_keywords
from tailor.contexts.intake.logger import setup_intake_logger
from tailor.contexts.rendering.preview_formatter import format_keyword_table
from tailor.contexts.targeting.composer import best_role_phrase
from tailor.contexts.targeting.config_resolver import load_targeting_config
from tailor.contexts.targeting.exceptions import TargetingConfigError
from tailor.utils.logger import console_only

load_dotenv()

app = typer.Typer(help="Show the weighted keywords extracted from a job description.", add_completion=False)


@app.command()
def main(
    job: Annotated[Optional[Path], typer.Option("--job", "-j", help="Job file")] = None,
    jd_text: Annotated[Optional[str], typer.Option("--jd-text", help="Job description text")] = None,
    top: Annotated[int, typer.Option("--top", "-n", help="Number of keywords to show", min=1)] = 25,
    config: Annotated[Optional[Path], typer.Option("--config", "-c", help="Targeting config YAML")] = None,
    log_dir: Annotated[Optional[Path], typer.Option("--log-dir", help="Write a session log here")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logs on the console")] = False,
):
    """Extract and display keywords, phrases and role phrases."""
    if log_dir is not None:
        setup_intake_logger(log_dir)
    else:
        console_only(verbose)

    try:
        targeting_config = load_targeting_config(config)
        job_input = JobInput.from_file(job) if job is not None else JobInput.from_text(jd_text)
    except (JobInputError, TargetingConfigError) as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    keywords = extract_keywords(
        job_input.jd_text,
        phrase_weight_multiplier=targeting_config.phrase_weight_multiplier,
        proper_noun_bonus=targeting_config.proper_noun_bonus,
        extra_phrases=targeting_config.extra_phrases,
        tokenizer=build_tokenizer(
            targeting_config.min_token_length,
            targeting_config.use_stemming,
            targeting_config.extra_stopwords,
        ),
    )

    if not keywords:
        typer.echo("No keywords found (empty job description?)")
        raise typer.Exit(0)

    typer.echo(f"\n=== Keywords ({len(keywords)}, showing {min(top, len(keywords))}) ===")
    typer.echo(format_keyword_table([(keywords.display(term), weight) for term, weight in keywords.top(top)]))

    if keywords.phrases:
        typer.echo("\n=== Phrases ===")
        for term in keywords:
            if term in keywords.phrases:
                typer.echo(f"  {keywords.display(term)}")

    typer.echo("\n=== Role phrases ===")
    if keywords.role_phrases:
        for term, count in keywords.role_phrases.items():
            typer.echo(f"  {keywords.display_role(term)} (x{count})")
        typer.echo(f"\nDerived title: {best_role_phrase(keywords)}")
    else:
        typer.echo("  None")


if __name__ == "__main__":
    app()
