#!/usr/bin/env python3
"""
Validate a master profile document before tailoring.

Usage:
    python scripts/validate_profile.py profile.yaml
    python scripts/validate_profile.py profile.json --lenient
"""

from pathlib import Path

import typer
from dotenv import load_dotenv

from tailor.contexts.profile.exceptions import ProfileValidationError
from tailor.contexts.profile.profile_data_structure import MasterProfile
from tailor.contexts.targeting.skill_ranker import flatten_skills

load_dotenv()

app = typer.Typer(help="Validate a master profile document.", add_completion=False)


@app.command()
def main(
    profile_path: Path = typer.Argument(..., help="Master profile document (.json/.yaml)"),
    lenient: bool = typer.Option(False, "--lenient", help="Fill missing fields instead of failing"),
):
    """Validate the profile and display its structure."""
    try:
        profile = MasterProfile.from_file(profile_path, strict=not lenient)
    except ProfileValidationError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Loading {profile_path}")

    typer.echo("\n=== Identity ===")
    typer.echo(f"  name: {profile.name or '(empty)'}")
    for field_name in ("email", "phone", "location"):
        typer.echo(f"  {field_name}: {getattr(profile, field_name) or '(none)'}")
    typer.echo(f"  links: {len(profile.links)}")
    typer.echo(f"  revision: {profile.revision}")

    typer.echo(f"\n=== Experience ({len(profile.experience)}) ===")
    for entry in profile.experience:
        current = " [current]" if entry.is_current else ""
        typer.echo(f"  {entry.id}: {entry.title} @ {entry.company}{current} ({len(entry.bullets)} bullets)")

    typer.echo(f"\n=== Projects ({len(profile.projects)}) ===")
    for entry in profile.projects:
        typer.echo(f"  {entry.id}: {entry.name} ({len(entry.bullets)} bullets)")

    typer.echo(f"\n=== Skills ({len(flatten_skills(profile.skills))} distinct) ===")
    for category, skills in profile.skills.categories():
        typer.echo(f"  {category}: {', '.join(skills) if skills else '(none)'}")

    typer.echo(
        f"\n=== Other ===\n  education: {len(profile.education)}, certificates: {len(profile.certificates)}, "
        f"awards: {len(profile.awards)}, extras: {len(profile.extras)}"
    )

    warnings = []
    if not profile.name:
        warnings.append("Profile has no name")
    if not profile.experience and not profile.projects:
        warnings.append("No experience or projects to tailor")
    empty = [e.id for e in list(profile.experience) + list(profile.projects) if not e.bullets]
    if empty:
        warnings.append(f"Entries without bullets: {', '.join(empty)}")

    if warnings:
        typer.echo("\n=== Warnings ===")
        for w in warnings:
            typer.echo(f"  ! {w}")

    typer.secho("\nProfile is valid", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
