"""Entry point for ``python -m git_release``."""

from git_release.configuration.cli import typer_app

typer_app(prog_name="git-release")
