"""Shared CLI output helpers."""

import json

import click


def print_json(data: dict) -> None:
    """Print JSON data formatted."""
    click.echo(json.dumps(data, indent=2, sort_keys=True))


def print_error(message: str) -> None:
    """Print error message in red on stderr."""
    click.echo(click.style(f"Error: {message}", fg="red"), err=True)


def print_field(label: str, value: str) -> None:
    """Print a blue label and green value."""
    click.echo(f"{click.style(label, fg='blue')}: {click.style(value, fg='green')}")
