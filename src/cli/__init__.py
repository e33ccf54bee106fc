"""CLI (typer + rich) que hace de front-end del dashboard."""
