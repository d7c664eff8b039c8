"""Typer CLI and Rich presentation surfaces."""
