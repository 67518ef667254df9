"""CLI del cliente (Typer + Rich)."""
