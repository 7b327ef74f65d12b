"""Interfaces layer for todopanel.

This layer contains adapters for external interactions:
- CLI: Command-line interface using Typer

The interfaces layer is responsible for:
- Accepting user input and validating it
- Calling the workspace
- Formatting output for the user
"""
