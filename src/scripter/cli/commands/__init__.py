"""Scripter CLI commands."""

from __future__ import annotations

from scripter.cli.commands.batch import batch_command
from scripter.cli.commands.convert import convert_command

__all__ = ["batch_command", "convert_command"]
