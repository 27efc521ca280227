"""Utility helpers for Scripter."""

from __future__ import annotations

from .file_writer import generate_output_path, write_fountain_file

__all__ = ["generate_output_path", "write_fountain_file"]
