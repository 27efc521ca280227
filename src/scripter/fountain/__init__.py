"""Fountain markup generation."""

from __future__ import annotations

from .generator import format_element, generate_fountain

__all__ = ["format_element", "generate_fountain"]
