# File: contact_scout/report/__init__.py
"""contact_scout.report: Генерация отчётов (JSON и HTML), используемая CLI и тестами."""

from __future__ import annotations

from .html_report import DEFAULT_TEMPLATE_DIR, render_html
from .json_report import render_json

__all__ = ["render_json", "render_html", "DEFAULT_TEMPLATE_DIR"]
