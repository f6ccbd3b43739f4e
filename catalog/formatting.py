"""Formatting helpers for department cards and detail pages."""

from __future__ import annotations

import html


def display_name(name: str) -> str:
    """Single-line form of a department name (card names may embed newlines)."""
    return name.replace("\n", " ")


def dataset_label(count: int, suffix: str = "") -> str:
    """Return e.g. ``"1 Dataset"``, ``"38 Datasets"`` or ``"0 Datasets Available"``."""
    label = f"{count} Dataset{'' if count == 1 else 's'}"
    return f"{label} {suffix}" if suffix else label


def additional_info(name: str) -> str:
    return (
        "This section could contain more details like key personnel, links to important resources, "
        f"and access to specific open datasets managed by the {display_name(name)}."
    )


def card_header_html(title: str, subtitle: str = "") -> str:
    """Opening markup of a card; file-supplied text is escaped."""
    return (
        '<div class="card">'
        f'<div class="card-title">{html.escape(title)}</div>'
        f'<div class="card-subtitle">{html.escape(subtitle)}</div>'
    )


def logo_placeholder_html(name: str) -> str:
    return f"<div class='logo-symbol'>{html.escape(name)}</div>"
