# SPDX-License-Identifier: MIT
#
#  █████╗ ██████╗  █████╗ ███████╗
# ██╔══██╗██╔══██╗██╔══██╗██╔════╝
# ███████║██████╔╝███████║███████╗
# ██╔══██║██╔══██╗██╔══██║╚════██║
# ██║  ██║██║  ██║██║  ██║███████║
# ╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
# Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>
#
# Licensed under the MIT License.
# See LICENSE and THIRD_PARTY_LICENSES for details.

"""Fixed-width text table renderer for report sections.

A section is its title line, a header row, a dash separator, one line per
result row and a closing blank line. Every cell is padded to its column
width and followed by a two-space gap; numeric cells are right-aligned.
"""

from __future__ import annotations

import re

from tga_report.sparql.client import ResultTable
from tga_report.sparql.processor import display_value

COLUMN_GAP = "  "

_NUMERIC = re.compile(r"-?[0-9]+(\.[0-9]+)?")


def is_numeric(text: str) -> bool:
    """Integer or decimal literal text, e.g. '42' or '-3.5'."""
    return _NUMERIC.fullmatch(text) is not None


def format_title(title: str) -> str:
    return f"=== {title} ==="


def clean_rows(table: ResultTable, marker: str) -> list[list[str]]:
    """Display text of every cell, columns in declared variable order."""
    return [
        [display_value(row.get(var), marker) for var in table.variables]
        for row in table.rows
    ]


def column_widths(header: list[str], rows: list[list[str]]) -> list[int]:
    """Widest of the header label and every cell, per column."""
    widths = [len(label) for label in header]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))
    return widths


def format_row(cells: list[str], widths: list[int]) -> str:
    parts: list[str] = []
    for cell, width in zip(cells, widths):
        if is_numeric(cell):
            parts.append(cell.rjust(width))
        else:
            parts.append(cell.ljust(width))
        parts.append(COLUMN_GAP)
    return "".join(parts)


def format_separator(widths: list[int]) -> str:
    return "".join("-" * (width + len(COLUMN_GAP)) for width in widths)


def render_table(table: ResultTable, marker: str) -> str:
    """Header, separator and data rows, terminated by one blank line."""
    rows = clean_rows(table, marker)
    widths = column_widths(table.variables, rows)

    lines = [format_row(table.variables, widths), format_separator(widths)]
    lines.extend(format_row(row, widths) for row in rows)
    lines.append("")
    return "\n".join(lines) + "\n"
