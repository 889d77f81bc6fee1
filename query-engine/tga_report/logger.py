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

"""Structured logger with per-section row counters and final summary.

Collects the row count of every report section so the orchestrator
can print a summary block once the report file is closed.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

_FMT = "%(asctime)s [%(levelname)s] %(name)s — %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a stdlib logger configured with a consistent format."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FMT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


@dataclass
class SectionCounter:
    """Outcome of a single report section."""

    title: str
    rows: int = 0
    failed: bool = False


@dataclass
class ReportSummary:
    """Accumulates section outcomes in the order they were written."""

    sections: dict[str, SectionCounter] = field(default_factory=dict)

    def counter(self, title: str) -> SectionCounter:
        """Get or create the counter for a titled section."""
        if title not in self.sections:
            self.sections[title] = SectionCounter(title=title)
        return self.sections[title]

    @property
    def total_rows(self) -> int:
        return sum(s.rows for s in self.sections.values())

    def report(self) -> str:
        """Format a human-readable summary block."""
        lines: list[str] = ["", "Report Summary", "=" * 40]
        for section in self.sections.values():
            if section.failed:
                lines.append(f"{section.title}: FAILED")
            else:
                noun = "row" if section.rows == 1 else "rows"
                lines.append(f"{section.title}: {section.rows} {noun}")
        lines.append(f"Total: {self.total_rows} rows")
        lines.append("=" * 40)
        return "\n".join(lines)
