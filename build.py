#!/usr/bin/env python3
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
"""Build the query report from the report.yaml definition.

Usage:
    python build.py
    python build.py --output dist/query_results.txt
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Engine lives in query-engine/
_ENGINE_DIR = Path(__file__).resolve().parent / "query-engine"
sys.path.insert(0, str(_ENGINE_DIR))

from tga_report.config import load_config
from tga_report.logger import get_logger
from tga_report.pipeline import run_pipeline

log = get_logger("build")


def main() -> int:
    parser = argparse.ArgumentParser(
        prog="build",
        description="Build the TGA query report from report.yaml",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Report file to write (default: output.path from report.yaml)",
    )
    args = parser.parse_args()

    report_def = Path(__file__).resolve().parent / "report.yaml"

    cfg_result = load_config(report_def)
    if not cfg_result.ok:
        log.error(cfg_result.error)
        return 1

    output_path = args.output.resolve() if args.output else None

    result = run_pipeline(cfg_result.data, output_path=output_path)
    if not result.ok:
        log.error("Report failed (%s): %s", result.kind.value, result.error)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
