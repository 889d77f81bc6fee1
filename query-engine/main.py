# SPDX-License-Identifier: MIT
"""
█████╗ ██████╗  █████╗ ███████╗
██╔══██╗██╔══██╗██╔══██╗██╔════╝
███████║██████╔╝███████║███████╗
██╔══██║██╔══██╗██╔══██║╚════██║
██║  ██║██║  ██║██║  ██║███████║
╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>

Licensed under the MIT License.
See LICENSE and THIRD_PARTY_LICENSES for details.

The Game Awards 2020-2024 Query Report Engine

Loads the TGA ontology (RDF/XML) into an in-memory rdflib graph, runs the
six canned SPARQL report queries in order and writes every result set as
a fixed-width text table into a single report file.

Pipeline: Load -> Query -> Format -> Write

Usage: python main.py --config=../report.yaml
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from tga_report.config import load_config
from tga_report.logger import get_logger
from tga_report.pipeline import run_pipeline

log = get_logger("main")


def main() -> int:
    parser = argparse.ArgumentParser(
        prog="tga-report",
        description="Run the TGA ontology report: RDF → SPARQL → text tables",
    )
    parser.add_argument(
        "--config",
        type=Path,
        required=True,
        help="Path to report YAML (e.g. ../report.yaml)",
    )
    args = parser.parse_args()

    config_path = args.config.resolve()
    if not config_path.exists():
        log.error("Config file not found: %s", config_path)
        return 1

    cfg_result = load_config(config_path)
    if not cfg_result.ok:
        log.error(cfg_result.error)
        return 1

    log.info("Config: %s", config_path.name)

    result = run_pipeline(cfg_result.data)
    if not result.ok:
        log.error("Report failed (%s): %s", result.kind.value, result.error)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
