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

"""Pipeline orchestrator: load, query, format, write.

  1. Load: parse the ontology into a graph (Load Error aborts before any
     query runs)
  2. For every report query, in declared order: write the section title,
     evaluate the query, append the rendered table

The report file is opened once and closed when all sections are written
or the first failure stops the run. Sections written before a failure
stay in the file.
"""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

from tga_report.config import ReportConfig
from tga_report.formatter import format_title, render_table
from tga_report.graph import QueryContext, load_graph
from tga_report.logger import ReportSummary, get_logger
from tga_report.result import ErrorKind, Fail, Ok, Result
from tga_report.sparql.client import execute_query
from tga_report.sparql.queries import QUERIES, QuerySpec, render_query, render_title

log = get_logger(__name__)


def _run_section(
    context: QueryContext,
    spec: QuerySpec,
    out: TextIO,
    summary: ReportSummary,
) -> Result[int]:
    """Write one titled section. Returns the number of result rows."""
    title = render_title(spec)
    counter = summary.counter(title)
    log.info("── Section: %s ──", title)

    out.write(format_title(title) + "\n")

    query_result = execute_query(context, render_query(spec, context.ontology.namespace))
    if not query_result.ok:
        counter.failed = True
        return Fail(
            error=f"Section '{title}' failed: {query_result.error}",
            kind=query_result.kind,
            context=query_result.context,
        )

    table = query_result.data
    out.write(render_table(table, context.ontology.fragment_marker))
    counter.rows = len(table.rows)
    return Ok(data=counter.rows)


def run_pipeline(config: ReportConfig, output_path: Path | None = None) -> Result[ReportSummary]:
    """Run the full report: load → query → format → write.

    Args:
        config: Loaded report configuration.
        output_path: Overrides config.output.path when given.
    """
    summary = ReportSummary()
    target = output_path or config.output.path

    # 1. Load
    graph_result = load_graph(config.source)
    if not graph_result.ok:
        log.error("Load failed: %s", graph_result.error)
        return graph_result  # type: ignore[return-value]

    context = QueryContext(graph=graph_result.data, ontology=config.ontology)
    log.info("Output: %s", target)

    # 2. Query + write
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", encoding=config.output.encoding) as out:
            for spec in QUERIES:
                section_result = _run_section(context, spec, out, summary)
                if not section_result.ok:
                    log.error("Query failed: %s", section_result.error)
                    log.info(summary.report())
                    return section_result  # type: ignore[return-value]
    except (OSError, LookupError) as exc:
        log.info(summary.report())
        return Fail(
            error=f"Error writing to file: {exc}",
            kind=ErrorKind.WRITE,
            context=str(target),
        )

    log.info(summary.report())
    return Ok(data=summary)
