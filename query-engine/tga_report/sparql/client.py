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
"""SPARQL executor against the in-memory rdflib graph.

Evaluates query text and returns the rows in evaluator order. Every query
orders its own results, so rows are never re-sorted here.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from rdflib.term import Node

from tga_report.graph import QueryContext
from tga_report.logger import get_logger
from tga_report.result import ErrorKind, Fail, Ok, Result

log = get_logger(__name__)

ResultRow = dict[str, Node | None]


@dataclass
class ResultTable:
    """Projected variables in declared order plus rows keyed by variable."""

    variables: list[str]
    rows: list[ResultRow] = field(default_factory=list)


def execute_query(context: QueryContext, query: str) -> Result[ResultTable]:
    """Evaluate a SELECT query and collect its rows. Unbound cells are None."""
    log.info("SPARQL query (%d bytes)", len(query.encode("utf-8")))

    try:
        results = context.graph.query(query)
        variables = [str(var) for var in results.vars or []]
        rows = [dict(zip(variables, row)) for row in results]
    except Exception as exc:
        return Fail(
            error=f"SPARQL query failed: {type(exc).__name__}: {exc}",
            kind=ErrorKind.QUERY,
            context=query[:200],
        )

    log.info("SPARQL returned %d rows", len(rows))
    return Ok(data=ResultTable(variables=variables, rows=rows))
