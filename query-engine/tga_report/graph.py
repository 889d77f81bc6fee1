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

"""Graph loader: reads the serialized ontology into an rdflib Graph.

The graph is populated once and then shared read-only by every query
through the QueryContext handle.
"""

from __future__ import annotations

from dataclasses import dataclass

import rdflib
from rdflib import Graph
from rdflib.util import guess_format

from tga_report.config import OntologyConfig, SourceConfig
from tga_report.logger import get_logger
from tga_report.result import ErrorKind, Fail, Ok, Result

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class QueryContext:
    """Loaded graph plus the ontology it is queried against."""

    graph: Graph
    ontology: OntologyConfig


def load_graph(source: SourceConfig) -> Result[Graph]:
    """Parse the source document. Missing or malformed input is a Load Error."""
    path = source.path
    if not path.is_file():
        return Fail(error=f"Ontology file not found: {path}", kind=ErrorKind.LOAD)

    rdf_format = source.format or guess_format(str(path))
    log.info("Loading graph from %s (format: %s)", path, rdf_format or "auto")

    # Literals keep their stored lexical form, e.g. "...Z" dateTimes, "007".
    graph = Graph()
    normalize = rdflib.NORMALIZE_LITERALS
    rdflib.NORMALIZE_LITERALS = False
    try:
        graph.parse(str(path), format=rdf_format)
    except Exception as exc:
        return Fail(
            error=f"RDF parse error: {type(exc).__name__}: {exc}",
            kind=ErrorKind.LOAD,
            context=str(path),
        )
    finally:
        rdflib.NORMALIZE_LITERALS = normalize

    log.info("Loaded %d triples", len(graph))
    return Ok(data=graph)
