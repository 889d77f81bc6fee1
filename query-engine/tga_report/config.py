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

"""Loads report.yaml into typed dataclasses.

Pure loader, no domain logic. Every key is optional and falls back to
the compiled-in defaults, so an empty file reproduces the stock report.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from tga_report.result import ErrorKind, Fail, Ok, Result

DEFAULT_SOURCE_PATH = "TGAOntology.rdf"
DEFAULT_SOURCE_FORMAT = "xml"
DEFAULT_NAMESPACE = (
    "http://www.semanticweb.org/lukas/ontologies/2025/4/TheGameAwards2020-2024#"
)
DEFAULT_OUTPUT_PATH = "query_results.txt"
DEFAULT_ENCODING = "utf-8"


# ── Source ─────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class SourceConfig:
    """Serialized RDF document to load. format=None lets rdflib guess."""
    path: Path
    format: str | None


# ── Ontology ───────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class OntologyConfig:
    namespace: str

    @property
    def fragment_marker(self) -> str:
        """Last path segment of the namespace, e.g. 'TheGameAwards2020-2024#'."""
        return self.namespace.rstrip("/").rsplit("/", 1)[-1]


# ── Output ─────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class OutputConfig:
    path: Path
    encoding: str


# ── Top-level ──────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class ReportConfig:
    source: SourceConfig
    ontology: OntologyConfig
    output: OutputConfig


# ── Loader ─────────────────────────────────────────────────────

def _resolve(base_dir: Path, value: str) -> Path:
    path = Path(value)
    return path if path.is_absolute() else base_dir / path


def default_config(base_dir: Path) -> ReportConfig:
    """Compiled-in configuration, paths relative to base_dir."""
    return ReportConfig(
        source=SourceConfig(
            path=_resolve(base_dir, DEFAULT_SOURCE_PATH),
            format=DEFAULT_SOURCE_FORMAT,
        ),
        ontology=OntologyConfig(namespace=DEFAULT_NAMESPACE),
        output=OutputConfig(
            path=_resolve(base_dir, DEFAULT_OUTPUT_PATH),
            encoding=DEFAULT_ENCODING,
        ),
    )


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    value = raw.get(name) or {}
    if not isinstance(value, dict):
        raise TypeError(f"'{name}' must be a mapping, got {type(value).__name__}")
    return value


def load_config(path: Path) -> Result[ReportConfig]:
    """Load report.yaml into ReportConfig. No validation beyond structure."""
    if not path.exists():
        return Fail(error=f"Config file not found: {path}", kind=ErrorKind.CONFIG)

    try:
        raw: dict[str, Any] = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        return Fail(
            error=f"YAML parse error: {exc}",
            kind=ErrorKind.CONFIG,
            context=str(path),
        )

    base_dir = path.resolve().parent

    try:
        if not isinstance(raw, dict):
            raise TypeError(f"top level must be a mapping, got {type(raw).__name__}")
        source = _section(raw, "source")
        ontology = _section(raw, "ontology")
        output = _section(raw, "output")

        config = ReportConfig(
            source=SourceConfig(
                path=_resolve(base_dir, str(source.get("path", DEFAULT_SOURCE_PATH))),
                format=source.get("format", DEFAULT_SOURCE_FORMAT),
            ),
            ontology=OntologyConfig(
                namespace=str(ontology.get("namespace", DEFAULT_NAMESPACE)),
            ),
            output=OutputConfig(
                path=_resolve(base_dir, str(output.get("path", DEFAULT_OUTPUT_PATH))),
                encoding=str(output.get("encoding", DEFAULT_ENCODING)),
            ),
        )
    except (KeyError, TypeError) as exc:
        return Fail(
            error=f"Config structure error: {exc}",
            kind=ErrorKind.CONFIG,
            context=str(path),
        )

    try:
        codecs.lookup(config.output.encoding)
    except LookupError:
        return Fail(
            error=f"Unknown output encoding: {config.output.encoding}",
            kind=ErrorKind.CONFIG,
            context=str(path),
        )

    return Ok(data=config)
