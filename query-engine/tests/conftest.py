"""
Shared fixtures for the report engine tests.

Graphs are built with rdflib, serialized as RDF/XML into tmp_path and
loaded back through the same code path the report uses.
"""
from pathlib import Path

import pytest
from rdflib import RDF, XSD, Graph, Literal, Namespace

from tga_report.config import (
    DEFAULT_NAMESPACE,
    OntologyConfig,
    OutputConfig,
    ReportConfig,
    SourceConfig,
)
from tga_report.graph import QueryContext

TGA = Namespace(DEFAULT_NAMESPACE)


class AwardsGraphBuilder:
    """Small helper for assembling TGA ontology graphs."""

    def __init__(self):
        self.graph = Graph()
        self.graph.bind("tga", TGA)

    def event(self, name, host=None, date=None, categories=()):
        event = TGA[name]
        self.graph.add((event, RDF.type, TGA.TGA))
        if host is not None:
            self.graph.add((event, TGA.Host, TGA[host]))
        if date is not None:
            self.graph.add((event, TGA.TGAEventDate, Literal(date, datatype=XSD.dateTime, normalize=False)))
        for category in categories:
            self.category(category)
            self.graph.add((event, TGA.hasCategory, TGA[category]))
        return self

    def category(self, name):
        self.graph.add((TGA[name], RDF.type, TGA.Category))
        return self

    def game(self, name, won=(), developer=None, genre=None):
        game = TGA[name]
        self.graph.add((game, RDF.type, TGA.Game))
        for category in won:
            self.graph.add((game, TGA.won, TGA[category]))
        if developer is not None:
            self.graph.add((game, TGA.Developer, Literal(developer, datatype=XSD.string)))
        if genre is not None:
            self.graph.add((game, TGA.Genre, Literal(genre)))
        return self

    def write(self, path: Path) -> Path:
        self.graph.serialize(destination=str(path), format="xml")
        return path


@pytest.fixture
def builder():
    """Fresh, empty graph builder."""
    return AwardsGraphBuilder()


@pytest.fixture
def awards_builder(builder):
    """Three ceremonies, six categories and four winning games.

    2020 presents four categories; The Last of Us Part II wins three of
    them and Ghost of Tsushima one. BestDebutIndie is only presented in
    2021 and BestVRGame never. The 2022 ceremony has no known date.
    """
    (
        builder
        .event(
            "TGA2020",
            host="Geoff_Keighley",
            date="2020-12-10T00:00:00",
            categories=["GameOfTheYear", "BestNarrative", "BestActionAdventure", "BestArtDirection"],
        )
        .event(
            "TGA2021",
            host="Geoff_Keighley",
            date="2021-12-09T00:00:00",
            categories=["BestDebutIndie"],
        )
        .event("TGA2022", host="Geoff_Keighley")
        .category("BestVRGame")
        .game(
            "TheLastOfUsPartII",
            won=["GameOfTheYear", "BestNarrative", "BestActionAdventure"],
            developer="Naughty Dog",
            genre="Action-adventure",
        )
        .game(
            "GhostOfTsushima",
            won=["BestArtDirection"],
            developer="Sucker Punch Productions",
            genre="Action-adventure",
        )
        .game(
            "UnchartedLegacy",
            won=["BestVRGame"],
            developer="Naughty Dog",
            genre="Action-adventure",
        )
        .game(
            "Kena",
            won=["BestDebutIndie"],
            developer="Ember Lab",
            genre="Platformer",
        )
    )
    return builder


@pytest.fixture
def ontology():
    return OntologyConfig(namespace=DEFAULT_NAMESPACE)


@pytest.fixture
def awards_context(awards_builder, ontology):
    """QueryContext over the awards graph, held in memory."""
    return QueryContext(graph=awards_builder.graph, ontology=ontology)


@pytest.fixture
def make_config(tmp_path, ontology):
    """Build a ReportConfig around a builder's graph written to tmp_path."""

    def _make(graph_builder, output_path=None):
        source = graph_builder.write(tmp_path / "TGAOntology.rdf")
        return ReportConfig(
            source=SourceConfig(path=source, format="xml"),
            ontology=ontology,
            output=OutputConfig(
                path=output_path or tmp_path / "query_results.txt",
                encoding="utf-8",
            ),
        )

    return _make
