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
"""Fixed report queries and their text construction.

Each QuerySpec pairs a section title with a SPARQL body. The ontology
prefix block is prepended at render time and {{variable}} placeholders
in the body are replaced with the award-year window.
"""

from __future__ import annotations

from dataclasses import dataclass

XSD_NAMESPACE = "http://www.w3.org/2001/XMLSchema#"

AWARD_YEAR = 2020


@dataclass(frozen=True, slots=True)
class QuerySpec:
    """One report section: title + SPARQL body template."""
    title: str
    template: str


_YEAR_FILTER = (
    'FILTER(?date >= "{{year_start}}"^^xsd:dateTime'
    ' && ?date < "{{year_end}}"^^xsd:dateTime)'
)

ALL_EVENTS = QuerySpec(
    title="All Award Events with Optional Hosts and Dates",
    template="""\
SELECT ?event ?host ?date
WHERE {
  ?event a :TGA .
  OPTIONAL { ?event :Host ?host . }
  OPTIONAL { ?event :TGAEventDate ?date . }
}
ORDER BY ?event
""",
)

KNOWN_HOSTS = QuerySpec(
    title="Award Events with Known Hosts and Dates",
    template="""\
SELECT ?event ?host ?date
WHERE {
  ?event a :TGA .
  ?event :Host ?host .
  ?event :TGAEventDate ?date .
  FILTER(BOUND(?host) && BOUND(?date))
}
ORDER BY ?event
""",
)

MOST_AWARDED_GAME = QuerySpec(
    title="Query for most awarded game in {{year}}",
    template=f"""\
SELECT ?game (COUNT(?category) AS ?awardCount)
WHERE {{
  ?game a :Game ;
        :won ?category .
  ?event a :TGA ;
       :TGAEventDate ?date ;
       :hasCategory ?category .
  {_YEAR_FILTER}
}}
GROUP BY ?game
ORDER BY DESC(?awardCount)
LIMIT 1
""",
)

MISSING_CATEGORIES = QuerySpec(
    title="Categories Not Presented in {{year}}",
    template=f"""\
SELECT ?category
WHERE {{
  ?category a :Category .
  FILTER NOT EXISTS {{
    ?tga a :TGA ;
         :TGAEventDate ?date ;
         :hasCategory ?category .
    {_YEAR_FILTER}
  }}
}}
ORDER BY ?category
""",
)

TOP_DEVELOPER = QuerySpec(
    title="Developer with Most Awards",
    template="""\
SELECT ?developer (COUNT(DISTINCT ?game) AS ?awardCount)
WHERE {
  ?game a :Game ;
        :won ?category ;
        :Developer ?developerValue .
  BIND(str(?developerValue) AS ?developer)
}
GROUP BY ?developer
ORDER BY DESC(?awardCount)
LIMIT 1
""",
)

TOP_GENRE = QuerySpec(
    title="Genre with Highest Number of Award-Winning Titles",
    template="""\
SELECT ?genre (COUNT(DISTINCT ?game) AS ?winCount)
WHERE {
  ?game a :Game ;
        :won ?category ;
        :Genre ?genreValue .
  BIND(str(?genreValue) AS ?genre)
}
GROUP BY ?genre
ORDER BY DESC(?winCount)
LIMIT 1
""",
)

# Report order. Sections are written in exactly this sequence.
QUERIES: tuple[QuerySpec, ...] = (
    ALL_EVENTS,
    KNOWN_HOSTS,
    MOST_AWARDED_GAME,
    MISSING_CATEGORIES,
    TOP_DEVELOPER,
    TOP_GENRE,
)


def render_template(template: str, variables: dict[str, str]) -> str:
    """Replace all {{key}} placeholders in template with variable values."""
    rendered = template
    for key, value in variables.items():
        rendered = rendered.replace("{{" + key + "}}", value)
    return rendered


def get_template_variables(year: int = AWARD_YEAR) -> dict[str, str]:
    """Calendar-year window as xsd:dateTime lexical forms."""
    return {
        "year": str(year),
        "year_start": f"{year:04d}-01-01T00:00:00",
        "year_end": f"{year + 1:04d}-01-01T00:00:00",
    }


def build_prefixes(namespace: str) -> str:
    """Prefix block shared by every report query."""
    return (
        f"PREFIX : <{namespace}>\n"
        f"PREFIX xsd: <{XSD_NAMESPACE}>\n"
    )


def render_title(spec: QuerySpec) -> str:
    return render_template(spec.title, get_template_variables())


def render_query(spec: QuerySpec, namespace: str) -> str:
    """Full query text: prefix block followed by the rendered body."""
    body = render_template(spec.template, get_template_variables())
    return build_prefixes(namespace) + body
