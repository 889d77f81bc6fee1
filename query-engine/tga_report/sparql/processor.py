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
"""SPARQL result processor: turns bound RDF terms into display text.

IRIs are shortened from their structured form. Literals are rendered to
the engine-neutral text form ``lex``, ``lex@lang`` or ``lex^^datatype``
and then go through the text cleanup rules:

  1. text containing the ontology fragment marker keeps only what follows
     the final ``#``
  2. a ``^^`` datatype annotation is cut off
  3. one layer of enclosing double quotes is removed

Unbound variables display as ``null``.
"""

from __future__ import annotations

from rdflib.term import BNode, Literal, Node, URIRef

NULL_TEXT = "null"

_DATATYPE_SEP = "^^"
_QUOTE = '"'


def clean_value(text: str, marker: str) -> str:
    """Apply the text cleanup rules to an already-serialized value."""
    if marker and marker in text:
        text = text[text.rfind("#") + 1:]

    cut = text.find(_DATATYPE_SEP)
    if cut != -1:
        text = text[:cut]

    if len(text) >= 2 and text.startswith(_QUOTE) and text.endswith(_QUOTE):
        text = text[1:-1]
    return text


def literal_text(literal: Literal) -> str:
    """Text form of a literal: lexical form plus language tag or datatype."""
    lexical = str(literal)
    if literal.language:
        return f"{lexical}@{literal.language}"
    if literal.datatype is not None:
        return f"{lexical}{_DATATYPE_SEP}{literal.datatype}"
    return lexical


def display_value(term: Node | None, marker: str) -> str:
    """Display text for one result cell."""
    if term is None:
        return NULL_TEXT
    if isinstance(term, URIRef):
        iri = str(term)
        if marker and marker in iri:
            return iri[iri.rfind("#") + 1:]
        return iri
    if isinstance(term, Literal):
        return clean_value(literal_text(term), marker)
    if isinstance(term, BNode):
        return str(term)
    return clean_value(str(term), marker)
