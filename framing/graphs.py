# SPDX-FileCopyrightText: © 2018 Bart Hanssens
# SPDX-License-Identifier: BSD-2-Clause

import json
import logging

from rdflib import ConjunctiveGraph, Graph
from rdflib.compare import to_canonical_graph

from .errors import MalformedInputError

logger = logging.getLogger(__name__)


def parse_jsonld(data, base):
    """
    Parse a JSON-LD document into a context-aware graph, so that
    named graphs in the input survive as separate contexts.

    Relative IRIs resolve against base, normally the input file's URI.
    """
    graph = ConjunctiveGraph()
    try:
        graph.parse(data=data, format="json-ld", publicID=base)
    except Exception as e:
        raise MalformedInputError("Unable to parse input as JSON-LD.") from e
    logger.debug("Parsed %d statements in %d graphs", len(graph), len(list(graph.contexts())))
    return graph


def statement_key(triple):
    return tuple(term.n3() for term in triple)


def merge_graphs(graph):
    """
    Copy every statement of graph into one fresh Graph, dropping the
    named graph each statement came from.

    NOTE: compatibility shim. Some framing implementations do not merge
    named graphs before matching the frame, so nodes split across graphs
    come out incomplete. Remove once framing groups statements correctly.

    Blank nodes are given canonical labels so repeated runs over the same
    input serialize identically.
    """
    merged = Graph()
    for (s, p, o) in graph.triples((None, None, None)):
        merged.add((s, p, o))

    canonical = Graph()
    for triple in sorted(to_canonical_graph(merged), key=statement_key):
        canonical.add(triple)
    logger.debug("Merged into %d statements", len(canonical))
    return canonical


def sort_key(value):
    return json.dumps(value, sort_keys=True, ensure_ascii=False)


def normalize(doc):
    """
    Put a JSON-LD document in a fixed order: objects by key, arrays by
    content. @list arrays are ordered data and keep their order.
    """
    if isinstance(doc, list):
        return sorted((normalize(item) for item in doc), key=sort_key)
    if isinstance(doc, dict):
        result = {}
        for key in sorted(doc):
            value = doc[key]
            if key == "@list" and isinstance(value, list):
                result[key] = [normalize(item) for item in value]
            else:
                result[key] = normalize(value)
        return result
    return doc


def to_jsonld(graph):
    "Serialize graph as JSON-LD and read it back as plain JSON, in a fixed order."
    return normalize(json.loads(graph.serialize(format="json-ld")))
