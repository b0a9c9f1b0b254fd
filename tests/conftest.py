import json

import pytest


EX = "http://example.org/"

Context = {"ex": EX}

People = {
    "@context": Context,
    "@graph": [
        {"@id": "ex:alice", "@type": "ex:Person", "ex:name": "Alice", "ex:age": 42,
         "ex:address": {"ex:city": "Brussels"}},
        {"@id": "ex:bob", "@type": "ex:Person", "ex:name": "Bob"},
        {"@id": "ex:acme", "@type": "ex:Company", "ex:name": "ACME"},
    ]
}

# statements about alice are split over two named graphs
NamedGraphs = {
    "@context": Context,
    "@graph": [
        {"@id": "ex:g1", "@graph": [{"@id": "ex:alice", "@type": "ex:Person"}]},
        {"@id": "ex:g2", "@graph": [{"@id": "ex:alice", "ex:name": "Alice"}]},
    ]
}

NameFrame = {
    "@context": Context,
    "@type": "ex:Person",
    "@explicit": True,
    "ex:name": {},
}


def write_json(path, doc):
    path.write_text(json.dumps(doc), encoding="utf-8")
    return path


@pytest.fixture
def people_file(tmp_path):
    return write_json(tmp_path / "people.jsonld", People)


@pytest.fixture
def named_graphs_file(tmp_path):
    return write_json(tmp_path / "graphs.jsonld", NamedGraphs)


@pytest.fixture
def name_frame_file(tmp_path):
    return write_json(tmp_path / "frame.jsonld", NameFrame)


@pytest.fixture
def outfile(tmp_path):
    return tmp_path / "out.jsonld"
