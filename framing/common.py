import json

from .errors import MalformedInputError


INDENT = 4


def load_json(path):
    with open(path, encoding="utf-8") as f:
        try:
            return json.loads(f.read())
        except ValueError as e:
            raise MalformedInputError("Unable to parse {path} as JSON.".format(path=path)) from e


def dump_json(doc):
    return json.dumps(doc, indent=INDENT, ensure_ascii=False) + "\n"
