# SPDX-FileCopyrightText: © 2018 Bart Hanssens
# SPDX-License-Identifier: BSD-2-Clause

import json
from pathlib import Path
from urllib.parse import urlparse, unquote

from pyld import jsonld


RemoteSchemes = ("http", "https")


def is_remote(url):
    return urlparse(url).scheme in RemoteSchemes


def local_path(url, base_dir=None):
    """
    Map a file:// URL or a plain filesystem path onto a Path.
    Relative paths are resolved against base_dir when one is given.
    """
    parsed = urlparse(url)
    if parsed.scheme == "file":
        path = Path(unquote(parsed.path))
    else:
        path = Path(url)
    if not path.is_absolute() and base_dir is not None:
        path = Path(base_dir) / path
    return path


def resolve_context_references(doc, base_dir):
    """
    Return a copy of doc whose top level @context references to local
    files are absolute file:// URIs, resolved against base_dir.
    """
    def resolve(ctx):
        if isinstance(ctx, str) and not is_remote(ctx):
            return local_path(ctx, base_dir).resolve().as_uri()
        return ctx

    if not isinstance(doc, dict) or doc.get("@context") is None:
        return doc
    ctx = doc["@context"]
    doc = dict(doc)
    if isinstance(ctx, list):
        doc["@context"] = [resolve(c) for c in ctx]
    else:
        doc["@context"] = resolve(ctx)
    return doc


def local_document_loader(**kwargs):
    """
    Create a PyLD document loader that reads local documents from disk
    and hands everything else to PyLD's Requests-based loader.

    :param **kwargs: passed on to the Requests-based loader.

    :return: the RemoteDocument loader function.
    """
    remote_loader = None

    def loader(url, options=None):
        nonlocal remote_loader
        if is_remote(url):
            if remote_loader is None:
                remote_loader = jsonld.requests_document_loader(**kwargs)
            if options is None:
                return remote_loader(url)
            return remote_loader(url, options)

        path = local_path(url)
        try:
            with path.open(encoding="utf-8") as f:
                document = json.loads(f.read())
        except (OSError, ValueError) as cause:
            raise jsonld.JsonLdError(
                "Could not retrieve a JSON-LD document from the URL.",
                "jsonld.LoadDocumentError", {"url": url},
                code="loading document failed") from cause

        return {"contentType": "application/ld+json",
                "document": document,
                "contextUrl": None,
                "documentUrl": url}

    return loader
