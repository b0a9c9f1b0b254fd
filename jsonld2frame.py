# SPDX-FileCopyrightText: © 2018 Bart Hanssens
# SPDX-License-Identifier: BSD-2-Clause

"""
Convert a JSON-LD file to a more human friendly JSON-LD using a frame.

See https://www.w3.org/TR/json-ld11-framing/
"""

# Standard Library
import argparse
import logging
import sys
from pathlib import Path

# External Dependencies
from pyld import jsonld

# Internal Dependencies
from framing.common import load_json, dump_json
from framing.errors import FramingError
from framing.graphs import parse_jsonld, merge_graphs, to_jsonld
from framing.loaders import resolve_context_references

logger = logging.getLogger("jsonld2frame")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

USAGE_ERROR = -1
PROCESSING_ERROR = -2

FRAME_OPTIONS = {
    "omitDefault": True,
    "processingMode": "json-ld-1.1",
}


class FrameArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        self.print_help(sys.stderr)
        logger.error("Could not parse command line options: %s", message)
        sys.exit(USAGE_ERROR)


def build_parser():
    parser = FrameArgumentParser(
        prog="jsonld2frame",
        description="Convert a JSON-LD file to a more human friendly JSON-LD using a frame")
    parser.add_argument("-i", "--infile", dest="infile", required=True, help="input file")
    parser.add_argument("-f", "--frame", dest="frame", required=True, help="jsonld frame")
    parser.add_argument("-o", "--outfile", dest="outfile", required=True, help="output file")
    return parser


def frame_document(document, frame):
    try:
        return jsonld.frame(document, frame, dict(FRAME_OPTIONS))
    except jsonld.JsonLdError as e:
        raise FramingError("Unable to frame input.") from e


def framed_nodes(result):
    """
    Top level nodes of a framed result. A lone match may be returned
    without a @graph wrapper.
    """
    if "@graph" in result:
        return result["@graph"]
    return [{k: v for (k, v) in result.items() if k != "@context"}]


def convert(infile, frame, outfile):
    """
    Frame the JSON-LD in infile with the frame in frame and write the
    pretty printed result to outfile. outfile is only opened once the
    framed document is complete.

    Relative IRIs in infile resolve against infile's own URI, and
    relative @context references in frame against frame's directory.
    """
    infile, frame, outfile = Path(infile), Path(frame), Path(outfile)

    with open(infile, encoding="utf-8") as f:
        graph = parse_jsonld(f.read(), base=infile.resolve().as_uri())
    document = to_jsonld(merge_graphs(graph))
    frame_doc = resolve_context_references(load_json(frame), frame.parent)

    result = frame_document(document, frame_doc)
    for node in framed_nodes(result):
        logger.debug("Framed node keys: %s", sorted(node.keys()))

    content = dump_json(result)
    with open(outfile, "w", encoding="utf-8") as f:
        f.write(content)
    return result


def main(argv=None):
    logging.basicConfig(format=LOG_FORMAT, level=logging.INFO)
    args = build_parser().parse_args(argv)

    logger.info("Converting %s with frame %s to %s", args.infile, args.frame, args.outfile)
    try:
        convert(args.infile, args.frame, args.outfile)
    except Exception:
        logger.exception("Error processing")
        sys.exit(PROCESSING_ERROR)


if __name__ == "__main__":
    main()
