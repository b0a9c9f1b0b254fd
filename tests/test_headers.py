from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent


@pytest.mark.parametrize("path", ["jsonld2frame.py", "framing/__init__.py", "framing/errors.py",
                                  "framing/graphs.py", "framing/loaders.py"])
def test_spdx_header(path):
    head = (ROOT / path).read_text(encoding="utf-8").splitlines()[:2]
    assert head == ["# SPDX-FileCopyrightText: © 2018 Bart Hanssens",
                    "# SPDX-License-Identifier: BSD-2-Clause"]
