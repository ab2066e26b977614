#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
fake_realfavicon – Stand-in for ``npx realfavicon`` used by the test-suite.

Usage (same argument order as the real tool):

    fake_realfavicon.py generate SOURCE SETTINGS METADATA DEST
    fake_realfavicon.py inject METADATA OUTPUT_DIR PAGE...

Environment:
    FAKE_REALFAVICON_LOG    Append one JSON line per invocation to this file.
    FAKE_REALFAVICON_MODE   Failure injection:
                              fail-generate       generate exits 2
                              no-metadata         generate succeeds but writes no metadata
                              bad-metadata        generate writes invalid JSON
                              fail-inject:TOKEN   inject exits 3 when a page path contains TOKEN

Injection is idempotent: markup already present is not inserted twice, but
the page is always rewritten, like the real tool does.
"""
from __future__ import annotations

import json
import os
import re
import sys
from pathlib import Path

MARKUPS = [
    '<link rel="icon" type="image/png" href="/favicon/favicon-96x96.png" sizes="96x96" />',
    '<link rel="shortcut icon" href="/favicon/favicon.ico" />',
]
_HEAD_CLOSE = re.compile(r"</head\s*>", re.I)


def _log(argv: list[str]) -> None:
    target = os.getenv("FAKE_REALFAVICON_LOG")
    if not target:
        return
    with open(target, "a", encoding="utf-8") as fh:
        fh.write(json.dumps({"argv": argv}) + "\n")


def _generate(source: str, settings: str, metadata: str, dest: str) -> int:
    mode = os.getenv("FAKE_REALFAVICON_MODE", "")
    if mode == "fail-generate":
        print("fake_realfavicon: generation failed", file=sys.stderr)
        return 2
    out = Path(dest)
    out.mkdir(parents=True, exist_ok=True)
    (out / "favicon.ico").write_bytes(Path(source).read_bytes())
    (out / "favicon-96x96.png").write_bytes(Path(source).read_bytes())
    if mode == "no-metadata":
        return 0
    if mode == "bad-metadata":
        Path(metadata).write_text("{not json", encoding="utf-8")
        return 0
    json.loads(Path(settings).read_text(encoding="utf-8"))
    Path(metadata).write_text(json.dumps({"markups": MARKUPS}), encoding="utf-8")
    return 0


def _inject(metadata: str, output_dir: str, pages: list[str]) -> int:
    mode = os.getenv("FAKE_REALFAVICON_MODE", "")
    if mode.startswith("fail-inject:"):
        token = mode.split(":", 1)[1]
        if any(token in p for p in pages):
            print(f"fake_realfavicon: cannot inject into {token}", file=sys.stderr)
            return 3
    markups = json.loads(Path(metadata).read_text(encoding="utf-8"))["markups"]
    block = "\n".join(markups) + "\n"
    for page in pages:
        src = Path(page)
        text = src.read_text(encoding="utf-8")
        if markups[0] not in text:
            m = _HEAD_CLOSE.search(text)
            if m:
                text = text[: m.start()] + block + text[m.start():]
        (Path(output_dir) / src.name).write_text(text, encoding="utf-8")
    return 0


def main(argv: list[str]) -> int:
    _log(argv)
    if len(argv) == 5 and argv[0] == "generate":
        return _generate(*argv[1:])
    if len(argv) >= 4 and argv[0] == "inject":
        return _inject(argv[1], argv[2], argv[3:])
    print(f"fake_realfavicon: bad usage {argv!r}", file=sys.stderr)
    return 64


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
