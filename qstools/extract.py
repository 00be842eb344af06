"""Collect translatable message templates from i18n calls in Python sources."""

from __future__ import annotations

import argparse
import ast
import json
import sys
from collections.abc import Iterator
from pathlib import Path

__all__ = ["extract_messages", "main"]

_PACKAGE_NAME = "i18n"
_WRITER_FIRST = "fprintf"
_DEFAULT_OUTPUT = "../../translations/en_US/data.json"


def _templates(tree: ast.AST) -> Iterator[str]:
    for node in ast.walk(tree):
        if not isinstance(node, ast.Call):
            continue
        func = node.func
        if not isinstance(func, ast.Attribute):
            continue
        if not isinstance(func.value, ast.Name) or func.value.id != _PACKAGE_NAME:
            continue
        if not node.args:
            continue

        position = 1 if func.attr == _WRITER_FIRST else 0
        if position >= len(node.args):
            continue
        arg = node.args[position]
        if isinstance(arg, ast.Constant) and isinstance(arg.value, str):
            yield arg.value


def extract_messages(directory: str | Path) -> dict[str, str]:
    """Map every literal template passed to ``i18n.*`` calls to itself.

    Only the Python files directly inside ``directory`` are read; for
    ``i18n.fprintf`` the second argument is the template, otherwise the first.
    A file that does not parse raises SyntaxError.
    """
    data: dict[str, str] = {}
    for entry in sorted(Path(directory).iterdir()):
        if entry.is_dir() or entry.suffix != ".py":
            continue
        source = entry.read_text(encoding="utf-8")
        tree = ast.parse(source, filename=str(entry))
        for template in _templates(tree):
            data[template] = template
    return data


def main(argv: list[str] | None = None) -> int:
    """Extract message templates from a directory and write them as JSON."""
    parser = argparse.ArgumentParser(
        description="Extract i18n message templates into a JSON catalogue."
    )
    parser.add_argument("directory", nargs="?", default=".")
    parser.add_argument("-o", "--output", default=_DEFAULT_OUTPUT)
    args = parser.parse_args(argv)

    try:
        data = extract_messages(args.directory)
        content = json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False)
        Path(args.output).write_text(content, encoding="utf-8")
    except (OSError, SyntaxError, UnicodeDecodeError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())