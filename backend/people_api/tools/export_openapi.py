"""Write the OpenAPI document built from the route table to a file.

Usage:
    people-api-openapi --output openapi.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from people_api.main import create_app

logger = logging.getLogger(__name__)


def build_document() -> dict:
    """OpenAPI schema of a freshly built app (same tables the server registers)."""
    return create_app().openapi()


def export(output: Path, indent: int = 2) -> Path:
    document = build_document()
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(document, ensure_ascii=False, indent=indent) + "\n", encoding="utf-8")
    logger.info(f"OpenAPI document written to {output}")
    return output


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Export the People API OpenAPI document")
    parser.add_argument("--output", "-o", default="openapi.json", help="Destination file")
    parser.add_argument("--indent", type=int, default=2)
    args = parser.parse_args(argv)

    path = export(Path(args.output), indent=args.indent)
    print(f"Wrote {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
