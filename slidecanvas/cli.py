import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from slidecanvas.config.logging_config import apply_logging_config
from slidecanvas.models.slide import PresentationDocument
from slidecanvas.services.scene_builder import SceneBuilder


def _load_document(path: Path, components_only: bool) -> PresentationDocument:
    data: Any = json.loads(path.read_text(encoding="utf-8"))
    if components_only:
        # Flat component list, or a document whose slides are ignored
        if isinstance(data, list):
            return PresentationDocument(components=data)
        return PresentationDocument.model_validate({"components": data.get("components", [])})
    return PresentationDocument.model_validate(data)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Convert a parsed presentation JSON document into a canvas scene")
    parser.add_argument("document", help="Path to the parsed presentation JSON")
    parser.add_argument("--out", default=None, help="Write the scene JSON here (default: stdout)")
    parser.add_argument("--log-level", default=None, help="Override the log level (DEBUG, INFO, WARNING)")
    parser.add_argument("--components-only", action="store_true",
                        help="Draw top-level components without slide frames")
    args = parser.parse_args(argv)

    load_dotenv()
    apply_logging_config(level=args.log_level)

    doc_path = Path(args.document).resolve()
    if not doc_path.exists():
        print(f"[NG] document not found: {doc_path}", file=sys.stderr)
        return 2

    try:
        document = _load_document(doc_path, args.components_only)
    except (json.JSONDecodeError, ValidationError, AttributeError) as e:
        print(f"[NG] invalid presentation document: {e}", file=sys.stderr)
        return 2

    builder = SceneBuilder()
    result = asyncio.run(builder.build(document))

    payload = builder.scene.to_payload()
    payload["diagnostics"] = result.diagnostics
    payload["stats"] = result.stats
    text = json.dumps(payload, indent=2)

    if args.out:
        out_path = Path(args.out).resolve()
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text, encoding="utf-8")
    else:
        print(text)

    print(
        f"[OK] {len(payload['shapes'])} shapes, {len(payload['assets'])} assets, "
        f"{len(result.diagnostics)} diagnostics",
        file=sys.stderr,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
