"""Command line: print the colliders of an image as JSON.

    collider-gen sprite.png --kind convex_hull --multi
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from collider_gen.engine.config import PipelineConfig
from collider_gen.engine.mask import UnsupportedFormat
from collider_gen.engine.pipeline import Pipeline
from collider_gen.engine.shapes import ShapeKind
from collider_gen.models.responses import ColliderResponse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="collider-gen",
        description="Generate 2D collision geometry from an image's transparency.",
    )
    parser.add_argument("image", help="Path to an image with alpha or luminance")
    parser.add_argument(
        "--kind",
        choices=[k.value for k in ShapeKind],
        default=ShapeKind.POLYLINE.value,
        help="Shape kind to build (default: polyline)",
    )
    parser.add_argument(
        "--multi",
        action="store_true",
        help="One collider per connected region instead of one merged outline",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Keep image coordinates instead of centering each outline",
    )
    parser.add_argument("--workers", type=int, default=None, help="Thread pool size")
    parser.add_argument("--indent", type=int, default=None, help="JSON indent")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    pipeline = Pipeline(config=PipelineConfig(max_workers=args.workers))
    try:
        ctx = pipeline.run(
            args.image,
            ShapeKind(args.kind),
            multi=args.multi,
            translated=not args.raw,
        )
    except UnsupportedFormat as e:
        print(f"collider-gen: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"collider-gen: cannot read {args.image}: {e}", file=sys.stderr)
        return 1

    payload = ColliderResponse.from_context(ctx).model_dump(mode="json")
    print(json.dumps(payload, indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
