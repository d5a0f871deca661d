#!/usr/bin/env python3
"""Build one of every 2D primitive and show its host and kernel forms.

This script constructs each shape in the vocabulary, reports whether it is
degenerate, and packs the fixed-size ones into their Taichi structs (or a
VertexBuffer for runtime-count shapes).

Usage:
    python examples/describe_primitives.py [options]

Options:
    --arch ARCH         Taichi backend (default: cpu)
    --sides N           Vertex count for the regular polygon (default: 6)
    --no-kernel         Only show host-side shapes, skip Taichi packing
    --verbose           Enable DEBUG logging

Example:
    python examples/describe_primitives.py --sides 2 --no-kernel
"""

from __future__ import annotations

import argparse
import logging


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Describe every 2D primitive.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--arch",
        type=str,
        default="cpu",
        help="Taichi backend (default: cpu)",
    )
    parser.add_argument(
        "--sides",
        type=int,
        default=6,
        help="Vertex count for the regular polygon (default: 6)",
    )
    parser.add_argument(
        "--no-kernel",
        action="store_true",
        help="Only show host-side shapes, skip Taichi packing",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG logging",
    )
    return parser.parse_args()


def build_shapes(sides: int) -> list:
    """Construct one instance of every primitive."""
    from primitives2d import (
        BoxedPolygon,
        BoxedPolyline2d,
        Circle,
        Direction2d,
        Line2d,
        LineSegment2d,
        Plane2d,
        Polygon,
        Polyline2d,
        Rectangle,
        RegularPolygon,
        Triangle,
    )

    diagonal = Direction2d.from_vector((3.0, 4.0))
    return [
        Circle(1.0),
        Plane2d(Direction2d.Y),
        Line2d(diagonal),
        LineSegment2d(diagonal, 0.0, 5.0),
        Polyline2d[3]([(0, 0), (1, 0), (1, 1)]),
        BoxedPolyline2d([(0, 0), (1, 2), (2, 0), (3, 2)]),
        Triangle((0, 0), (1, 0), (0, 1)),
        Rectangle(half_width=2.0, half_height=1.0),
        Polygon[4]([(0, 0), (1, 0), (1, 1), (0, 1)]),
        BoxedPolygon([]),
        RegularPolygon.new(radius=1.0, n_vertices=sides),
    ]


def describe(shapes: list, use_kernel: bool) -> None:
    """Print each shape, its degeneracy and its kernel-side form."""
    from primitives2d.kernel import VertexBuffer, to_struct

    for shape in shapes:
        degenerate = getattr(shape, "is_degenerate", lambda: False)()
        print(f"{type(shape).__name__:<20} degenerate={degenerate!s:<5} {shape!r}")
        if not use_kernel:
            continue
        try:
            print(f"{'':<20} -> {to_struct(shape)}")
        except (TypeError, ValueError):
            buf = VertexBuffer.from_shape(shape)
            print(f"{'':<20} -> VertexBuffer(count={buf.count}, closed={buf.closed})")


def main() -> None:
    """Main entry point."""
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.no_kernel:
        from primitives2d.config import init_taichi

        init_taichi(args.arch)

    describe(build_shapes(args.sides), use_kernel=not args.no_kernel)


if __name__ == "__main__":
    main()
