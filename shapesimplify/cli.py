"""Command line interface for shapesimplify."""
import argparse
import logging
import sys
from pathlib import Path

import numpy as np

from shapesimplify.simplifier import Simplifier


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog='shapesimplify',
        description='Drop points lying within a tolerance of the chord between retained points'
    )

    parser.add_argument(
        'input',
        type=str,
        help='Input point file, one "x y" row per point'
    )

    parser.add_argument(
        '-o', '--output',
        type=str,
        help='Output point file (default: stdout)'
    )

    parser.add_argument(
        '-t', '--tolerance',
        type=float,
        default=0.0,
        help='Chord distance tolerance, negative disables simplification (default: 0)'
    )

    parser.add_argument(
        '--closed',
        action='store_true',
        help='Treat the points as a closed polygon'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    return parser


def main(args=None):
    """Main entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed_args.verbose else logging.INFO,
        format='%(levelname)s %(name)s: %(message)s'
    )

    input_path = Path(parsed_args.input)
    if not input_path.exists():
        print(f"Error: Input file not found: {input_path}", file=sys.stderr)
        return 1

    try:
        points = np.loadtxt(input_path, dtype=float, ndmin=2)
    except ValueError as e:
        print(f"Error: Could not read points from {input_path}: {e}", file=sys.stderr)
        return 1

    if points.size and points.shape[1] != 2:
        print(f"Error: Expected 2 columns, got {points.shape[1]}", file=sys.stderr)
        return 1
    points = points.reshape(-1, 2)

    simplified = Simplifier(parsed_args.tolerance).convert(points, parsed_args.closed)

    if parsed_args.output:
        np.savetxt(parsed_args.output, simplified, fmt='%.10g')
    else:
        np.savetxt(sys.stdout, simplified, fmt='%.10g')

    print(f"Points: {len(points)} -> {len(simplified)}", file=sys.stderr)
    return 0


if __name__ == '__main__':
    sys.exit(main())
