#!/usr/bin/env python3
"""
Sort named colors into hue buckets and write one swatch image per bucket.

Usage:
    python sort_colors.py --color-swatches colors.txt [--min-lightness 0.2 ...]

For every bucket with at least one surviving swatch, writes '<bucket>.png'
and prints the bucket's swatches (hue, saturation, lightness: name).
"""

import argparse
import sys
from pathlib import Path

from buckets import (
    HUE_BUCKETS, FilterRange, InvalidOptionError, sort_into_buckets,
    DEFAULT_MIN_HUE, DEFAULT_MAX_HUE,
    DEFAULT_MIN_SATURATION, DEFAULT_MAX_SATURATION,
    DEFAULT_MIN_LIGHTNESS, DEFAULT_MAX_LIGHTNESS,
)
from render_swatches import OUTPUT_SUFFIX, render_swatches, print_report
from swatches import ColorSwatch, MalformedInputError, load_swatches


def run(swatches: list[ColorSwatch], filter_range: FilterRange,
        output_dir: Path = Path('.'), verbose: bool = False) -> list[tuple[str, int]]:
    """
    Process every bucket in table order.

    Any existing '<bucket>.png' is removed first, so buckets that end up
    empty leave no stale image behind.

    Returns:
        (bucket name, swatch count) for each bucket that produced an image
    """
    written = []

    for bucket, members in sort_into_buckets(swatches, filter_range, HUE_BUCKETS):
        output_path = output_dir / f"{bucket.name}{OUTPUT_SUFFIX}"
        if output_path.exists():
            output_path.unlink()
            if verbose:
                print(f"Removed stale {output_path.name}", file=sys.stderr)

        if not members:
            continue

        render_swatches(members, output_path)
        print_report(bucket.name, members)
        written.append((bucket.name, len(members)))

        if verbose:
            noun = 'swatch' if len(members) == 1 else 'swatches'
            print(f"Wrote {output_path.name} ({len(members)} {noun})", file=sys.stderr)

    return written


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Sort named colors into hue buckets and render each bucket as a swatch image.'
    )
    parser.add_argument(
        '--color-swatches',
        required=True,
        help="Path to file listing color swatches on each line as '<name>,#<hex>'"
    )
    parser.add_argument('--min-hue', type=float, default=DEFAULT_MIN_HUE, help='Min hue value')
    parser.add_argument('--max-hue', type=float, default=DEFAULT_MAX_HUE, help='Max hue value')
    parser.add_argument('--min-saturation', type=float, default=DEFAULT_MIN_SATURATION,
                        help='Min saturation value')
    parser.add_argument('--max-saturation', type=float, default=DEFAULT_MAX_SATURATION,
                        help='Max saturation value')
    parser.add_argument('--min-lightness', type=float, default=DEFAULT_MIN_LIGHTNESS,
                        help='Min lightness value')
    parser.add_argument('--max-lightness', type=float, default=DEFAULT_MAX_LIGHTNESS,
                        help='Max lightness value')
    parser.add_argument(
        '--output-dir',
        default='.',
        help='Directory for bucket images (default: current directory)'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Report written and removed images on stderr'
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    filter_range = FilterRange(
        min_hue=args.min_hue,
        max_hue=args.max_hue,
        min_saturation=args.min_saturation,
        max_saturation=args.max_saturation,
        min_lightness=args.min_lightness,
        max_lightness=args.max_lightness,
    )

    # Validate options before touching any file
    try:
        filter_range.validate()
    except InvalidOptionError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    output_dir = Path(args.output_dir)
    if not output_dir.is_dir():
        print(f"Error: Output directory not found: {output_dir}", file=sys.stderr)
        sys.exit(2)

    try:
        swatches = load_swatches(args.color_swatches)
        written = run(swatches, filter_range, output_dir, verbose=args.verbose)
    except MalformedInputError as e:
        print(f"Error: Malformed swatch file: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.verbose:
        print(f"Sorted {len(swatches)} swatches into {len(written)} of "
              f"{len(HUE_BUCKETS)} buckets", file=sys.stderr)
    if not swatches:
        print(f"Warning: No swatches found in {args.color_swatches}", file=sys.stderr)


if __name__ == '__main__':
    main()
