#!/usr/bin/env python3
"""
Render sorted swatches as stacked color bands and print bucket reports.
"""

from PIL import Image, ImageDraw

from swatches import ColorSwatch


# =============================================================================
# Constants
# =============================================================================

SWATCH_WIDTH = 200
SWATCH_HEIGHT = 200  # per swatch
OUTPUT_FORMAT = 'PNG'
OUTPUT_SUFFIX = '.png'


# =============================================================================
# Image Rendering
# =============================================================================

def render_swatches(swatches: list[ColorSwatch], output_path) -> None:
    """
    Draw one full-width band per swatch, top to bottom, and save as PNG.

    Band i covers rows [i * SWATCH_HEIGHT, (i + 1) * SWATCH_HEIGHT).
    An existing file at output_path is overwritten.

    Raises:
        ValueError: If swatches is empty
        OSError: If the image cannot be written
    """
    if not swatches:
        raise ValueError("Cannot render an empty swatch list")

    img = Image.new('RGB', (SWATCH_WIDTH, SWATCH_HEIGHT * len(swatches)))
    draw = ImageDraw.Draw(img)

    for i, swatch in enumerate(swatches):
        y = i * SWATCH_HEIGHT
        # rectangle() bounds are inclusive on both corners
        draw.rectangle([0, y, SWATCH_WIDTH - 1, y + SWATCH_HEIGHT - 1], fill=swatch.rgb)

    img.save(output_path, format=OUTPUT_FORMAT)


# =============================================================================
# Console Report
# =============================================================================

def format_swatch(swatch: ColorSwatch) -> str:
    return f"{swatch.hue:07.3f}, {swatch.saturation:.3f}, {swatch.lightness:.3f}: {swatch.name}"


def format_report(bucket_name: str, swatches: list[ColorSwatch]) -> str:
    """Bucket name, one line per swatch, then a blank line."""
    lines = [bucket_name]
    lines.extend(format_swatch(s) for s in swatches)
    lines.append('')
    return '\n'.join(lines) + '\n'


def print_report(bucket_name: str, swatches: list[ColorSwatch]) -> None:
    print(format_report(bucket_name, swatches), end='')
