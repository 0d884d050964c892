#!/usr/bin/env python3
"""
Load named color swatches from a text file.

Each line is '<name>,#<hex>'. The line is split on the first comma only.
Blank lines are skipped; anything else that does not parse is an error.
"""

from dataclasses import dataclass
from pathlib import Path

import numpy as np

from color_model import parse_hex_color, rgb_to_hsl


class MalformedInputError(ValueError):
    """A swatch line could not be parsed."""


@dataclass(frozen=True)
class ColorSwatch:
    """A named color with its HSL values derived at load time."""
    name: str
    rgb: tuple[int, int, int]  # 0-255
    hue: float  # degrees, [0, 360)
    saturation: float  # [0, 1]
    lightness: float  # [0, 1]


def build_swatches(names: list[str], rgbs: list[tuple[int, int, int]]) -> list[ColorSwatch]:
    """Pair names with their colors, converting all RGB values to HSL in one pass."""
    if not names:
        return []

    hsl = rgb_to_hsl(np.array(rgbs, dtype=np.uint8))
    return [
        ColorSwatch(
            name=name,
            rgb=tuple(int(v) for v in rgb),
            hue=float(hue),
            saturation=float(sat),
            lightness=float(light),
        )
        for name, rgb, (hue, sat, light) in zip(names, rgbs, hsl)
    ]


def swatch_from_hex(name: str, hex_color: str) -> ColorSwatch:
    """Build a single swatch from a '#'-prefixed hex color."""
    return build_swatches([name], [parse_hex_color(hex_color)])[0]


def parse_swatch_line(line: str) -> tuple[str, tuple[int, int, int]]:
    """
    Split one '<name>,#<hex>' line into (name, rgb).

    Raises:
        ValueError: If the line has no comma or the color is not valid hex
    """
    name, sep, color = line.rstrip('\r\n').partition(',')
    if not sep:
        raise ValueError(f"Expected '<name>,#<hex>', got {line.strip()!r}")
    return name, parse_hex_color(color.strip())


def load_swatches(path) -> list[ColorSwatch]:
    """
    Read swatches from a file, preserving line order.

    Raises:
        OSError: If the file cannot be opened or read
        MalformedInputError: If the file is not UTF-8 or a non-blank line
            does not parse
    """
    path = Path(path)
    names = []
    rgbs = []

    with open(path, encoding='utf-8-sig') as f:
        try:
            for line_no, line in enumerate(f, 1):
                if not line.strip():
                    continue
                try:
                    name, rgb = parse_swatch_line(line)
                except ValueError as e:
                    raise MalformedInputError(f"{path}:{line_no}: {e}") from e
                names.append(name)
                rgbs.append(rgb)
        except UnicodeDecodeError as e:
            raise MalformedInputError(f"{path}: {e}") from e

    return build_swatches(names, rgbs)
