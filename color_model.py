#!/usr/bin/env python3
"""
Hex parsing and RGB -> HSL conversion.

Pure functions only; nothing here touches Pillow, so the bucketing code can be
exercised without any rendering backend.
"""

import re

import numpy as np


# =============================================================================
# Constants
# =============================================================================

RGB_MAX = 255.0
HUE_MAX = 360.0

# '#rgb', '#rrggbb' or '#aarrggbb' (alpha first)
HEX_COLOR = re.compile(r'#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})')


# =============================================================================
# Hex Parsing
# =============================================================================

def parse_hex_color(token: str) -> tuple[int, int, int]:
    """
    Parse a web hex color into an (r, g, b) tuple of 0-255 ints.

    Shorthand '#abc' expands to '#aabbcc'. An 8-digit color is read as
    '#aarrggbb' and its leading alpha byte is dropped.

    Raises:
        ValueError: If token is not a '#'-prefixed 3/6/8 digit hex color
    """
    if not HEX_COLOR.fullmatch(token):
        raise ValueError(f"Invalid hex color: {token!r}")

    digits = token[1:]
    if len(digits) == 3:
        digits = ''.join(ch * 2 for ch in digits)
    elif len(digits) == 8:
        digits = digits[2:]

    return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))


# =============================================================================
# Color Conversion
# =============================================================================

def rgb_to_hsl(rgb: np.ndarray) -> np.ndarray:
    """
    Convert RGB array (0-255) to HSL.

    Args:
        rgb: Array of shape (n, 3)

    Returns:
        Array of shape (n, 3) with columns [hue, saturation, lightness].
        Hue is in degrees [0, 360); saturation and lightness in [0, 1].
        Achromatic colors (grays) get hue 0 and saturation 0.
    """
    rgb_norm = np.asarray(rgb, dtype=np.float64).reshape(-1, 3) / RGB_MAX
    r, g, b = rgb_norm[:, 0], rgb_norm[:, 1], rgb_norm[:, 2]

    cmax = rgb_norm.max(axis=1)
    cmin = rgb_norm.min(axis=1)
    delta = cmax - cmin
    lightness = (cmax + cmin) / 2

    chromatic = delta > 0
    safe_delta = np.where(chromatic, delta, 1.0)

    # Hue sector comes from the dominant channel; red wins ties, then green
    sector = np.select(
        [cmax == r, cmax == g],
        [((g - b) / safe_delta) % 6, (b - r) / safe_delta + 2],
        default=(r - g) / safe_delta + 4,
    )
    hue = np.where(chromatic, sector * 60.0, 0.0) % HUE_MAX

    denom = 1 - np.abs(2 * lightness - 1)
    has_saturation = chromatic & (denom > 0)
    saturation = np.where(has_saturation, delta / np.where(has_saturation, denom, 1.0), 0.0)

    return np.column_stack([hue, np.clip(saturation, 0.0, 1.0), lightness])
