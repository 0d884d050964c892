#!/usr/bin/env python3
"""
Hue buckets and HSL range filtering.

Swatches are grouped in two stages:
1. Hue partition: 16 fixed buckets, one of which (Red) wraps through 0°
2. HSL box: user-supplied inclusive ranges narrow each bucket's members

Survivors are sorted by lightness, darkest first.
"""

from dataclasses import dataclass

from swatches import ColorSwatch


# =============================================================================
# Constants
# =============================================================================

DEFAULT_MIN_HUE = 0.0
DEFAULT_MAX_HUE = 360.0
DEFAULT_MIN_SATURATION = 0.0
DEFAULT_MAX_SATURATION = 1.0
DEFAULT_MIN_LIGHTNESS = 0.0
DEFAULT_MAX_LIGHTNESS = 1.0


class InvalidOptionError(ValueError):
    """A filter range is inverted or out of its domain."""


# =============================================================================
# Hue Buckets
# =============================================================================

@dataclass(frozen=True)
class HueBucket:
    """A named hue range: min inclusive, max exclusive."""
    name: str
    min_hue: float
    max_hue: float
    wraps: bool = False  # range crosses 360° -> 0°

    def contains(self, hue: float) -> bool:
        if self.wraps:
            return hue >= self.min_hue or hue < self.max_hue
        return self.min_hue <= hue < self.max_hue


HUE_BUCKETS = (
    HueBucket('Red', 355, 10, wraps=True),
    HueBucket('Red-Orange', 10, 20),
    HueBucket('Orange-Brown', 20, 40),
    HueBucket('Orange-Yellow', 40, 50),
    HueBucket('Yellow', 50, 60),
    HueBucket('Yellow-Green', 60, 80),
    HueBucket('Green', 80, 140),
    HueBucket('Green-Cyan', 140, 170),
    HueBucket('Cyan', 170, 200),
    HueBucket('Cyan-Blue', 200, 220),
    HueBucket('Blue', 220, 240),
    HueBucket('Blue-Magenta', 240, 280),
    HueBucket('Magenta', 280, 320),
    HueBucket('Magenta-Pink', 320, 330),
    HueBucket('Pink', 330, 345),
    HueBucket('Pink-Red', 345, 355),
)


def find_bucket(hue: float, buckets=HUE_BUCKETS) -> HueBucket:
    """
    Return the bucket containing hue.

    Raises:
        ValueError: If no bucket claims the hue (e.g. hue outside [0, 360))
    """
    for bucket in buckets:
        if bucket.contains(hue):
            return bucket
    raise ValueError(f"No hue bucket contains {hue}")


# =============================================================================
# HSL Filter
# =============================================================================

@dataclass(frozen=True)
class FilterRange:
    """Inclusive hue/saturation/lightness bounds."""
    min_hue: float = DEFAULT_MIN_HUE
    max_hue: float = DEFAULT_MAX_HUE
    min_saturation: float = DEFAULT_MIN_SATURATION
    max_saturation: float = DEFAULT_MAX_SATURATION
    min_lightness: float = DEFAULT_MIN_LIGHTNESS
    max_lightness: float = DEFAULT_MAX_LIGHTNESS

    def validate(self) -> 'FilterRange':
        """
        Check every bound is in its domain and no range is inverted.

        Returns self so construction and validation can be chained.

        Raises:
            InvalidOptionError: On the first offending range
        """
        for label, low, high, limit in [
            ('hue', self.min_hue, self.max_hue, DEFAULT_MAX_HUE),
            ('saturation', self.min_saturation, self.max_saturation, DEFAULT_MAX_SATURATION),
            ('lightness', self.min_lightness, self.max_lightness, DEFAULT_MAX_LIGHTNESS),
        ]:
            for bound in (low, high):
                if not 0.0 <= bound <= limit:  # also rejects NaN
                    raise InvalidOptionError(
                        f"{label} bound {bound} is outside [0, {limit:g}]"
                    )
            if low > high:
                raise InvalidOptionError(
                    f"min {label} {low} is greater than max {label} {high}"
                )
        return self

    def accepts(self, swatch: ColorSwatch) -> bool:
        return (
            self.min_hue <= swatch.hue <= self.max_hue
            and self.min_saturation <= swatch.saturation <= self.max_saturation
            and self.min_lightness <= swatch.lightness <= self.max_lightness
        )


# =============================================================================
# Bucketing Pipeline
# =============================================================================

def sort_into_bucket(bucket: HueBucket, swatches: list[ColorSwatch],
                     filter_range: FilterRange) -> list[ColorSwatch]:
    """
    Select a bucket's swatches, apply the HSL filter, then sort by lightness.

    The HSL filter only removes members; it never changes which bucket a
    swatch is considered for. The sort is stable, so equal lightness keeps
    input order.
    """
    members = [s for s in swatches if bucket.contains(s.hue)]
    survivors = [s for s in members if filter_range.accepts(s)]
    return sorted(survivors, key=lambda s: s.lightness)


def sort_into_buckets(swatches: list[ColorSwatch], filter_range: FilterRange,
                      buckets=HUE_BUCKETS) -> list[tuple[HueBucket, list[ColorSwatch]]]:
    """Run sort_into_bucket for every bucket, in table order (empty results included)."""
    return [(bucket, sort_into_bucket(bucket, swatches, filter_range)) for bucket in buckets]
