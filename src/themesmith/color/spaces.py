"""Color space conversions used for perceptual interpolation.

Ramps blend in Oklab, which keeps lightness steps even and avoids the
muddy midpoints of naive sRGB mixing. All functions accept (..., 3)
arrays and return arrays of the same shape.
"""

from __future__ import annotations

import colorsys

import numpy as np


def srgb_to_linear(rgb: np.ndarray) -> np.ndarray:
    """Decode sRGB gamma to linear light."""
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.where(
        rgb <= 0.04045,
        rgb / 12.92,
        ((np.clip(rgb, 0, None) + 0.055) / 1.055) ** 2.4,
    )


def linear_to_srgb(linear: np.ndarray) -> np.ndarray:
    """Encode linear light with the sRGB gamma, clipped to [0, 1]."""
    linear = np.clip(np.asarray(linear, dtype=np.float64), 0.0, 1.0)
    return np.where(
        linear <= 0.0031308,
        linear * 12.92,
        1.055 * np.power(linear, 1.0 / 2.4) - 0.055,
    )


def srgb_to_oklab(rgb: np.ndarray) -> np.ndarray:
    """Convert sRGB in [0, 1] to Oklab (L, a, b)."""
    linear = srgb_to_linear(rgb)

    # Linear sRGB -> LMS
    l = 0.4122214708 * linear[..., 0] + 0.5363325363 * linear[..., 1] + 0.0514459929 * linear[..., 2]
    m = 0.2119034982 * linear[..., 0] + 0.6806995451 * linear[..., 1] + 0.1073969566 * linear[..., 2]
    s = 0.0883024619 * linear[..., 0] + 0.2817188376 * linear[..., 1] + 0.6299787005 * linear[..., 2]

    l_ = np.cbrt(np.maximum(l, 0.0))
    m_ = np.cbrt(np.maximum(m, 0.0))
    s_ = np.cbrt(np.maximum(s, 0.0))

    # LMS' -> Oklab
    L = 0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_
    a = 1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_
    b_val = 0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_

    return np.stack([L, a, b_val], axis=-1)


def oklab_to_srgb(lab: np.ndarray) -> np.ndarray:
    """Convert Oklab (L, a, b) back to sRGB, clipped to [0, 1]."""
    lab = np.asarray(lab, dtype=np.float64)
    L, a, b_val = lab[..., 0], lab[..., 1], lab[..., 2]

    l_ = L + 0.3963377774 * a + 0.2158037573 * b_val
    m_ = L - 0.1055613458 * a - 0.0638541728 * b_val
    s_ = L - 0.0894841775 * a - 1.2914855480 * b_val

    l = l_ ** 3
    m = m_ ** 3
    s = s_ ** 3

    r = 4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s
    g = -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s
    b = -0.0041960863 * l - 0.7034186147 * m + 1.7076147010 * s

    return linear_to_srgb(np.stack([r, g, b], axis=-1))


def srgb_hue(rgb) -> float:
    """HSL hue of an sRGB color, in degrees [0, 360)."""
    r, g, b = (float(c) for c in np.asarray(rgb, dtype=np.float64))
    h, _, _ = colorsys.rgb_to_hls(r, g, b)
    return h * 360.0


def hsl_to_srgb(hue: float, saturation: float, lightness: float) -> np.ndarray:
    """HSL (degrees, unit, unit) to a (3,) sRGB array."""
    r, g, b = colorsys.hls_to_rgb((hue % 360.0) / 360.0, lightness, saturation)
    return np.array([r, g, b], dtype=np.float64)
