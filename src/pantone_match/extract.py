from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from .log import get_logger
from .models import RGBColor

logger = get_logger(__name__)

MAX_SAMPLES = 10000
ALPHA_CUTOFF = 128
QUANTIZATION_STEP = 32
TOP_COLORS = 10

PixelBuffer = bytes | bytearray | memoryview | Sequence[int] | np.ndarray


def count_quantized_colors(
    pixel_data: PixelBuffer,
    width: int,
    height: int,
    limit: int = TOP_COLORS,
) -> list[tuple[RGBColor, int]]:
    """Return the most frequent quantized colors of an RGBA buffer.

    Pixels are read straight from ``pixel_data`` every ``sample_step``
    pixels; ``width`` and ``height`` only determine that step, so a buffer
    whose length disagrees with them is under- or over-scanned rather than
    rejected. Ties in frequency keep the order in which the buckets were
    first seen.
    """
    flat = _as_flat_array(pixel_data)
    step = sample_step(width, height)

    starts = np.arange(0, flat.shape[0], 4 * step)
    starts = starts[starts + 3 < flat.shape[0]]
    if starts.shape[0] == 0:
        return []

    # Only the sampled pixels are widened; the source buffer stays as given.
    pixels = flat[starts[:, None] + np.arange(4)].astype(np.int64)
    opaque = pixels[pixels[:, 3] >= ALPHA_CUTOFF, :3]
    if opaque.shape[0] == 0:
        logger.debug("image_colors_sampled", samples=int(starts.shape[0]), opaque=0)
        return []

    quantized = quantize_channels(opaque)
    buckets, first_seen, counts = np.unique(
        quantized, axis=0, return_index=True, return_counts=True
    )
    ordered = np.lexsort((first_seen, -counts))[: max(0, limit)]

    logger.debug(
        "image_colors_sampled",
        samples=int(starts.shape[0]),
        opaque=int(opaque.shape[0]),
        buckets=int(buckets.shape[0]),
    )
    return [
        (
            RGBColor(
                r=int(buckets[idx][0]),
                g=int(buckets[idx][1]),
                b=int(buckets[idx][2]),
            ),
            int(counts[idx]),
        )
        for idx in ordered
    ]


def sample_step(width: int, height: int) -> int:
    return max(1, (int(width) * int(height)) // MAX_SAMPLES)


def quantize_channels(values: np.ndarray) -> np.ndarray:
    # Half-up rounding, so 16 -> 32 and 255 -> 256.
    scaled = np.floor(values.astype(np.float64) / QUANTIZATION_STEP + 0.5)
    return scaled.astype(np.int64) * QUANTIZATION_STEP


def _as_flat_array(pixel_data: PixelBuffer) -> np.ndarray:
    if isinstance(pixel_data, (bytes, bytearray, memoryview)):
        return np.frombuffer(pixel_data, dtype=np.uint8)
    return np.asarray(pixel_data).reshape(-1)
