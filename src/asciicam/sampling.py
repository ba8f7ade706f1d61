import numpy as np

# BT.601 luma weights in thousandths; integer sums keep white at exactly 255
LUMA_WEIGHTS = np.array([299, 587, 114], dtype=np.int64)


def crop_rect(source_width: int, source_height: int, target_width: int, target_height: int) -> tuple[float, ...]:
    """Centred crop of the source with the same aspect ratio as the target grid.

    Returns (x, y, width, height) in source pixels. Wider sources lose their
    left and right edges, taller sources their top and bottom.
    """
    source_aspect = source_width / source_height
    target_aspect = target_width / target_height
    if source_aspect > target_aspect:
        crop_height = float(source_height)
        crop_width = crop_height * target_aspect
        return ((source_width - crop_width) / 2, 0.0, crop_width, crop_height)
    crop_width = float(source_width)
    crop_height = crop_width / target_aspect
    return (0.0, (source_height - crop_height) / 2, crop_width, crop_height)


def _sample_coords(origin: float, span: float, count: int, limit: int) -> np.ndarray:
    centres = origin + (np.arange(count) + 0.5) * (span / count)
    return np.clip(np.floor(centres).astype(np.intp), 0, limit - 1)


def resample_nearest(pixels: np.ndarray, rect: tuple[float, ...], width: int, height: int) -> np.ndarray:
    """Nearest-neighbour resample of a crop rectangle.

    Each output cell takes the source pixel under its centre. Returns an
    array of shape (height, width, 3).
    """
    x, y, crop_width, crop_height = rect
    xs = _sample_coords(x, crop_width, width, pixels.shape[1])
    ys = _sample_coords(y, crop_height, height, pixels.shape[0])
    return pixels[ys[:, np.newaxis], xs[np.newaxis, :], :3]


def luminance(rgb: np.ndarray) -> np.ndarray:
    """Perceptual brightness in 0-255 for an (..., 3) array."""
    return (rgb.astype(np.int64) @ LUMA_WEIGHTS) / 1000.0


def quantize(brightness: np.ndarray, levels: int) -> np.ndarray:
    """Map brightness to palette indices in [0, levels - 1]."""
    indices = np.floor(np.asarray(brightness, dtype=np.float64) / 255.0 * (levels - 1))
    return np.clip(indices, 0, levels - 1).astype(np.intp)
