"""Image reading and grayscale conversion.

TIFF files are read with tifffile; PNG, JPEG and BMP go through
scikit-image's imageio-backed reader.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import tifffile

from platequant.core.exceptions import ImageReadError, UnsupportedFormatError

TIFF_EXTENSIONS = {".tif", ".tiff"}
RASTER_EXTENSIONS = {".png", ".jpg", ".jpeg", ".bmp"}

# ITU-R BT.601 luma weights
LUMA_WEIGHTS = (0.299, 0.587, 0.114)


def read_image(path: Path) -> np.ndarray:
    """Decode an image file into a pixel array.

    Args:
        path: Image file path.

    Returns:
        Array of shape (H, W), (H, W, 3) or (H, W, 4).

    Raises:
        FileNotFoundError: If the file does not exist.
        UnsupportedFormatError: If the extension is not a known image format.
        ImageReadError: If decoding fails or the array is not a 2-D image.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"No such file: {path}")

    suffix = path.suffix.lower()
    if suffix not in TIFF_EXTENSIONS | RASTER_EXTENSIONS:
        raise UnsupportedFormatError(str(path))

    try:
        if suffix in TIFF_EXTENSIONS:
            pixels = tifffile.imread(str(path))
        else:
            from skimage import io as skio

            pixels = skio.imread(str(path))
    except (OSError, ValueError, tifffile.TiffFileError) as exc:
        raise ImageReadError(str(path), str(exc)) from exc

    pixels = np.asarray(pixels)
    if pixels.ndim == 3 and pixels.shape[-1] not in (3, 4):
        # Multi-page TIFF: keep the first plane
        pixels = pixels[0]
    if pixels.ndim not in (2, 3) or pixels.size == 0:
        raise ImageReadError(str(path), f"unexpected pixel shape {pixels.shape}")
    return pixels


def to_uint8(pixels: np.ndarray) -> np.ndarray:
    """Rescale any supported dtype to the 0-255 uint8 range.

    Float images whose maximum exceeds 1.0 are taken to be on the 8-bit
    scale already and are rounded half up; otherwise floats are read as
    0-1 intensities.
    """
    if pixels.dtype == np.uint8:
        return pixels
    if pixels.dtype == bool:
        return pixels.astype(np.uint8) * 255
    if np.issubdtype(pixels.dtype, np.integer) and pixels.size:
        # Integer data already on the 8-bit scale is kept as-is
        if pixels.min() >= 0 and pixels.max() <= 255:
            return pixels.astype(np.uint8)

    from skimage.util import img_as_ubyte

    if np.issubdtype(pixels.dtype, np.floating):
        if pixels.size and np.nanmax(pixels) > 1.0:
            return np.clip(np.floor(pixels + 0.5), 0, 255).astype(np.uint8)
        pixels = np.clip(pixels, 0.0, 1.0)
    return img_as_ubyte(pixels)


def to_grayscale(pixels: np.ndarray) -> np.ndarray:
    """Convert an image to 8-bit luminance.

    RGB(A) pixels use ``round(0.299 R + 0.587 G + 0.114 B)`` with halves
    rounded up; alpha is ignored. 2-D input is returned as uint8.

    Args:
        pixels: Array of shape (H, W), (H, W, 3) or (H, W, 4).

    Returns:
        uint8 array of shape (H, W).

    Raises:
        ValueError: If the array shape is not an image.
    """
    pixels = to_uint8(np.asarray(pixels))
    if pixels.ndim == 2:
        return pixels
    if pixels.ndim != 3 or pixels.shape[-1] not in (3, 4):
        raise ValueError(f"Expected a (H, W), (H, W, 3) or (H, W, 4) image, got {pixels.shape}")

    rgb = pixels[..., :3].astype(np.float64)
    luma = rgb @ np.asarray(LUMA_WEIGHTS)
    return np.clip(np.floor(luma + 0.5), 0, 255).astype(np.uint8)
