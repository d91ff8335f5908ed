"""Image writers for rendered pixel buffers.

Pixel buffers are (height, width, 3) uint8 arrays with the top row first.

Supported formats:
    - Plain-text PPM (P3), the renderer's native output
    - PNG (via Pillow)
"""

import logging
from pathlib import Path
from typing import TextIO, Union

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

MAX_CHANNEL_VALUE = 255


def _check_pixels(pixels: np.ndarray) -> None:
    if pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(f"Expected a (height, width, 3) array, got shape {pixels.shape}")


def write_ppm(stream: TextIO, pixels: np.ndarray) -> None:
    """
    Writes the P3 header followed by one "r g b" line per pixel, rows top to
    bottom and columns left to right.
    """
    _check_pixels(pixels)
    height, width, _ = pixels.shape
    stream.write(f"P3\n{width} {height}\n{MAX_CHANNEL_VALUE}\n")
    for row in pixels:
        stream.writelines(f"{r} {g} {b}\n" for r, g, b in row.tolist())


def save_ppm(path: PathLike, pixels: np.ndarray) -> Path:
    path = Path(path)
    with path.open("w", encoding="ascii", newline="\n") as stream:
        write_ppm(stream, pixels)
    logger.info("Wrote %s", path)
    return path


def read_ppm(path: PathLike) -> np.ndarray:
    """
    Parses a P3 file back into a (height, width, 3) uint8 array.
    """
    tokens = []
    with Path(path).open("r", encoding="ascii") as stream:
        for line in stream:
            line = line.split("#", 1)[0]
            tokens.extend(line.split())

    if not tokens or tokens[0] != "P3":
        raise ValueError(f"{path} is not a plain-text PPM (P3) file")
    width, height, max_value = (int(token) for token in tokens[1:4])
    values = np.array(tokens[4:], dtype=np.int64)
    if values.size != width * height * 3:
        raise ValueError(
            f"{path} declares {width}x{height} pixels but holds {values.size // 3}"
        )
    if max_value != MAX_CHANNEL_VALUE:
        values = values * MAX_CHANNEL_VALUE // max_value
    return values.reshape(height, width, 3).astype(np.uint8)


def save_png(path: PathLike, pixels: np.ndarray) -> Path:
    """Saves the pixel buffer as an 8-bit RGB PNG using Pillow."""
    _check_pixels(pixels)
    path = Path(path)
    Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8)).save(path, format="PNG")
    logger.info("Wrote %s", path)
    return path
