"""Pixel filters for images, and a helper that applies one from file to file."""

from __future__ import annotations

import errno
import os
from collections.abc import Callable
from enum import IntEnum

from PIL import Image

FILE_SCHEME = "file:///"

BINARIZE_THRESHOLD = 77
EMBOSS_OFFSET = 128
EMBOSS_STRENGTH = 2
SHARPEN_THRESHOLD = 80
SHARPEN_BOOST = 100

# Neighbourhood offsets for the soften filter, in the order they are summed.
_SOFTEN_OFFSETS = (
    (-1, -1), (0, -1), (1, -1), (1, 0), (1, 1),
    (0, 1), (-1, 1), (-1, 0), (0, 0),
)

Pixel = tuple[int, int, int, int]


class ImageAlgorithm(IntEnum):
    """The available image filters."""

    GRAY = 0
    BINARIZE = 1
    NEGATIVE = 2
    EMBOSS = 3
    SHARPEN = 4
    SOFTEN = 5


def strip_file_scheme(path: str) -> str:
    """Remove a leading ``file:///`` from *path*, if present."""
    if path.startswith(FILE_SCHEME):
        return path[len(FILE_SCHEME):]
    return path


def _clamp(value: int) -> int:
    return max(0, min(value, 255))


def _q_gray(r: int, g: int, b: int) -> int:
    return (r * 11 + g * 16 + b * 5) // 32


def _map_pixels(image: Image.Image, func: Callable[[Pixel], Pixel]) -> Image.Image:
    result = image.convert("RGBA")
    result.putdata([func(pixel) for pixel in result.getdata()])
    return result


def gray(image: Image.Image) -> Image.Image:
    """Return an opaque grayscale copy of *image*."""

    def convert(pixel: Pixel) -> Pixel:
        value = _q_gray(*pixel[:3])
        return (value, value, value, 255)

    return _map_pixels(image, convert)


def binarize(image: Image.Image) -> Image.Image:
    """Return a black-and-white copy: white where the channel mean exceeds 77."""

    def convert(pixel: Pixel) -> Pixel:
        r, g, b, _ = pixel
        if (r + g + b) // 3 > BINARIZE_THRESHOLD:
            return (255, 255, 255, 255)
        return (0, 0, 0, 255)

    return _map_pixels(image, convert)


def negative(image: Image.Image) -> Image.Image:
    """Return an opaque copy with every colour channel inverted."""

    def convert(pixel: Pixel) -> Pixel:
        r, g, b, _ = pixel
        return (255 - r, 255 - g, 255 - b, 255)

    return _map_pixels(image, convert)


def emboss(image: Image.Image) -> Image.Image:
    """Return an embossed copy based on the difference to the top-left neighbour.

    The first row and column keep their original pixels.
    """
    source = image.convert("RGBA")
    result = source.copy()
    src = source.load()
    out = result.load()
    width, height = source.size
    for y in range(1, height):
        for x in range(1, width):
            cr, cg, cb, ca = src[x, y]
            tr, tg, tb, _ = src[x - 1, y - 1]
            out[x, y] = (
                _clamp((cr - tr) * EMBOSS_STRENGTH + EMBOSS_OFFSET),
                _clamp((cg - tg) * EMBOSS_STRENGTH + EMBOSS_OFFSET),
                _clamp((cb - tb) * EMBOSS_STRENGTH + EMBOSS_OFFSET),
                ca,
            )
    return result


def sharpen(image: Image.Image) -> Image.Image:
    """Return a sharpened copy using a gradient threshold.

    Pixels in the last row and column, which have no right or lower
    neighbour, keep their original values.
    """
    source = image.convert("RGBA")
    result = source.copy()
    src = source.load()
    out = result.load()
    width, height = source.size
    for x in range(width - 1):
        for y in range(height - 1):
            r, g, b, _ = src[x, y]
            below = src[x, y + 1]
            right = src[x + 1, y]
            gradient_r = abs(r - below[0]) + abs(r - right[0])
            gradient_g = abs(g - below[1]) + abs(r - right[1])
            gradient_b = abs(b - below[2]) + abs(r - right[2])
            if gradient_r > SHARPEN_THRESHOLD:
                r = min(gradient_r + SHARPEN_BOOST, 255)
            if gradient_g > SHARPEN_THRESHOLD:
                g = min(gradient_g + SHARPEN_BOOST, 255)
            if gradient_b > SHARPEN_THRESHOLD:
                b = min(gradient_b + SHARPEN_BOOST, 255)
            out[x, y] = (r, g, b, 255)
    return result


def soften(image: Image.Image) -> Image.Image:
    """Return a copy blurred with a 3x3 mean, applied in place column by column.

    Border pixels are left unchanged; interior pixels become opaque.
    """
    result = image.convert("RGBA")
    pixels = result.load()
    width, height = result.size
    for x in range(1, width - 1):
        for y in range(1, height - 1):
            neighbours = [pixels[x + dx, y + dy] for dx, dy in _SOFTEN_OFFSETS]
            r, g, b = (
                _clamp(int(sum(p[channel] for p in neighbours) / 9.0))
                for channel in range(3)
            )
            pixels[x, y] = (r, g, b, 255)
    return result


_FILTERS: dict[ImageAlgorithm, Callable[[Image.Image], Image.Image]] = {
    ImageAlgorithm.GRAY: gray,
    ImageAlgorithm.BINARIZE: binarize,
    ImageAlgorithm.NEGATIVE: negative,
    ImageAlgorithm.EMBOSS: emboss,
    ImageAlgorithm.SHARPEN: sharpen,
    ImageAlgorithm.SOFTEN: soften,
}


def _save(image: Image.Image, dest_file: str) -> None:
    try:
        image.save(dest_file)
    except OSError:
        if image.mode != "RGBA":
            raise
        # Formats such as JPEG cannot hold an alpha channel.
        image.convert("RGB").save(dest_file)


def run_algorithm(algorithm: ImageAlgorithm | int, source_file: str, dest_file: str) -> str:
    """Load *source_file*, apply *algorithm* and save the result to *dest_file*.

    Returns *dest_file*. Raises FileNotFoundError if the source does not exist.
    """
    apply = _FILTERS[ImageAlgorithm(algorithm)]
    path = strip_file_scheme(source_file)
    if not os.path.exists(path):
        raise FileNotFoundError(errno.ENOENT, "File not found", path)
    with Image.open(path) as image:
        result = apply(image)
    _save(result, dest_file)
    return dest_file