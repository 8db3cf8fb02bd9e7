"""TGA output"""
from pathlib import Path
from typing import Union

import imageio.v3 as iio
import numpy as np

from .errors import WriteError
from .image import PixelBuffer


def orient(pixels: PixelBuffer, flip_v: bool) -> np.ndarray:
    """
    Array as it is handed to the encoder.

    Rows are flipped vertically unless flip_v is set. Single channel images
    become 2D greyscale arrays; two channels are written as grey + alpha.
    """
    image = pixels.data
    if not flip_v:
        image = np.flipud(image)
    if pixels.channels == 1:
        image = image[:, :, 0]
    return np.ascontiguousarray(image)


def write_image(pixels: PixelBuffer, flip_v: bool, out_path: Union[str, Path]) -> None:
    """
    Write a PixelBuffer as an uncompressed TGA image

    Args:
        pixels: Decoded image
        flip_v: Header flipV flag, the image is flipped on write when False
        out_path: Destination file

    Raises:
        WriteError: The encoder could not write the file
    """
    try:
        iio.imwrite(out_path, orient(pixels, flip_v), extension='.tga')
    except (OSError, ValueError, TypeError) as e:
        raise WriteError(f"Failed to write image to disk: {e}") from e
