"""Encoding helpers for pixel buffers.

Buffers are converted to Pillow images for encoding. Only the
``ShipGenerator`` facade calls into this module; the pipeline itself does not.
"""

import base64
import io
import os
from typing import Union

from PIL import Image

from infiniship.raster import PixelBuffer


def upscale(image: Image.Image, scale: int) -> Image.Image:
    """
    Enlarge ``image`` by an integer factor with nearest-neighbour sampling so
    pixel edges stay sharp.
    """
    if scale < 1:
        raise ValueError(f"Scale must be positive: {scale}")
    if scale == 1:
        return image
    return image.resize(
        (image.width * scale, image.height * scale), Image.Resampling.NEAREST
    )


def encode_png(buffer: PixelBuffer, scale: int = 1) -> bytes:
    out = io.BytesIO()
    upscale(buffer.to_image(), scale).save(out, format="PNG")
    return out.getvalue()


def to_data_uri(buffer: PixelBuffer, scale: int = 1) -> str:
    """Encode ``buffer`` as a ``data:image/png;base64,...`` URI."""
    encoded = base64.b64encode(encode_png(buffer, scale)).decode("ascii")
    return f"data:image/png;base64,{encoded}"


def save_image(
    buffer: PixelBuffer, path: Union[str, "os.PathLike[str]"], scale: int = 1
) -> None:
    upscale(buffer.to_image(), scale).save(path, format="PNG")
