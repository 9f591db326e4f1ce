# export/image_writer.py
import logging
from pathlib import Path
from typing import Union

from PIL import Image

from renderer.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


def to_image(buffer: PixelBuffer) -> Image.Image:
    """Converts a finalized pixel buffer to an 8-bit RGB Pillow image."""
    return Image.fromarray(buffer.to_uint8())


def save_image(buffer: PixelBuffer, path: Union[str, Path]) -> Path:
    """
    Writes the buffer to disk. The format follows the file extension
    (.png, .ppm, .bmp, ...), as Pillow understands it.

    Raises:
        ValueError: If Pillow has no writer for the extension
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    to_image(buffer).save(path)
    logger.info(f"Image written to {path} ({path.stat().st_size} bytes)")
    return path
