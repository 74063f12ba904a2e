import logging
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from ..color import srgb_to_lab_array
from ..errors import ImageNotFoundError, UnsupportedImageError

logger = logging.getLogger(__name__)

MAX_EDGE = 256


def load_and_prepare(image_path):
    """Load an image and convert its pixels to CIELAB.

    The image is downscaled so its longer edge is at most 256 pixels,
    preserving the aspect ratio.

    Args:
        image_path: Path to the source image

    Returns:
        ndarray: (N, 3) array of Lab pixels

    Raises:
        ImageNotFoundError: the path does not exist or is not a file
        UnsupportedImageError: the file is not a decodable image
    """
    path = Path(image_path)
    if not path.is_file():
        raise ImageNotFoundError(path)

    try:
        with Image.open(path) as img:
            img = img.convert("RGB")
            img.thumbnail((MAX_EDGE, MAX_EDGE))
            pixels = np.asarray(img, dtype=np.uint8).reshape(-1, 3)
    except UnidentifiedImageError:
        raise UnsupportedImageError(path) from None
    except (OSError, SyntaxError, ValueError) as e:
        # Truncated or otherwise corrupt data surfaces while decoding
        raise UnsupportedImageError(path, str(e)) from e

    logger.info("loaded %s: %d pixels", path, len(pixels))
    return srgb_to_lab_array(pixels)
