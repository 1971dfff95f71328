from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Any

import numpy as np
import requests
from PIL import Image

from .config import get_settings
from .log import get_logger

logger = get_logger(__name__)


def read_image_rgba(
    image_path: str | Path,
    timeout: float | None = None,
) -> tuple[np.ndarray, int, int]:
    """Decode an image into a flat RGBA byte buffer plus its width and height."""
    path_str = str(image_path)
    if path_str.startswith(("http://", "https://")):
        if timeout is None:
            timeout = get_settings().http_timeout
        response = requests.get(path_str, timeout=timeout)
        response.raise_for_status()
        with Image.open(io.BytesIO(response.content)) as image:
            return _to_rgba_buffer(image, path_str)

    with Image.open(Path(image_path)) as image:
        return _to_rgba_buffer(image, path_str)


def write_result_json(payload: Any, output_path: str | Path) -> None:
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")


def _to_rgba_buffer(image: Image.Image, source: str) -> tuple[np.ndarray, int, int]:
    rgba = image.convert("RGBA")
    width, height = rgba.size
    pixels = np.asarray(rgba, dtype=np.uint8).reshape(-1)
    logger.debug("image_read", source=source, width=width, height=height)
    return pixels, width, height
