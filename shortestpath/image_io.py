"""
Image I/O for pathfinding inputs and rendered outputs.

Saves can optionally carry a timestamp to avoid overwriting earlier runs.
"""
from datetime import datetime
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image


def _get_timestamp() -> str:
    """Get current timestamp string for filenames."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def _inject_timestamp(path: Path) -> Path:
    """Inject timestamp into filename: foo.png -> foo_20260204_041500.png"""
    ts = _get_timestamp()
    return path.parent / f"{path.stem}_{ts}{path.suffix}"


def load_image(path: Union[str, Path]) -> np.ndarray:
    """
    Load image as RGB uint8 array.

    Args:
        path: Image file path

    Returns:
        (H, W, 3) uint8 array, indexed [y, x]
    """
    with Image.open(path) as img:
        return np.array(img.convert('RGB'))


def save_image(
    data: Union[np.ndarray, Image.Image],
    path: Union[str, Path],
    timestamp: bool = False
) -> Path:
    """
    Save image, creating parent directories.

    Args:
        data: PIL image, or (H, W, 3) array (floats are taken as [0, 1])
        path: Output path
        timestamp: If True, inject timestamp before the extension

    Returns:
        Actual path where file was saved
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if timestamp:
        path = _inject_timestamp(path)

    if isinstance(data, Image.Image):
        img = data
    else:
        arr = data
        if arr.dtype == np.float32 or arr.dtype == np.float64:
            arr = (arr * 255).clip(0, 255).astype(np.uint8)
        elif arr.dtype != np.uint8:
            arr = arr.astype(np.uint8)
        img = Image.fromarray(arr)

    img.save(path)
    print(f"Saved: {path}")
    return path
