"""Holder for a drawable bitmap."""

from dataclasses import dataclass
from typing import Any, Optional, Tuple


@dataclass
class Image:
    """Wraps a bitmap object that exposes ``get_size()``."""

    bitmap: Optional[Any] = None

    def size(self) -> Tuple[float, float]:
        """Width and height of the bitmap; raises ValueError if none is set."""
        if self.bitmap is None:
            raise ValueError("image has no bitmap")
        width, height = self.bitmap.get_size()
        return float(width), float(height)