# tracer3d/image/framebuffer.py
"""
Цветовой буфер кадра (float32, RGB) и перевод в 8‑битные байты.

Строка 0 – верхняя строка изображения, порядок пикселей row‑major.
"""

import numpy as np
from numba import njit

from tracer3d.math import Vec3


@njit
def quantize(frame):
    """
    (h, w, 3) float → (h, w, 3) uint8.
    trunc(255.999 * c): 1.0 → 255, 0.5 → 127.
    Значения вне [0, 1] насыщаются до 0/255, NaN → 0.
    """
    scale = np.float32(255.999)
    h, w, c = frame.shape
    out = np.empty((h, w, c), dtype=np.uint8)
    for y in range(h):
        for x in range(w):
            for k in range(c):
                v = scale * np.float32(frame[y, x, k])
                if not v > 0.0:
                    out[y, x, k] = 0
                elif v >= 255.0:
                    out[y, x, k] = 255
                else:
                    out[y, x, k] = np.uint8(int(v))
    return out


class Framebuffer:
    """RGB‑буфер width × height; цвета – Vec3 в диапазоне [0, 1]."""

    __slots__ = ("width", "height", "_pixels")

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"Framebuffer size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self._pixels = np.zeros((self.height, self.width, 3), dtype=np.float32)

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Pixel ({x}, {y}) outside {self.width}x{self.height} framebuffer"
            )

    def set_pixel(self, x: int, y: int, color: Vec3) -> None:
        self._check(x, y)
        self._pixels[y, x] = color.to_array()

    def get_pixel(self, x: int, y: int) -> Vec3:
        self._check(x, y)
        return Vec3.from_array(self._pixels[y, x])

    def as_np(self) -> np.ndarray:
        """Копия (h, w, 3) float32."""
        return self._pixels.copy()

    def to_rgb8(self) -> np.ndarray:
        return quantize(self._pixels)

    def __repr__(self) -> str:
        return f"Framebuffer({self.width}x{self.height})"
