# tracer3d/image/gradient.py
"""
Тестовая картинка‑градиент: красный растёт слева направо,
зелёный – снизу вверх, синий постоянный.
"""

from tracer3d.image.framebuffer import Framebuffer
from tracer3d.math import Vec3
from tracer3d.utils.logger import logger

DEFAULT_SIZE = 256
DEFAULT_BLUE = 0.25


def render_gradient(width: int = DEFAULT_SIZE, height: int = DEFAULT_SIZE,
                    blue: float = DEFAULT_BLUE) -> Framebuffer:
    """
    Пиксель (col, row) получает цвет (col / (w‑1), row / (h‑1), blue),
    где row считается от h‑1 у верхней строки до 0 у нижней.
    """
    if width < 2 or height < 2:
        raise ValueError(f"Gradient needs at least 2x2 pixels, got {width}x{height}")

    fb = Framebuffer(width, height)
    extent = Vec3(width - 1, height - 1, 1.0)
    tint = Vec3(0.0, 0.0, blue)

    for row in reversed(range(height)):
        logger.debug(f"[Gradient] Scanlines remaining: {row} of {height}")
        y = height - 1 - row
        for col in range(width):
            fb.set_pixel(col, y, Vec3(col, row, 0.0) / extent + tint)

    logger.info("[Gradient] Done")
    return fb
