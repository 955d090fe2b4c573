"""
Tracer3D – числовое ядро (float32 Vec3) для CPU‑трассировщика лучей
и минимальный вывод картинки в plain‑PPM.
"""

from tracer3d.utils import logger
from tracer3d.math import Vec3, BASIS_X, BASIS_Y, BASIS_Z
from tracer3d.image import Framebuffer, render_gradient, save_image, write_ppm

__version__ = "0.1.0"

__all__ = [
    "logger",
    "Vec3",
    "BASIS_X",
    "BASIS_Y",
    "BASIS_Z",
    "Framebuffer",
    "render_gradient",
    "save_image",
    "write_ppm",
]
