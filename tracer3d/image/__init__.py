"""
Вывод изображений: буфер кадра, plain‑PPM, тестовый градиент.
"""

from tracer3d.image.framebuffer import Framebuffer, quantize
from tracer3d.image.ppm import PPM_MAGIC, read_ppm, save_image, save_ppm, write_ppm
from tracer3d.image.gradient import render_gradient

__all__ = [
    "Framebuffer",
    "quantize",
    "PPM_MAGIC",
    "read_ppm",
    "write_ppm",
    "save_ppm",
    "save_image",
    "render_gradient",
]
