# tracer3d/image/ppm.py
"""
Plain‑PPM (P3) вывод/чтение + экспорт в прочие форматы через Pillow.

Формат:
    P3<TAB><width> <height><TAB>255
    R G B           ← по строке на пиксель, сверху вниз, слева направо
"""

from pathlib import Path
from typing import TextIO

import numpy as np
from PIL import Image

from tracer3d.utils.logger import logger

PPM_MAGIC = "P3"
MAX_VALUE = 255


def _check_rgb8(rgb8: np.ndarray) -> np.ndarray:
    data = np.asarray(rgb8)
    if data.ndim != 3 or data.shape[2] != 3:
        raise ValueError(f"Expected (height, width, 3) array, got shape {data.shape}")
    if data.dtype != np.uint8:
        raise ValueError(f"Expected uint8 samples, got {data.dtype}")
    return data


def write_ppm(stream: TextIO, rgb8: np.ndarray) -> None:
    """Пишет (h, w, 3) uint8 в текстовый поток."""
    data = _check_rgb8(rgb8)
    height, width = data.shape[:2]
    stream.write(f"{PPM_MAGIC}\t{width} {height}\t{MAX_VALUE}\n")
    for row in data:
        stream.write("".join(f"{r} {g} {b}\n" for r, g, b in row.tolist()))


def _tokens(stream: TextIO):
    for line in stream:
        line = line.split("#", 1)[0]
        yield from line.split()


def read_ppm(stream: TextIO) -> np.ndarray:
    """
    Разбирает plain‑PPM обратно в (h, w, 3) uint8.
    Если max_value < 255, отсчёты приводятся к шкале 0..255.
    """
    tokens = _tokens(stream)
    magic = next(tokens, None)
    if magic != PPM_MAGIC:
        raise ValueError(f"Not a plain PPM stream (magic {magic!r})")
    header = [next(tokens, None) for _ in range(3)]
    try:
        width, height, max_value = (int(t) for t in header)
    except (TypeError, ValueError) as exc:
        raise ValueError("Malformed PPM header") from exc
    if width < 1 or height < 1 or not 0 < max_value <= MAX_VALUE:
        raise ValueError(f"Unsupported PPM header: {width}x{height}, max {max_value}")

    samples = [int(t) for t in tokens]
    expected = width * height * 3
    if len(samples) != expected:
        raise ValueError(f"PPM body has {len(samples)} samples, expected {expected}")
    data = np.array(samples, dtype=np.int64)
    if data.min() < 0 or data.max() > max_value:
        raise ValueError(f"PPM sample outside [0, {max_value}]")
    if max_value != MAX_VALUE:
        # масштабирование к 0..255 с округлением
        data = (data * MAX_VALUE + max_value // 2) // max_value
    return data.astype(np.uint8).reshape((height, width, 3))


def save_ppm(path, rgb8: np.ndarray) -> Path:
    p = Path(path)
    with p.open("w", encoding="ascii", newline="\n") as f:
        write_ppm(f, rgb8)
    return p


def save_image(path, rgb8: np.ndarray) -> Path:
    """
    .ppm → plain‑текст (write_ppm), всё остальное (png, bmp, …) – через Pillow.
    """
    p = Path(path).expanduser()
    data = _check_rgb8(rgb8)
    if p.suffix.lower() == ".ppm":
        save_ppm(p, data)
    else:
        Image.fromarray(np.ascontiguousarray(data)).save(p)
    logger.info(f"[PPM] Saved {p} ({data.shape[1]}x{data.shape[0]})")
    return p
