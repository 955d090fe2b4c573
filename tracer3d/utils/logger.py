# tracer3d/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер. Всё пишется в stderr, чтобы stdout оставался
# свободным для вывода изображения.
# ---------------------------------------------------------------

import logging


def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("Tracer3D")


logger = init_logger()


def set_level(level) -> None:
    """Уровень логгера по имени ("DEBUG") или числу."""
    if isinstance(level, str):
        number = logging.getLevelName(level.upper())
        if not isinstance(number, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = number
    logger.setLevel(level)
