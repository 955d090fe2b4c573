# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры.

Config – синглтон, поэтому каждый тест получает «чистый» экземпляр,
а уровень логгера восстанавливается после теста.
"""

import pytest

from tracer3d.math import Vec3
from tracer3d.utils import Config, logger


@pytest.fixture(autouse=True)
def _isolated_state():
    level = logger.level
    Config.reset()
    yield
    Config.reset()
    logger.setLevel(level)


@pytest.fixture
def config_path(tmp_path):
    """Путь к ещё не существующему JSON‑конфигу во временной папке."""
    return tmp_path / "tracer3d.json"


@pytest.fixture
def abc():
    """Три вектора с точно представимыми во float32 компонентами."""
    return Vec3(1.5, -2.25, 3.0), Vec3(0.5, 4.0, -8.0), Vec3(-0.125, 16.0, 2.0)
