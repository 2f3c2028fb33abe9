# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры.
Каждый тест получает собственный экземпляр Config, указывающий во
временный каталог, чтобы не читать linmath3d.json из рабочей папки.
"""

from math import pi

import pytest

from linmath3d.math import Vec, Quat
from linmath3d.utils.config import Config, ENV_VAR


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setattr(Config, "_instance", None)
    monkeypatch.setenv(ENV_VAR, str(tmp_path / "linmath3d.json"))
    yield tmp_path / "linmath3d.json"
    Config._instance = None


# ----------------------------------------------------------------------
# Набор поворотов (угол, ось), покрывающий обе ветки Quat.from_mat
# ----------------------------------------------------------------------
ROTATIONS = [
    (0.0, Vec(0, 0, 1)),
    (pi / 2, Vec(0, 1, 0)),
    (pi / 3, Vec(1, 0, 0)),
    (2.5, Vec(1, 2, 3).normalize()),
    (pi, Vec(1, 0, 0)),
    (pi, Vec(0, 1, 0)),
    (pi, Vec(0, 0, 1)),
    (3.0, Vec(-1, 1, 0.5).normalize()),
    (-2.8, Vec(0.2, -0.9, 0.4).normalize()),
]


@pytest.fixture(params=ROTATIONS, ids=lambda r: f"{r[0]:.2f}")
def rotation(request) -> Quat:
    angle, axis = request.param
    return Quat.from_axis_angle(angle, axis)
