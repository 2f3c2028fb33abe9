# linmath3d/math/scalar.py
"""Скалярные помощники."""


def clamp(value: float, min_value: float, max_value: float) -> float:
    """Ограничить `value` отрезком [min_value, max_value] (без «заворачивания»)."""
    if value > max_value:
        return max_value
    elif value < min_value:
        return min_value
    return value
