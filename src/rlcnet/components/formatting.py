from __future__ import annotations
import math

__all__ = ["format_value"]


def format_value(value: float, unit: str) -> str:
    """Formats `value` with an SI prefix, e.g. 1e-6 F -> '1µF'."""
    if not math.isfinite(value):
        return f"{value}{unit}"

    prefixes = [
        (1e9, "G"),
        (1e6, "M"),
        (1e3, "k"),
        (1.0, ""),
        (1e-3, "m"),
        (1e-6, "µ"),
        (1e-9, "n"),
        (1e-12, "p"),
    ]

    for scale, prefix in prefixes:
        if abs(value) >= scale:
            return f"{value / scale:g}{prefix}{unit}"
    return f"{value:g}{unit}"
