"""Parameter definitions for slice-based volume estimation."""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

from .model import AXES


@dataclass(frozen=True)
class EstimationParameters:
    """Numerical settings shared by every volume estimate.

    ``slice_count`` is the number of trapezoidal bands, ``up_axis`` names the
    elevation coordinate and ``precision`` is the number of decimals used when
    merging coincident intersection points.
    """

    slice_count: int = 100
    up_axis: str = "y"
    precision: int = 6

    def __post_init__(self) -> None:
        if int(self.slice_count) != self.slice_count or self.slice_count < 1:
            raise ValueError(f"slice_count must be a positive integer, got {self.slice_count!r}")
        if self.up_axis not in AXES:
            raise ValueError(f"Unknown up axis {self.up_axis!r}: expected one of 'x', 'y', 'z'")
        if int(self.precision) != self.precision or self.precision < 0:
            raise ValueError(f"precision must be a non-negative integer, got {self.precision!r}")
        # JSON overrides may spell whole numbers as floats.
        object.__setattr__(self, "slice_count", int(self.slice_count))
        object.__setattr__(self, "precision", int(self.precision))


DEFAULT_PARAMS = EstimationParameters()


def load_parameters(path: Optional[Path]) -> EstimationParameters:
    """Read estimation parameters from a JSON object, defaults for ``None``.

    Keys left out of the file keep their default values. Unknown keys and
    values that are not a JSON object raise ``ValueError``.
    """

    if path is None:
        return DEFAULT_PARAMS
    with Path(path).open("r", encoding="utf-8") as fp:
        data = json.load(fp)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object of parameters in {path}")
    known = {field.name for field in fields(EstimationParameters)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown estimation parameters in {path}: {', '.join(unknown)}")
    return EstimationParameters(**data)
