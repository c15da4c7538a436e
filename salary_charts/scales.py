# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (C) 2024 Jonathan Lee
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License version 3
# as published by the Free Software Foundation.
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see https://www.gnu.org/licenses/.

"""
Coordinate scales mapping data values to pixels or angles.

Scales are immutable: operations such as ``nice`` return a new scale.
"""

import math
from typing import Any, Iterable, List, Optional, Sequence, Tuple

import pandas as pd

E10 = math.sqrt(50)
E5 = math.sqrt(10)
E2 = math.sqrt(2)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _step(start: float, stop: float, count: int) -> float:
    # 1, 2 or 5 times a power of ten giving roughly ``count`` intervals
    if count <= 0:
        return 0.0
    step0 = abs(stop - start) / count
    if step0 == 0 or not math.isfinite(step0):
        return 0.0
    step1 = 10 ** math.floor(math.log10(step0))
    error = step0 / step1
    if error >= E10:
        step1 *= 10
    elif error >= E5:
        step1 *= 5
    elif error >= E2:
        step1 *= 2
    return step1 if stop >= start else -step1


class LinearScale:
    """Continuous numeric mapping from ``domain`` to ``range``."""

    def __init__(self, domain: Tuple[float, float], range_: Tuple[float, float]):
        self.domain = (float(domain[0]), float(domain[1]))
        self.range = (float(range_[0]), float(range_[1]))

    def __repr__(self) -> str:
        return f"LinearScale(domain={self.domain}, range={self.range})"

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            return (r0 + r1) / 2
        t = (float(value) - d0) / (d1 - d0)
        return r0 + t * (r1 - r0)

    def invert(self, position: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if r1 == r0:
            return (d0 + d1) / 2
        t = (float(position) - r0) / (r1 - r0)
        return d0 + t * (d1 - d0)

    def contains(self, value: Any) -> bool:
        """Inclusive domain check; missing or non-numeric values are never contained."""
        if _is_missing(value):
            return False
        try:
            v = float(value)
        except (TypeError, ValueError):
            return False
        lo, hi = min(self.domain), max(self.domain)
        return lo <= v <= hi

    def nice(self, count: int = 10) -> 'LinearScale':
        """Extend the domain outward to round values."""
        d0, d1 = self.domain
        if not (math.isfinite(d0) and math.isfinite(d1)) or d0 == d1:
            return LinearScale(self.domain, self.range)
        reverse = d1 < d0
        lo, hi = (d1, d0) if reverse else (d0, d1)
        prestep = None
        for _ in range(10):
            step = _step(lo, hi, count)
            if step == 0 or step == prestep:
                break
            lo = math.floor(lo / step) * step
            hi = math.ceil(hi / step) * step
            prestep = step
        return LinearScale((hi, lo) if reverse else (lo, hi), self.range)


class BandScale:
    """Categorical mapping dividing the range into equal bands, one per category."""

    def __init__(self, domain: Sequence[Any], range_: Tuple[float, float],
                 padding_inner: float = 0.0, padding_outer: float = 0.0, align: float = 0.5):
        self.domain = list(domain)
        self.range = (float(range_[0]), float(range_[1]))
        self.padding_inner = padding_inner
        self.padding_outer = padding_outer
        self.align = align

        n = len(self.domain)
        r0, r1 = self.range
        start, stop = (r1, r0) if r1 < r0 else (r0, r1)
        self.step = (stop - start) / max(1, n - padding_inner + padding_outer * 2)
        start += (stop - start - self.step * (n - padding_inner)) * align
        self.bandwidth = self.step * (1 - padding_inner)
        positions = [start + self.step * i for i in range(n)]
        if r1 < r0:
            positions.reverse()
        self._positions = dict(zip(self.domain, positions))

    def __repr__(self) -> str:
        return f"BandScale(domain={self.domain}, range={self.range})"

    def __call__(self, value: Any) -> Optional[float]:
        return self._positions.get(value)


class PointScale(BandScale):
    """Band scale with zero-width bands, used to place parallel axes."""

    def __init__(self, domain: Sequence[Any], range_: Tuple[float, float],
                 padding: float = 0.0, align: float = 0.5):
        super().__init__(domain, range_, padding_inner=1.0, padding_outer=padding, align=align)


def pie_angles(values: Iterable[float]) -> List[Tuple[float, float]]:
    """Clockwise (start, end) angles from 12 o'clock, proportional to each value.

    Input order is kept; a zero total yields zero-size sweeps.
    """
    values = [0.0 if _is_missing(v) else max(0.0, float(v)) for v in values]
    total = sum(values)
    k = 2 * math.pi / total if total else 0.0
    angles = []
    a0 = 0.0
    for v in values:
        a1 = a0 + v * k
        angles.append((a0, a1))
        a0 = a1
    return angles


# --- Domain Builders ---

def extent(values: Iterable[Any]) -> Tuple[float, float]:
    """Min and max of the defined values, NaN when there are none."""
    numeric = pd.to_numeric(pd.Series(list(values), dtype=object), errors='coerce').dropna()
    if numeric.empty:
        return (math.nan, math.nan)
    return (float(numeric.min()), float(numeric.max()))


def salary_domain(values: Iterable[Any], padding: float = 0.05) -> Tuple[float, float]:
    """Observed salary range padded by a fraction of its span, low end clamped at zero."""
    lo, hi = extent(values)
    pad = (hi - lo) * padding
    min_val = lo if lo <= 0 else lo - pad
    return (0.0 if min_val < 0 else min_val, hi + pad)


def year_domain(values: Iterable[Any]) -> Tuple[float, float]:
    """Observed year range, widened by half a year each way when only one year is present."""
    lo, hi = extent(values)
    if lo == hi:
        return (lo - 0.5, hi + 0.5)
    return (lo, hi)
