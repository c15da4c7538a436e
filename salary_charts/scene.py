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
Chart descriptors produced by the geometry phase and consumed by the renderer.

Regions, labels and legend origins are canvas pixels with y growing
downward; polyline points are relative to their chart's plot area. Tick
placement, tick labels and pie wedges are left to plotly.
"""

from dataclasses import dataclass
from typing import Any, Tuple

from .config import AxisTicks
from .layout import Region


@dataclass(frozen=True)
class Label:
    x: float
    y: float
    text: str
    size: int = 12
    anchor: str = 'middle'
    bold: bool = False
    italic: bool = False


@dataclass(frozen=True)
class LegendEntry:
    key: Any
    label: str
    color: str


@dataclass(frozen=True)
class Legend:
    x: float
    y: float
    entries: Tuple[LegendEntry, ...]
    horizontal: bool = False


@dataclass(frozen=True)
class Axis:
    """A value axis: data domain, title and the tick rules plotly applies."""
    key: Any
    title: str
    domain: Tuple[float, float]
    ticks: AxisTicks
    # plot-area x of a vertical parallel axis
    position: float = 0.0


@dataclass(frozen=True)
class Polyline:
    points: Tuple[Tuple[float, float], ...]
    stroke: str
    stroke_width: float = 1.5
    opacity: float = 1.0
    key: Any = None


@dataclass(frozen=True)
class PieChart:
    region: Region
    keys: Tuple[Any, ...]
    names: Tuple[str, ...]
    values: Tuple[float, ...]
    colors: Tuple[str, ...]
    # clockwise (start, end) sweeps from 12 o'clock, in slice order
    angles: Tuple[Tuple[float, float], ...]
    stroke_width: float
    legend: Legend
    title: Label


@dataclass(frozen=True)
class BarChart:
    region: Region
    keys: Tuple[Any, ...]
    names: Tuple[str, ...]
    values: Tuple[float, ...]
    colors: Tuple[str, ...]
    padding: float
    category_title: str
    label_angle: float
    value_axis: Axis
    title: Label


@dataclass(frozen=True)
class PcpChart:
    region: Region
    axes: Tuple[Axis, ...]
    lines: Tuple[Polyline, ...]
    axis_titles: Tuple[Label, ...]
    legend: Legend
    caption: Label
    title: Label


@dataclass(frozen=True)
class Scene:
    width: float
    height: float
    pie: PieChart
    bar: BarChart
    pcp: PcpChart

    @property
    def labels(self) -> Tuple[Label, ...]:
        """Free-standing text: the three titles, the PCP axis titles and caption."""
        return (self.pie.title, self.bar.title, self.pcp.title) + self.pcp.axis_titles + (self.pcp.caption,)
