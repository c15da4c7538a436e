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

from dataclasses import dataclass
from typing import Tuple

from .config import LayoutConfig


@dataclass(frozen=True)
class Region:
    """Plot area of one chart in canvas pixels (origin top-left)."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def overlaps(self, other: 'Region') -> bool:
        return (self.x < other.right and other.x < self.right
                and self.y < other.bottom and other.y < self.bottom)


@dataclass(frozen=True)
class ChartLayout:
    width: float
    height: float
    pie: Region
    pcp: Region
    bar: Region
    pie_radius: float


def plan_layout(width: float, height: float, config: LayoutConfig = LayoutConfig()) -> ChartLayout:
    """Splits the canvas into pie (top left), PCP (bottom left) and bar (right) plot areas.

    Zero or negative sizes are not guarded and give degenerate regions.
    """
    m = config.margin
    h_space = width * config.horizontal_spacing
    v_space = height * config.vertical_spacing

    pie_width = width * config.left_width_ratio - m.left - m.right
    pie_height = height * config.pie_height_ratio - m.top - m.bottom
    pie = Region(m.left, m.top, pie_width, pie_height)

    pcp_height = height * config.pcp_height_ratio - m.top - config.pcp_bottom_margin
    pcp = Region(m.left, m.top + pie_height + m.bottom + v_space, pie_width, pcp_height)

    bar_x = m.left + pie_width + m.right + h_space
    bar = Region(bar_x, m.top, width - bar_x - m.right, height - m.top - m.bottom)

    return ChartLayout(
        width=width,
        height=height,
        pie=pie,
        pcp=pcp,
        bar=bar,
        pie_radius=min(pie_width, pie_height) / 2,
    )
