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

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

# --- Fixed Enumerations ---

EXP_LEVEL_ORDER: Tuple[str, ...] = ('EN', 'MI', 'SE', 'EX')
EXP_LEVEL_NAMES: Dict[str, str] = {'EN': 'Entry', 'MI': 'Mid', 'SE': 'Senior', 'EX': 'Executive'}

SIZE_ORDER: Tuple[str, ...] = ('S', 'M', 'L')
SIZE_NAMES: Dict[str, str] = {'S': 'Small', 'M': 'Medium', 'L': 'Large'}

PCP_DIMENSIONS: Tuple[str, ...] = ('work_year', 'salary_in_usd', 'remote_ratio')
PCP_DIMENSION_NAMES: Dict[str, str] = {
    'work_year': 'Year',
    'salary_in_usd': 'Salary (USD)',
    'remote_ratio': 'Remote Ratio (%)',
}

NUMERIC_COLUMNS: Tuple[str, ...] = ('work_year', 'salary_in_usd', 'remote_ratio')
REQUIRED_COLUMNS: Tuple[str, ...] = (
    'work_year', 'experience_level', 'company_size', 'salary_in_usd', 'remote_ratio'
)

# category10, first four entries
EXP_COLORS: Dict[str, str] = {'EN': '#1f77b4', 'MI': '#ff7f0e', 'SE': '#2ca02c', 'EX': '#d62728'}
SIZE_COLORS: Dict[str, str] = {'S': '#1f77b4', 'M': '#2ca02c', 'L': '#ff7f0e'}
UNKNOWN_COLOR = '#7f7f7f'

DEFAULT_WIDTH = 1400
DEFAULT_HEIGHT = 900


# --- Configuration Objects ---

@dataclass(frozen=True)
class Margins:
    top: float
    right: float
    bottom: float
    left: float


@dataclass(frozen=True)
class AxisTicks:
    """Tick rules handed to plotly for one value axis.

    ``count`` becomes ``nticks`` and ``format`` a d3-format ``tickformat``;
    a ``step`` pins ticks to multiples of it instead.
    """
    count: Optional[int] = None
    format: str = ''
    suffix: str = ''
    step: Optional[float] = None


BAR_AXIS = AxisTicks(count=10, format='$,.0f')
PCP_AXES: Dict[str, AxisTicks] = {
    'work_year': AxisTicks(format='d', step=1),
    'salary_in_usd': AxisTicks(count=5, format='$,.2s'),
    'remote_ratio': AxisTicks(count=5, format='d', suffix='%'),
}


@dataclass(frozen=True)
class LayoutConfig:
    """Proportional splits and margins used to carve the canvas into chart regions."""
    margin: Margins = Margins(top=60, right=30, bottom=80, left=100)
    pcp_bottom_margin: float = 50
    left_width_ratio: float = 0.42
    horizontal_spacing: float = 0.08
    vertical_spacing: float = 0.05
    pie_height_ratio: float = 0.45
    pcp_height_ratio: float = 0.40


@dataclass(frozen=True)
class ChartConfig:
    """Everything the chart builders and the renderer need, built once per run."""
    layout: LayoutConfig = field(default_factory=LayoutConfig)

    exp_order: Tuple[str, ...] = EXP_LEVEL_ORDER
    exp_names: Dict[str, str] = field(default_factory=lambda: dict(EXP_LEVEL_NAMES))
    exp_colors: Dict[str, str] = field(default_factory=lambda: dict(EXP_COLORS))
    size_order: Tuple[str, ...] = SIZE_ORDER
    size_names: Dict[str, str] = field(default_factory=lambda: dict(SIZE_NAMES))
    size_colors: Dict[str, str] = field(default_factory=lambda: dict(SIZE_COLORS))
    unknown_color: str = UNKNOWN_COLOR

    dimensions: Tuple[str, ...] = PCP_DIMENSIONS
    dimension_names: Dict[str, str] = field(default_factory=lambda: dict(PCP_DIMENSION_NAMES))

    salary_padding: float = 0.05
    remote_domain: Tuple[float, float] = (0.0, 100.0)
    bar_padding: float = 0.2
    bar_axis: AxisTicks = BAR_AXIS
    bar_label_angle: float = -30
    pcp_axes: Dict[str, AxisTicks] = field(default_factory=lambda: dict(PCP_AXES))
    pcp_point_padding: float = 1.0
    pcp_opacity: float = 0.3
    pcp_stroke_width: float = 1.5
    pie_stroke_width: float = 2.0

    title_font_size: int = 16
    label_font_size: int = 12
    axis_title_font_size: int = 11
    tick_font_size: int = 10
    legend_swatch: float = 15
    pcp_legend_item_width: float = 85

    def exp_color(self, level) -> str:
        return self.exp_colors.get(level, self.unknown_color)

    def size_color(self, size) -> str:
        return self.size_colors.get(size, self.unknown_color)

    def axis_ticks(self, dimension) -> AxisTicks:
        return self.pcp_axes.get(dimension, AxisTicks(count=5))


DEFAULT_CONFIG = ChartConfig()
