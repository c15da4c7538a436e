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
Geometry phase for the three salary charts.

Each builder is a pure function of its data slice, the planned layout and the
chart configuration, returning a chart descriptor for the renderer.
"""

import sys
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Sequence, Tuple

import pandas as pd

from .aggregate import count_by, mean_by
from .config import ChartConfig, DEFAULT_CONFIG
from .layout import ChartLayout, Region, plan_layout
from .scales import LinearScale, PointScale, extent, pie_angles, salary_domain, year_domain
from .scene import Axis, BarChart, Label, Legend, LegendEntry, PcpChart, PieChart, Polyline, Scene

PIE_TITLE = "Company Size Distribution"
BAR_TITLE = "Average Salary by Experience Level"
BAR_CATEGORY_TITLE = "Experience Level"
BAR_VALUE_TITLE = "Average Salary (USD)"
PCP_TITLE = "Salary vs Year vs Remote Work (by Experience)"
PCP_CAPTION = "Line colors indicate Experience Level:"


def _title(x: float, y: float, text: str, config: ChartConfig) -> Label:
    return Label(x, y, text, size=config.title_font_size, bold=True)


# --- Pie Chart ---

def build_pie_chart(counts: pd.Series, layout: ChartLayout, config: ChartConfig = DEFAULT_CONFIG) -> PieChart:
    """One slice per company size, swept in the order of ``counts``."""
    region = layout.pie
    margin = config.layout.margin
    cx, _ = region.center

    keys = tuple(counts.index)
    names = tuple(config.size_names.get(key, str(key)) for key in keys)
    colors = tuple(config.size_color(key) for key in keys)
    entries = tuple(LegendEntry(key, name, color) for key, name, color in zip(keys, names, colors))

    return PieChart(
        region=region,
        keys=keys,
        names=names,
        values=tuple(float(v) for v in counts.values),
        colors=colors,
        angles=tuple(pie_angles(counts.values)),
        stroke_width=config.pie_stroke_width,
        legend=Legend(region.right + 20, region.y, entries),
        title=_title(cx, region.y - margin.top / 2 + 10, PIE_TITLE, config),
    )


# --- Bar Chart ---

def bar_value_scale(means: pd.Series, region: Region, config: ChartConfig = DEFAULT_CONFIG) -> LinearScale:
    """Zero-based salary scale whose top is the largest mean rounded up to a tick."""
    top = float(means.max()) if not means.empty else 0.0
    return LinearScale((0, top), (region.height, 0)).nice(config.bar_axis.count or 10)


def build_bar_chart(means: pd.Series, layout: ChartLayout, config: ChartConfig = DEFAULT_CONFIG) -> BarChart:
    """One bar per experience level present, in the order of ``means``."""
    region = layout.bar
    margin = config.layout.margin
    y = bar_value_scale(means, region, config)

    present = means.dropna()
    keys = tuple(present.index)
    return BarChart(
        region=region,
        keys=keys,
        names=tuple(config.exp_names.get(key, str(key)) for key in keys),
        values=tuple(float(v) for v in present.values),
        colors=tuple(config.exp_color(key) for key in keys),
        padding=config.bar_padding,
        category_title=BAR_CATEGORY_TITLE,
        label_angle=config.bar_label_angle,
        value_axis=Axis('salary_in_usd', BAR_VALUE_TITLE, y.domain, config.bar_axis),
        title=_title(region.x + region.width / 2, region.y - margin.top / 2 + 10, BAR_TITLE, config),
    )


# --- Parallel Coordinates ---

@dataclass(frozen=True)
class PcpScales:
    x: PointScale
    y: Dict[str, LinearScale]


def build_pcp_scales(records: pd.DataFrame, region: Region, config: ChartConfig = DEFAULT_CONFIG) -> PcpScales:
    """One vertical scale per dimension plus the point scale placing the axes."""
    y = {}
    for dim in config.dimensions:
        values = records[dim] if dim in records.columns else []
        if dim == 'salary_in_usd':
            domain = salary_domain(values, config.salary_padding)
        elif dim == 'remote_ratio':
            domain = config.remote_domain
        elif dim == 'work_year':
            domain = year_domain(values)
        else:
            domain = extent(values)
        y[dim] = LinearScale(domain, (region.height, 0))

    x = PointScale(config.dimensions, (0, region.width), padding=config.pcp_point_padding)
    return PcpScales(x=x, y=y)


def pcp_points(record: Mapping[str, Any], scales: PcpScales,
               dimensions: Sequence[str]) -> List[Tuple[float, float]]:
    """Points of one record's polyline, in plot-area coordinates.

    A dimension whose value is missing or outside its scale's domain (bounds
    inclusive) contributes no point; the remaining points are joined directly.
    """
    points = []
    for dim in dimensions:
        scale = scales.y[dim]
        value = record.get(dim)
        if scale.contains(value):
            points.append((scales.x(dim), scale(value)))
    return points


def build_pcp_chart(records: pd.DataFrame, layout: ChartLayout, config: ChartConfig = DEFAULT_CONFIG) -> PcpChart:
    """One translucent polyline per record across the year, salary and remote axes."""
    region = layout.pcp
    margin = config.layout.margin
    scales = build_pcp_scales(records, region, config)

    lines = []
    for index, record in zip(records.index, records.to_dict('records')):
        lines.append(Polyline(
            tuple(pcp_points(record, scales, config.dimensions)),
            stroke=config.exp_color(record.get('experience_level')),
            stroke_width=config.pcp_stroke_width,
            opacity=config.pcp_opacity,
            key=index,
        ))

    axes = tuple(
        Axis(dim, config.dimension_names.get(dim, dim), scales.y[dim].domain,
             config.axis_ticks(dim), position=scales.x(dim))
        for dim in config.dimensions
    )
    axis_titles = tuple(
        Label(region.x + axis.position, region.y - 12, axis.title, size=config.axis_title_font_size)
        for axis in axes
    )

    legend_y = region.bottom + config.layout.pcp_bottom_margin - 25
    entries = tuple(
        LegendEntry(level, config.exp_names.get(level, level), config.exp_color(level))
        for level in config.exp_order
    )
    return PcpChart(
        region=region,
        axes=axes,
        lines=tuple(lines),
        axis_titles=axis_titles,
        legend=Legend(region.x, legend_y, entries, horizontal=True),
        caption=Label(region.x, legend_y - 10, PCP_CAPTION,
                      size=config.axis_title_font_size, anchor='start', italic=True),
        title=_title(region.x + region.width / 2, region.y - margin.top / 2 + 5, PCP_TITLE, config),
    )


# --- Whole Canvas ---

def build_scene(records: pd.DataFrame, width: float, height: float,
                config: ChartConfig = DEFAULT_CONFIG) -> Scene:
    """Aggregates the records and lays out the pie, bar and PCP charts on one canvas."""
    layout = plan_layout(width, height, config.layout)

    size_counts = count_by(records, 'company_size', order=config.size_order)
    avg_salary = mean_by(records, 'experience_level', 'salary_in_usd', order=config.exp_order)
    print(f"DEBUG: size counts={size_counts.to_dict()}", file=sys.stderr)
    print(f"DEBUG: mean salary by level={avg_salary.to_dict()}", file=sys.stderr)

    pie = build_pie_chart(size_counts, layout, config)
    bar = build_bar_chart(avg_salary, layout, config)
    pcp = build_pcp_chart(records, layout, config)
    return Scene(width=width, height=height, pie=pie, bar=bar, pcp=pcp)
