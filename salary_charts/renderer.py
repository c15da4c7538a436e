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
Drawing phase: turns chart descriptors into one plotly figure.

Each chart gets its own plotly axes placed over its canvas region, so tick
placement and tick formatting come from plotly's d3-format rules.
"""

import math
import os
import sys
import webbrowser
from typing import Any, Dict, List, Optional, Tuple

import plotly.graph_objects as go

from .config import AxisTicks, ChartConfig, DEFAULT_CONFIG
from .layout import Region
from .scene import BarChart, Label, Legend, PcpChart, PieChart, Scene

TEXT_COLOR = '#000000'
AXIS_COLOR = '#000000'
HTML_CONFIG = {'displayModeBar': False, 'displaylogo': False}

ANCHORS = {'start': 'left', 'middle': 'center', 'end': 'right'}

AXIS_STYLE = dict(
    showline=True,
    linecolor=AXIS_COLOR,
    ticks='outside',
    ticklen=6,
    showgrid=False,
    zeroline=False,
    fixedrange=True,
)

# PCP value axes start after the bar axes (x, y) and the PCP plot axes (x2, y2)
PCP_FIRST_AXIS = 3


# --- Canvas Helpers ---

def _ratio(value: float, total: float) -> float:
    return value / total if total else 0.0


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, value))


def _paper_domain(region: Region, scene: Scene) -> Dict[str, List[float]]:
    """Canvas region as plotly paper fractions (y measured from the bottom)."""
    return dict(
        x=[_clamp(_ratio(region.x, scene.width)), _clamp(_ratio(region.right, scene.width))],
        y=[_clamp(1 - _ratio(region.bottom, scene.height)), _clamp(1 - _ratio(region.y, scene.height))],
    )


def _axis_range(domain: Tuple[float, float]) -> Optional[List[float]]:
    lo, hi = domain
    if not (math.isfinite(lo) and math.isfinite(hi)):
        return None
    return [lo, hi]


def _tick_settings(ticks: AxisTicks, config: ChartConfig) -> Dict[str, Any]:
    settings = dict(
        tickformat=ticks.format,
        ticksuffix=ticks.suffix,
        tickfont=dict(size=config.tick_font_size),
    )
    if ticks.step:
        settings.update(tickmode='linear', tick0=0, dtick=ticks.step)
    elif ticks.count:
        settings.update(nticks=ticks.count)
    return settings


def _annotation(label: Label, scene: Scene) -> Dict[str, Any]:
    text = label.text
    if label.bold:
        text = f"<b>{text}</b>"
    if label.italic:
        text = f"<i>{text}</i>"
    return dict(
        x=_ratio(label.x, scene.width),
        y=1 - _ratio(label.y, scene.height),
        xref='paper', yref='paper',
        text=text,
        showarrow=False,
        xanchor=ANCHORS.get(label.anchor, 'center'),
        yanchor='middle',
        font=dict(size=label.size, color=TEXT_COLOR),
    )


def _legend_layout(legend: Legend, scene: Scene, config: ChartConfig) -> Dict[str, Any]:
    settings = dict(
        x=_ratio(legend.x, scene.width),
        y=1 - _ratio(legend.y, scene.height),
        xanchor='left',
        yanchor='top',
        orientation='h' if legend.horizontal else 'v',
        bgcolor='rgba(0,0,0,0)',
        font=dict(size=config.label_font_size),
        itemclick=False,
        itemdoubleclick=False,
    )
    if legend.horizontal:
        settings.update(entrywidth=config.pcp_legend_item_width, entrywidthmode='pixels')
    return settings


# --- Charts ---

def _pie_trace(pie: PieChart, scene: Scene) -> go.Pie:
    return go.Pie(
        labels=list(pie.names),
        values=list(pie.values),
        marker=dict(colors=list(pie.colors), line=dict(color='white', width=pie.stroke_width)),
        sort=False,
        direction='clockwise',
        rotation=math.degrees(pie.angles[0][0]) if pie.angles else 0,
        textinfo='none',
        hoverinfo='label+value',
        domain=_paper_domain(pie.region, scene),
        legend='legend',
        showlegend=True,
    )


def _bar_trace(bar: BarChart) -> go.Bar:
    return go.Bar(
        x=list(bar.keys),
        y=list(bar.values),
        marker=dict(color=list(bar.colors)),
        hovertext=list(bar.names),
        xaxis='x',
        yaxis='y',
        showlegend=False,
    )


def _bar_axes(bar: BarChart, scene: Scene, config: ChartConfig) -> Dict[str, Any]:
    domain = _paper_domain(bar.region, scene)
    axis = bar.value_axis
    xaxis = dict(
        domain=domain['x'],
        anchor='y',
        type='category',
        categoryorder='array',
        categoryarray=list(bar.keys),
        tickmode='array',
        tickvals=list(bar.keys),
        ticktext=list(bar.names),
        tickangle=bar.label_angle,
        tickfont=dict(size=config.tick_font_size),
        title=dict(text=bar.category_title, font=dict(size=config.label_font_size)),
        **AXIS_STYLE,
    )
    yaxis = dict(
        domain=domain['y'],
        anchor='x',
        range=_axis_range(axis.domain),
        title=dict(text=axis.title, font=dict(size=config.label_font_size)),
        **_tick_settings(axis.ticks, config),
        **AXIS_STYLE,
    )
    return dict(xaxis=xaxis, yaxis=yaxis, bargap=bar.padding)


def _pcp_traces(pcp: PcpChart, config: ChartConfig) -> List[go.Scatter]:
    traces = []
    # one trace per record so overlapping lines build up density
    for line in pcp.lines:
        traces.append(go.Scatter(
            x=[x for x, _ in line.points],
            y=[y for _, y in line.points],
            mode='lines',
            line=dict(color=line.stroke, width=line.stroke_width),
            opacity=line.opacity,
            xaxis='x2',
            yaxis='y2',
            hoverinfo='skip',
            showlegend=False,
        ))

    # an overlaying axis is only drawn once a trace uses it
    for i, axis in enumerate(pcp.axes):
        lo, hi = axis.domain
        middle = (lo + hi) / 2 if math.isfinite(lo) and math.isfinite(hi) else None
        traces.append(go.Scatter(
            x=[axis.position],
            y=[middle],
            mode='markers',
            marker=dict(opacity=0),
            xaxis='x2',
            yaxis=f'y{PCP_FIRST_AXIS + i}',
            hoverinfo='skip',
            showlegend=False,
        ))

    for entry in pcp.legend.entries:
        traces.append(go.Scatter(
            x=[None],
            y=[None],
            mode='markers',
            marker=dict(symbol='square', size=config.legend_swatch, color=entry.color),
            name=entry.label,
            xaxis='x2',
            yaxis='y2',
            legend='legend2',
            showlegend=True,
        ))
    return traces


def _pcp_axes(pcp: PcpChart, scene: Scene, config: ChartConfig) -> Dict[str, Any]:
    region = pcp.region
    domain = _paper_domain(region, scene)
    axes = dict(
        xaxis2=dict(domain=domain['x'], anchor='y2', range=[0, region.width], visible=False, fixedrange=True),
        yaxis2=dict(domain=domain['y'], anchor='x2', range=[region.height, 0], visible=False, fixedrange=True),
    )
    for i, axis in enumerate(pcp.axes):
        axes[f'yaxis{PCP_FIRST_AXIS + i}'] = dict(
            overlaying='y2',
            anchor='free',
            position=_clamp(_ratio(region.x + axis.position, scene.width)),
            side='left',
            range=_axis_range(axis.domain),
            **_tick_settings(axis.ticks, config),
            **AXIS_STYLE,
        )
    return axes


def _get_base_layout(scene: Scene) -> go.Layout:
    """Canvas-sized layout with no outer margin, so paper fractions map to canvas pixels."""
    return go.Layout(
        template="plotly_white",
        width=scene.width,
        height=scene.height,
        autosize=False,
        margin=dict(l=0, r=0, t=0, b=0),
        plot_bgcolor="white",
        paper_bgcolor="white",
        font=dict(color=TEXT_COLOR),
        showlegend=True,
    )


def draw_scene(scene: Scene, config: ChartConfig = DEFAULT_CONFIG) -> go.Figure:
    """Draws the pie, bar and PCP charts, in that order, onto one figure."""
    fig = go.Figure(layout=_get_base_layout(scene))
    fig.add_trace(_pie_trace(scene.pie, scene))
    fig.add_trace(_bar_trace(scene.bar))
    fig.add_traces(_pcp_traces(scene.pcp, config))

    fig.update_layout(
        legend=_legend_layout(scene.pie.legend, scene, config),
        legend2=_legend_layout(scene.pcp.legend, scene, config),
        annotations=[_annotation(label, scene) for label in scene.labels],
        **_bar_axes(scene.bar, scene, config),
        **_pcp_axes(scene.pcp, scene, config),
    )
    print(f"DEBUG: Drew {len(fig.data)} traces and {len(scene.labels)} labels", file=sys.stderr)
    return fig


# --- Output ---

def render_dashboard_json(scene: Scene, config: ChartConfig = DEFAULT_CONFIG) -> str:
    return draw_scene(scene, config).to_json()


def save_dashboard_json(scene: Scene, output_path: str, config: ChartConfig = DEFAULT_CONFIG) -> str:
    draw_scene(scene, config).write_json(output_path)
    return output_path


def save_dashboard_html(scene: Scene, output_path: str, config: ChartConfig = DEFAULT_CONFIG) -> str:
    """Renders the scene to a standalone HTML page loading plotly from the CDN."""
    fig = draw_scene(scene, config)
    fig.write_html(output_path, config=HTML_CONFIG, include_plotlyjs='cdn')
    return output_path


def open_dashboard_in_browser(html_path: str) -> str:
    """Opens a rendered dashboard HTML file in the default browser."""
    url = f'file://{os.path.abspath(html_path)}'
    webbrowser.open(url)
    return url
