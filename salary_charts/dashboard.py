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
Load → aggregate → draw pipeline for the salary dashboard.

A data load failure aborts the run before anything is drawn; it is reported
on stderr and the pipeline returns ``None``.
"""

import sys
import traceback
from typing import Optional

import pandas as pd

from .charts import build_scene
from .config import ChartConfig, DEFAULT_CONFIG, DEFAULT_HEIGHT, DEFAULT_WIDTH
from .loader import DataUnavailableError, load_salaries, load_salaries_async, validate_salary_data
from .renderer import save_dashboard_html, save_dashboard_json
from .scene import Scene


def _report_warnings(records: pd.DataFrame) -> None:
    validation = validate_salary_data(records)
    for warning in validation['warnings']:
        print(f"WARNING: {warning}", file=sys.stderr)


def _draw(records: pd.DataFrame, output_path: str, width: float, height: float,
          config: ChartConfig, fmt: str) -> str:
    _report_warnings(records)
    scene = build_scene(records, width, height, config)
    if fmt == 'json':
        return save_dashboard_json(scene, output_path, config)
    return save_dashboard_html(scene, output_path, config)


def build_dashboard_scene(csv_path: str, width: float = DEFAULT_WIDTH, height: float = DEFAULT_HEIGHT,
                          config: ChartConfig = DEFAULT_CONFIG) -> Scene:
    """Geometry for the whole canvas without drawing it; load errors propagate."""
    records = load_salaries(csv_path)
    _report_warnings(records)
    return build_scene(records, width, height, config)


def render_dashboard(csv_path: str, output_path: str, width: float = DEFAULT_WIDTH,
                     height: float = DEFAULT_HEIGHT, config: ChartConfig = DEFAULT_CONFIG,
                     fmt: str = 'html') -> Optional[str]:
    """Renders the three charts from ``csv_path`` into ``output_path``."""
    try:
        records = load_salaries(csv_path)
    except DataUnavailableError as e:
        print(f"Error loading or processing data: {str(e)}", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
        return None
    return _draw(records, output_path, width, height, config, fmt)


async def render_dashboard_async(csv_path: str, output_path: str, width: float = DEFAULT_WIDTH,
                                 height: float = DEFAULT_HEIGHT, config: ChartConfig = DEFAULT_CONFIG,
                                 fmt: str = 'html') -> Optional[str]:
    """Same as ``render_dashboard`` but suspends while the dataset loads."""
    try:
        records = await load_salaries_async(csv_path)
    except DataUnavailableError as e:
        print(f"Error loading or processing data: {str(e)}", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
        return None
    return _draw(records, output_path, width, height, config, fmt)
