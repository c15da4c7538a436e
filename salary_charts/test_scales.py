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
Tests for the coordinate scales and domain builders.
"""

import math
import sys

from salary_charts.scales import (
    BandScale,
    LinearScale,
    PointScale,
    pie_angles,
    salary_domain,
    year_domain,
)
from salary_charts.testing import print_summary, run_checks


def test_linear_scale_inverted_range():
    scale = LinearScale((10, 90), (400, 0))
    assert math.isclose(scale(10), 400)
    assert math.isclose(scale(90), 0, abs_tol=1e-9)
    assert math.isclose(scale(50), 200)
    assert math.isclose(scale.invert(100), 70)


def test_linear_scale_contains_is_inclusive():
    scale = LinearScale((0, 100), (250, 0))
    assert scale.contains(0)
    assert scale.contains(100)
    assert scale.contains(42.5)
    assert not scale.contains(-0.01)
    assert not scale.contains(100.01)
    assert not scale.contains(float('nan'))
    assert not scale.contains(None)
    assert not scale.contains("abc")


def test_zero_width_domain_maps_to_midpoint():
    scale = LinearScale((5, 5), (100, 0))
    assert scale(5) == 50
    assert scale(7) == 50


def test_nice_extends_domain_outward():
    scale = LinearScale((0, 155000), (500, 0)).nice(10)
    assert scale.domain == (0, 160000)
    assert scale.range == (500, 0)
    assert LinearScale((0, 93000), (0, 1)).nice(10).domain == (0, 100000)
    assert LinearScale((0, 55000), (0, 1)).nice(10).domain == (0, 55000)
    assert LinearScale((3, 3), (0, 1)).nice().domain == (3, 3)


def test_band_scale_padding():
    scale = BandScale(['a', 'b', 'c'], (0, 100), padding_inner=0.2, padding_outer=0.2)
    assert math.isclose(scale.step, 31.25)
    assert math.isclose(scale.bandwidth, 25)
    assert math.isclose(scale('a'), 6.25)
    assert math.isclose(scale('b'), 37.5)
    assert math.isclose(scale('c'), 68.75)
    assert scale('z') is None


def test_point_scale_places_axes_evenly():
    scale = PointScale(['work_year', 'salary_in_usd', 'remote_ratio'], (0, 400), padding=1)
    assert scale.bandwidth == 0
    assert [scale(d) for d in ['work_year', 'salary_in_usd', 'remote_ratio']] == [100, 200, 300]


def test_pie_angles_are_proportional_and_ordered():
    angles = pie_angles([2, 1])
    assert angles[0][0] == 0
    assert math.isclose(angles[0][1], 4 * math.pi / 3)
    assert math.isclose(angles[1][1], 2 * math.pi)
    assert pie_angles([0, 0]) == [(0.0, 0.0), (0.0, 0.0)]
    assert pie_angles([]) == []


def test_salary_domain_padding():
    assert salary_domain([50000, 150000, 60000]) == (45000, 155000)
    # no padding below a minimum already at zero
    assert salary_domain([0, 100]) == (0, 105)
    # padding would go negative, clamped
    assert salary_domain([2, 100])[0] == 0


def test_year_domain_widens_single_year():
    assert year_domain([2022, 2022, 2022]) == (2021.5, 2022.5)
    assert year_domain([2020, 2023, 2021]) == (2020, 2023)


def main():
    """Run all tests."""
    print("=== Scale Test Suite ===")
    results = run_checks(globals())
    print_summary(results)
    return results["failed"] == 0


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
