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

import math
import sys

from salary_charts.config import LayoutConfig
from salary_charts.layout import Region, plan_layout
from salary_charts.testing import print_summary, run_checks


def test_default_viewport_regions():
    layout = plan_layout(1400, 900)
    assert math.isclose(layout.pie.width, 458)
    assert math.isclose(layout.pie.height, 265)
    assert math.isclose(layout.pie_radius, 132.5)
    assert (layout.pie.x, layout.pie.y) == (100, 60)

    assert math.isclose(layout.pcp.y, 450)
    assert math.isclose(layout.pcp.height, 250)
    assert math.isclose(layout.pcp.width, layout.pie.width)

    assert math.isclose(layout.bar.x, 700)
    assert math.isclose(layout.bar.width, 670)
    assert math.isclose(layout.bar.height, 760)


def test_regions_do_not_overlap():
    for width, height in [(1400, 900), (1920, 1080), (1024, 768)]:
        layout = plan_layout(width, height)
        assert not layout.pie.overlaps(layout.pcp)
        assert not layout.pie.overlaps(layout.bar)
        assert not layout.pcp.overlaps(layout.bar)


def test_degenerate_viewport_is_not_guarded():
    layout = plan_layout(0, 0)
    assert layout.pie.width < 0
    assert layout.bar.height < 0


def test_region_helpers():
    region = Region(10, 20, 100, 50)
    assert region.right == 110
    assert region.bottom == 70
    assert region.center == (60, 45)
    assert region.overlaps(Region(100, 60, 10, 10))
    assert not region.overlaps(Region(110, 20, 10, 10))


def test_pcp_bottom_margin_sets_pcp_height():
    layout = plan_layout(1400, 900, LayoutConfig(pcp_bottom_margin=80))
    assert math.isclose(layout.pcp.height, 220)
    assert math.isclose(layout.pcp.y, 450)
    assert not hasattr(LayoutConfig(), 'right_width_ratio')
    assert not hasattr(LayoutConfig(), 'pcp_margin')


def main():
    """Run all tests."""
    print("=== Layout Test Suite ===")
    results = run_checks(globals())
    print_summary(results)
    return results["failed"] == 0


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
