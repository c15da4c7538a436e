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

import argparse
import asyncio
import sys

from .config import DEFAULT_HEIGHT, DEFAULT_WIDTH
from .dashboard import render_dashboard_async
from .renderer import open_dashboard_in_browser


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="salary_charts",
        description="Render the company size, average salary and parallel coordinates charts.",
    )
    parser.add_argument("csv", nargs="?", default="ds_salaries.csv")
    parser.add_argument("--output", default=None)
    parser.add_argument("--format", choices=["html", "json"], default="html")
    parser.add_argument("--width", type=float, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=float, default=DEFAULT_HEIGHT)
    parser.add_argument("--open", action="store_true", help="open the HTML output in a browser")
    args = parser.parse_args(argv)

    output = args.output or f"salary_dashboard.{args.format}"
    result = asyncio.run(render_dashboard_async(
        args.csv, output, width=args.width, height=args.height, fmt=args.format,
    ))
    if result is None:
        return 1

    print(f"Generated dashboard: {result}")
    if args.open and args.format == "html":
        open_dashboard_in_browser(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
