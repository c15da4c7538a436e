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
Script-style runner shared by the test modules' ``main()`` functions.
"""

import traceback
from typing import Any, Dict, Mapping


def run_checks(namespace: Mapping[str, Any]) -> Dict[str, int]:
    """Run every ``test_*`` function found in ``namespace``."""
    passed = 0
    failed = 0
    for name, test in sorted(namespace.items()):
        if not name.startswith("test_") or not callable(test):
            continue
        try:
            test()
            print(f"  ✅ {name}")
            passed += 1
        except Exception as e:
            print(f"  ❌ {name}: {e}")
            traceback.print_exc()
            failed += 1
    return {"passed": passed, "failed": failed, "total": passed + failed}


def print_summary(results: Dict[str, int]) -> None:
    print(f"\n=== Test Summary ===")
    print(f"✅ Passed: {results['passed']}")
    print(f"❌ Failed: {results['failed']}")
    print(f"📊 Total: {results['total']}")
    if results["failed"] == 0:
        print("\n🎉 All tests passed!")
    else:
        print(f"\n⚠️  {results['failed']} tests failed. Check the logs above for details.")
