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

"""Group summaries over the salary records.

Keys and values may be given either as a column name or as a callable
taking one record (a row Series) and returning the derived value.
"""

from typing import Any, Callable, Optional, Sequence, Union

import pandas as pd

KeySpec = Union[str, Callable[[pd.Series], Any]]


def _resolve(records: pd.DataFrame, spec: KeySpec) -> pd.Series:
    if callable(spec):
        return pd.Series([spec(row) for _, row in records.iterrows()], index=records.index, dtype=object)
    if spec not in records.columns:
        raise ValueError(f"Column '{spec}' not found. Available: {list(records.columns)}")
    return records[spec]


def _reorder(summary: pd.Series, order: Optional[Sequence[Any]]) -> pd.Series:
    if order is None:
        return summary
    present = [key for key in order if key in summary.index]
    return summary.loc[present]


def count_by(records: pd.DataFrame, key: KeySpec, order: Optional[Sequence[Any]] = None) -> pd.Series:
    """Group sizes per key, in first-occurrence order unless a fixed ordering is given.

    With ``order`` the groups are re-sorted to follow it and keys outside it are dropped.
    """
    if records.empty:
        return pd.Series(dtype='int64')
    keys = _resolve(records, key)
    counts = records.groupby(keys, sort=False, dropna=False).size()
    return _reorder(counts, order)


def mean_by(records: pd.DataFrame, key: KeySpec, value: KeySpec,
            order: Optional[Sequence[Any]] = None) -> pd.Series:
    """Arithmetic mean of ``value`` per key, reordered by ``order`` when given."""
    if records.empty:
        return pd.Series(dtype='float64')
    keys = _resolve(records, key)
    values = pd.to_numeric(_resolve(records, value), errors='coerce')
    means = values.groupby(keys, sort=False).mean()
    return _reorder(means, order)
