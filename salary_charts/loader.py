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

import asyncio
import sys
from typing import Any, Dict

import pandas as pd

from .config import EXP_LEVEL_ORDER, NUMERIC_COLUMNS, REQUIRED_COLUMNS, SIZE_ORDER

MISSING_MARKERS = ['na', 'Na', 'NA', 'n/a', 'N/A', '', 'null', 'None']


class DataUnavailableError(ValueError):
    """The salary dataset is missing, unreadable or malformed."""


def _clean_numeric_data(series: pd.Series) -> pd.Series:
    """Clean and convert series to numeric, handling missing values."""
    cleaned = series.replace(MISSING_MARKERS, pd.NA)
    return pd.to_numeric(cleaned, errors='coerce')


def load_salaries(path: str) -> pd.DataFrame:
    """Load the salary CSV and parse its numeric columns.

    Every column is read as text first so that only the numeric columns
    are converted; the remaining columns pass through untouched.
    """
    print(f"DEBUG: Loading salary records from '{path}'", file=sys.stderr)
    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except FileNotFoundError as e:
        raise DataUnavailableError(f"Salary dataset not found: {path}") from e
    except pd.errors.EmptyDataError as e:
        raise DataUnavailableError(f"Salary dataset is empty: {path}") from e
    except (pd.errors.ParserError, UnicodeDecodeError, OSError) as e:
        raise DataUnavailableError(f"Failed to read salary dataset '{path}': {e}") from e

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise DataUnavailableError(
            f"Salary dataset is missing required columns: {missing}. Available: {list(df.columns)}"
        )

    for col in NUMERIC_COLUMNS:
        df[col] = _clean_numeric_data(df[col])

    print(f"DEBUG: Loaded {len(df)} records with columns {list(df.columns)}", file=sys.stderr)
    return df


async def load_salaries_async(path: str) -> pd.DataFrame:
    """Load the dataset without blocking the event loop."""
    return await asyncio.to_thread(load_salaries, path)


def validate_salary_data(df: pd.DataFrame) -> Dict[str, Any]:
    """Reports data-quality problems in a loaded salary frame without raising."""
    errors = []
    warnings = []

    for col in REQUIRED_COLUMNS:
        if col not in df.columns:
            errors.append(f"Column '{col}' not found in data")

    if errors:
        return {'valid': False, 'errors': errors, 'warnings': warnings}

    if df.empty:
        warnings.append("Dataset contains no records")
        return {'valid': True, 'errors': errors, 'warnings': warnings}

    for col in NUMERIC_COLUMNS:
        null_pct = df[col].isnull().sum() / len(df) * 100
        if null_pct > 50:
            warnings.append(f"Column '{col}' has {null_pct:.1f}% missing values")

    for col, domain in [('experience_level', EXP_LEVEL_ORDER), ('company_size', SIZE_ORDER)]:
        unknown = sorted(set(df[col].dropna().astype(str)) - set(domain))
        if unknown:
            warnings.append(f"Column '{col}' has values outside {list(domain)}: {unknown}")

    negative = (df['salary_in_usd'] < 0).sum()
    if negative > 0:
        warnings.append(f"Column 'salary_in_usd' has {negative} negative values")

    remote = df['remote_ratio']
    out_of_range = ((remote < 0) | (remote > 100)).sum()
    if out_of_range > 0:
        warnings.append(f"Column 'remote_ratio' has {out_of_range} values outside [0, 100]")

    return {
        'valid': len(errors) == 0,
        'errors': errors,
        'warnings': warnings
    }


def create_sample_records() -> pd.DataFrame:
    """Three records covering two years, two levels and two company sizes."""
    return pd.DataFrame({
        'work_year': [2022, 2022, 2023],
        'experience_level': ['EN', 'SE', 'EN'],
        'company_size': ['S', 'M', 'S'],
        'salary_in_usd': [50000, 150000, 60000],
        'remote_ratio': [0, 100, 50],
    })
