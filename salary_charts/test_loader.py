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
Tests for loading and validating the salary CSV.
"""

import asyncio
import os
import sys
import tempfile

import pandas as pd

from salary_charts.loader import (
    DataUnavailableError,
    create_sample_records,
    load_salaries,
    load_salaries_async,
    validate_salary_data,
)
from salary_charts.testing import print_summary, run_checks

CSV_TEXT = """work_year,experience_level,employment_type,job_title,salary,salary_currency,salary_in_usd,employee_residence,remote_ratio,company_location,company_size
2022,EN,FT,Data Analyst,50000,USD,50000,US,0,US,S
2022,SE,FT,Data Scientist,150000,USD,150000,US,100,US,M
2023,EN,FT,Data Analyst,60000,USD,60000,US,50,US,S
2023,MI,FT,ML Engineer,na,USD,na,DE,,DE,L
"""


def _write_temp_csv(text: str) -> str:
    fd, path = tempfile.mkstemp(suffix=".csv")
    with os.fdopen(fd, 'w', encoding='utf-8') as f:
        f.write(text)
    return path


def _expect_unavailable(path: str) -> str:
    try:
        load_salaries(path)
    except DataUnavailableError as e:
        return str(e)
    raise AssertionError(f"expected DataUnavailableError for {path}")


def test_load_parses_numeric_columns_only():
    path = _write_temp_csv(CSV_TEXT)
    try:
        df = load_salaries(path)
    finally:
        os.remove(path)

    assert len(df) == 4
    assert df['salary_in_usd'].tolist()[:3] == [50000, 150000, 60000]
    assert df['work_year'].tolist() == [2022, 2022, 2023, 2023]
    assert pd.api.types.is_numeric_dtype(df['remote_ratio'])
    # unparseable markers become missing values
    assert pd.isna(df['salary_in_usd'].iloc[3])
    assert pd.isna(df['remote_ratio'].iloc[3])
    # text columns pass through, including numeric-looking ones
    assert df['salary'].tolist()[0] == '50000'
    assert df['experience_level'].tolist() == ['EN', 'SE', 'EN', 'MI']


def test_missing_file_is_data_unavailable():
    message = _expect_unavailable(os.path.join(tempfile.gettempdir(), "no_such_salaries.csv"))
    assert "not found" in message


def test_empty_file_is_data_unavailable():
    path = _write_temp_csv("")
    try:
        _expect_unavailable(path)
    finally:
        os.remove(path)


def test_missing_column_is_data_unavailable():
    path = _write_temp_csv("work_year,experience_level,salary_in_usd\n2022,EN,50000\n")
    try:
        message = _expect_unavailable(path)
    finally:
        os.remove(path)
    assert "company_size" in message
    assert "remote_ratio" in message


def test_data_unavailable_is_a_value_error():
    assert issubclass(DataUnavailableError, ValueError)


def test_async_load_matches_sync_load():
    path = _write_temp_csv(CSV_TEXT)
    try:
        df = asyncio.run(load_salaries_async(path))
    finally:
        os.remove(path)
    assert len(df) == 4
    assert df['company_size'].tolist() == ['S', 'M', 'S', 'L']


def test_validation_of_clean_sample():
    result = validate_salary_data(create_sample_records())
    assert result == {'valid': True, 'errors': [], 'warnings': []}


def test_validation_warnings():
    records = create_sample_records().assign(
        experience_level=['EN', 'XX', 'EN'],
        remote_ratio=[0, 150, 50],
        salary_in_usd=[-1, 150000, 60000],
    )
    result = validate_salary_data(records)
    assert result['valid']
    warnings = " | ".join(result['warnings'])
    assert "experience_level" in warnings and "XX" in warnings
    assert "negative" in warnings
    assert "remote_ratio" in warnings


def test_validation_errors_for_missing_columns():
    result = validate_salary_data(pd.DataFrame({'work_year': [2022]}))
    assert not result['valid']
    assert "Column 'salary_in_usd' not found in data" in result['errors']


def main():
    """Run all tests."""
    print("=== Loader Test Suite ===")
    results = run_checks(globals())
    print_summary(results)
    return results["failed"] == 0


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
