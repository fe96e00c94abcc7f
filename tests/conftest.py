"""Pytest configuration and shared fixtures."""

import pytest
from pathlib import Path
from typing import List

from trend_app.data.models import SampleSeries


@pytest.fixture
def linear_values() -> List[float]:
    """Perfectly linear prices: slope 2, intercept 10."""
    return [10.0, 12.0, 14.0, 16.0, 18.0]


@pytest.fixture
def noisy_values() -> List[float]:
    """Noisy prices with a hand-computed fit: slope 1.1, intercept 10.2."""
    return [10.0, 12.0, 11.0, 15.0, 14.0]


@pytest.fixture
def linear_series(linear_values) -> SampleSeries:
    return SampleSeries.from_ordered_values(linear_values)


@pytest.fixture
def noisy_series(noisy_values) -> SampleSeries:
    return SampleSeries.from_ordered_values(noisy_values)


@pytest.fixture
def history_csv(tmp_path: Path) -> Path:
    """Daily history CSV in the layout of a downloaded quote history."""
    path = tmp_path / "ACME.csv"
    path.write_text(
        "Date,Open,High,Low,Close,Adj Close,Volume\n"
        "2024-01-02,9.50,10.20,9.40,10.00,10.00,1200\n"
        "2024-01-03,10.10,12.30,10.00,12.00,12.00,1500\n"
        "2024-01-04,12.00,14.50,11.90,14.00,14.00,1800\n"
        "2024-01-05,14.20,16.10,14.00,16.00,16.00,1100\n"
        "2024-01-08,16.00,18.40,15.80,18.00,18.00,1300\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def history_html() -> str:
    """History page table: newest session first, footer row after the data."""
    return """
    <html><body>
      <table>
        <thead>
          <tr><th>Date</th><th>Open</th><th>High</th><th>Low</th><th>Close*</th><th>Adj Close**</th><th>Volume</th></tr>
        </thead>
        <tbody>
          <tr><td>Jan 08, 2024</td><td>1,016.00</td><td>1,018.40</td><td>1,015.80</td><td>1,018.00</td><td>1,018.00</td><td>1,300</td></tr>
          <tr><td>Jan 05, 2024</td><td>1,014.20</td><td>1,016.10</td><td>1,014.00</td><td>1,016.00</td><td>1,016.00</td><td>1,100</td></tr>
          <tr><td>Jan 04, 2024</td><td>1,012.00</td><td>1,014.50</td><td>1,011.90</td><td>1,014.00</td><td>1,014.00</td><td>1,800</td></tr>
          <tr><td>Jan 03, 2024</td><td>1,010.10</td><td>1,012.30</td><td>1,010.00</td><td>1,012.00</td><td>1,012.00</td><td>1,500</td></tr>
          <tr><td>Jan 02, 2024</td><td>1,009.50</td><td>1,010.20</td><td>1,009.40</td><td>1,010.00</td><td>1,010.00</td><td>1,200</td></tr>
          <tr><td colspan="7">*Close price adjusted for splits.</td></tr>
        </tbody>
      </table>
    </body></html>
    """
