"""
Trend App - Linear Trend Price Extrapolation

Fits an ordinary-least-squares line to a series of historical closing prices
and extrapolates it to estimate the price a number of days in the future.
Prices come from a scraped history table or a downloaded CSV file.
"""

__version__ = "0.1.0"
__author__ = "Trend App Team"
