"""Descriptive statistics, binning and text histograms for plain sequences of numbers."""

__version__ = "0.1.0"