"""Deposit interest calculator: simple and monthly-compounding growth."""

__version__ = "0.1.0"
