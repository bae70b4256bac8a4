"""Utility functions for recordkeep."""

from recordkeep.utils.date_parser import parse_date, parse_timestamp
from recordkeep.utils.amount_parser import parse_amount, to_decimal

__all__ = ["parse_date", "parse_timestamp", "parse_amount", "to_decimal"]
