"""Tally - time-bucketed financial report charts."""
