"""Domain layer for mock-kata.

Plain records and pure checks; no ports, no I/O.
"""
