"""Fuzz-marked and concurrency tests for langmatch.

Tests marked with @pytest.mark.fuzz run only via: pytest -m fuzz

Python 3.13+.
"""
