"""
Test suite for fast_decimal

Contains:
- tests/unit/          : Unit tests for individual modules
"""
