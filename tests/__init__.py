"""
Test suite for luxtensor-core

Contains:
- tests/unit/          : Unit tests for currency units, checked math and value objects
"""
