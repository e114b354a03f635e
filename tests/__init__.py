"""
Test suite for growth-and-decay

Contains:
- tests/unit/          : Unit tests for formulas, records, contracts and reporting
"""
