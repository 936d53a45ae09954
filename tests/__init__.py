"""
Test suite for dragonfmt

Contains:
- tests/unit/          : Unit tests for individual modules
"""
