"""
Test suite for numfmt

Contains:
- tests/unit/          : Unit tests for individual modules
"""
