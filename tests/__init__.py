"""
Test suite for the fixed-point decimal package

Contains:
- tests/unit/          : Unit tests for individual modules
"""
