"""
Test suite for tokenmath

Contains:
- tests/unit/          : Unit tests for individual modules
"""
