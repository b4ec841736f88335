"""
Test suite for contfrac

Contains:
- tests/unit/          : Unit tests for individual modules
"""
