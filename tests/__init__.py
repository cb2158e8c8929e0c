"""
Test suite for tetration-core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
