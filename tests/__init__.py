"""
Test suite for numeric-core

Contains:
- tests/unit/          : Unit tests for individual modules and both entry points
"""
