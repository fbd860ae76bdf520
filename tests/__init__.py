"""
Test suite for ordinals

Contains:
- tests/unit/          : Unit tests for individual modules
"""
