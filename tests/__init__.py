"""
Test suite for number_human

Contains:
- tests/unit/          : Unit tests for individual modules
"""
