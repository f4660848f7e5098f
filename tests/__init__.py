"""
Test suite for graphmath

Contains:
- tests/unit/          : Unit tests for vector, matrix and contract modules
"""
