"""
Test suite for multivariate-calculus

Contains:
- tests/unit/          : Unit tests for individual modules
"""
