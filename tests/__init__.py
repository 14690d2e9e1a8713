"""
Test suite for BigMath

Contains:
- tests/unit/          : Unit tests for integer core, decimal values and operators
"""
