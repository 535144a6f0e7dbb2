"""
entschema test suite.

This package contains:
- unit/: Unit tests (no external services)
"""
