"""
Test suite for assetconv

Contains:
- tests/unit/          : Unit tests for individual modules and the pipeline
"""
