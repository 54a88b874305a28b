"""
Test suite for the VM integer core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
