"""
Test suite for oop-showcase

Contains:
- tests/unit/          : Unit tests for entities, contracts and the console showcase
"""
