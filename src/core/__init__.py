"""
Core domain models and their JSON contracts.

Entities are plain immutable value objects with derived read-only computations;
they do not depend on the console showcase.
"""
