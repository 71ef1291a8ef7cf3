"""
Core math primitives, domain value objects, and serialization contracts.

This package has no I/O: every operation is pure, synchronous computation
over immutable values.
"""
