"""
Core arbitrary-precision integer engine, value types, and contracts.

This module contains the BigInt arithmetic engine and its serialized
state model. It has no external I/O.
"""
