"""
Test suite for dp-bigint

Contains:
- tests/unit/          : Unit tests for the BigInt engine, state model, and contracts
"""
