"""Pydantic Schemas: connector request envelopes and response records.

Invariants:
    - Schemas validate at the system boundary (connector requests)
    - Wire names follow the connector contract (PascalCase)
"""
