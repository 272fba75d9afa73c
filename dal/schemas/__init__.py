"""Pydantic Records — the typed objects persistence reads and writes.

Invariants:
    - Records carry no database logic; column aliases live in mappings.py
    - Domain types from core/ used for enum fields

Design Decisions:
    - Separate from models: records are the caller's contract, models are DDL
"""
