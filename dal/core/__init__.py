"""Core Layer — pure query composition, row mapping and error types; no IO, no DB.

Invariants:
    - No module in core/ imports from persistence/, infrastructure/, or db/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from the imperative persistence shell
"""
