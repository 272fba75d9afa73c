"""Infrastructure Layer — connections, error translation and logging.

Invariants:
    - Infrastructure never imports from persistence/ or schemas/
    - Every database failure leaves through translate_errors() as PersistenceError
"""
