"""Persistence Layer — one generic list/read/insert/update/delete operation set.

Invariants:
    - Concrete persistence classes contain configuration only (EntityDefinition
      plus the column values they write); no operation body is duplicated
    - Every public operation either returns a typed result or raises PersistenceError

Design Decisions:
    - Grouped by business area (config, crm, admon) like the records in schemas/
"""
