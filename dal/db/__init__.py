"""Database Schema — declarative Base, read views and schema creation helpers.

Invariants:
    - Tables come from Base.metadata, views from db/schema.py; nothing else defines DDL

Design Decisions:
    - Views carry the join and the column aliases, so a list statement is always
      SELECT <field list> FROM <one view>
"""
