"""Core Layer: collection engine and item contracts, no IO, no async.

Invariants:
    - No module in core/ imports from models/, infrastructure/, or config
    - Query helpers never mutate the collection they read from

Design Decisions:
    - Item capabilities expressed as Protocols so any class can be collected,
      not only the pydantic reference item in models/
"""
