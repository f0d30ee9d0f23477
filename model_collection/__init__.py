"""Model Collection: typed, identity-based in-memory collections of model items.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
      (import ModelCollection from model_collection.core.model_collection)
"""
