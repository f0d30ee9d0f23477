"""Models: concrete item implementations of the core item contract.

Invariants:
    - Models depend on core/, never the other way round

Design Decisions:
    - One file per model for locality
"""
