"""Domain Types: named types for identity tokens and serialized values.

Invariants:
    - IdentityToken is the id() of a live member; the collection holds a
      reference, so a token is never reused while its item is a member
    - JSONValue covers everything to_serializable() may produce

Design Decisions:
    - NewType, not wrapper classes
"""

from typing import Any, NewType, TypeAlias


# ─── Identity Types ──────────────────────────────────────────────

IdentityToken = NewType("IdentityToken", int)


def identity_token(item: object) -> IdentityToken:
    """Stable per-instance handle used as the membership key."""
    return IdentityToken(id(item))


# ─── Value Types ─────────────────────────────────────────────────

JSONValue: TypeAlias = (
    dict[str, Any] | list[Any] | str | int | float | bool | None
)
