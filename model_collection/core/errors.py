"""Error Hierarchy: typed, categorized exceptions for collection failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_dict() produces a JSON-safe envelope for structured logging
    - Lookup misses are never errors: find*/first/get_by_index return None

Design Decisions:
    - Single hierarchy with ModelCollectionError base
    - ErrorContext is a dataclass carried on the error, not a logging record
    - The collection itself never wraps item constructor errors; ItemConstructionError
      is raised by the reference ModelItem and passes through untouched
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONSTRUCTION = "construction"
    CONFIGURATION = "configuration"
    SNAPSHOT = "snapshot"


@dataclass
class ErrorContext:
    """Context attached to an error for observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    item_type: str | None = None
    key: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class ModelCollectionError(Exception):
    """Base exception for all model collection errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Convert to a JSON-safe error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "item_type": self.context.item_type,
                    "key": self.context.key,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Construction Errors ────────────────────────────────────────

class ItemConstructionError(ModelCollectionError):
    """Raw data could not be turned into an item of the declared type."""
    def __init__(
        self,
        item_type: str,
        message: str,
        errors: list[dict] | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext(operation="from_raw_data")
        ctx.item_type = item_type
        super().__init__(
            f"Cannot construct {item_type}: {message}",
            "ITEM_CONSTRUCTION_FAILED", ErrorCategory.CONSTRUCTION,
            ErrorSeverity.ERROR, ctx,
        )
        self.item_type = item_type
        self.errors = errors or []


# ─── Configuration Errors ───────────────────────────────────────

class InvalidItemTypeError(ModelCollectionError):
    """Declared item type is not a class with a raw-data constructor."""
    def __init__(self, item_type: object, context: ErrorContext | None = None):
        name = getattr(item_type, "__name__", repr(item_type))
        ctx = context or ErrorContext(operation="__init__")
        ctx.item_type = name
        super().__init__(
            f"{name} cannot be used as a collection item type: "
            "expected a class with a from_raw_data() classmethod",
            "INVALID_ITEM_TYPE", ErrorCategory.CONFIGURATION,
            ErrorSeverity.ERROR, ctx,
        )


# ─── Snapshot Errors ────────────────────────────────────────────

class SnapshotMismatchError(ModelCollectionError):
    """Snapshot was taken from a collection of a different item type."""
    def __init__(self, expected: str, found: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext(operation="from_snapshot")
        ctx.item_type = expected
        super().__init__(
            f"Snapshot holds '{found}' items, cannot restore as '{expected}'",
            "SNAPSHOT_MISMATCH", ErrorCategory.SNAPSHOT,
            ErrorSeverity.ERROR, ctx,
        )
        self.expected = expected
        self.found = found
