"""
Validator table: the mapping from rule-type name to validator predicate.
"""

import threading
from collections.abc import Iterator, Mapping

from bean_validator.observability.logger import get_logger

from .builtin import BUILTIN_VALIDATORS, Validator

logger = get_logger(__name__)


class ValidatorTable:
    """
    Mutable, extensible mapping from rule-type name to validator.

    Entries are only ever added or overwritten; registering an existing
    name replaces the previous validator, which lets callers shadow
    built-ins. Lookups are lock-free; registration is serialized.
    """

    def __init__(self, validators: Mapping[str, Validator] | None = None):
        """
        Initialize the table.

        Args:
            validators: Initial entries (copied). An empty table is created
                when omitted; use with_builtins() for the standard catalog.
        """
        self._validators: dict[str, Validator] = dict(validators or {})
        self._lock = threading.Lock()

    @classmethod
    def with_builtins(cls) -> "ValidatorTable":
        """Create a table seeded with the built-in validator catalog."""
        return cls(BUILTIN_VALIDATORS)

    def register(self, name: str, fn: Validator) -> None:
        """
        Register a validator, overwriting any existing entry with that name.

        Args:
            name: Rule-type name used in rule descriptors
            fn: Predicate taking (value, params) and returning a bool

        Raises:
            ValueError: If name is not a non-empty string
            TypeError: If fn is not callable
        """
        if not isinstance(name, str) or not name:
            raise ValueError("Validator name must be a non-empty string")
        if not callable(fn):
            raise TypeError(f"Validator '{name}' must be callable, got {type(fn).__name__}")

        with self._lock:
            replaced = name in self._validators
            self._validators[name] = fn

        logger.debug(
            "Validator registered",
            extra={"rule_type": name, "replaced": replaced},
        )

    def lookup(self, name: str) -> Validator | None:
        """Return the validator registered under name, or None."""
        return self._validators.get(name)

    def names(self) -> list[str]:
        """Return the registered rule-type names, sorted."""
        return sorted(self._validators)

    def __contains__(self, name: object) -> bool:
        return name in self._validators

    def __len__(self) -> int:
        return len(self._validators)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(validators={len(self._validators)})"
