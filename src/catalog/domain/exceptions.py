"""Domain-level exceptions.

Caller mistakes are expressed as subclasses of DomainException so the CLI
layer can catch them uniformly and display user-friendly messages.
Store faults are kept outside that hierarchy on purpose: they are server
side failures, not something the caller can correct.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class DuplicateProductNameError(DomainException):
    """Another product, active or not, already uses this name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Product '{name}' already exists")
        self.name = name


class RecordStoreError(Exception):
    """The record store could not be read or written."""
