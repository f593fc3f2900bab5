"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    JournalError
    ├── LifecycleError            (lifecycle.py)
    │   ├── InvalidAdapterError
    │   ├── AlreadyInitializedError
    │   ├── NotInitializedError
    │   └── ClientInitializationError
    ├── ValidationError           (validation.py)
    │   ├── MissingEventNameError / InvalidEventNameError
    │   ├── MissingRefError / InvalidRefError
    │   ├── InvalidVersionTypeError / NegativeVersionError / NonIntegerVersionError
    │   ├── PayloadIsFunctionError / PayloadIsCustomObjectError
    │   └── RangeInvertedError
    ├── ConflictError             (storage.py)
    └── AdapterError              (storage.py)
"""

from event_journal.kernel.errors.base import JournalError
from event_journal.kernel.errors.lifecycle import (
    AlreadyInitializedError,
    ClientInitializationError,
    InvalidAdapterError,
    LifecycleError,
    NotInitializedError,
)
from event_journal.kernel.errors.storage import AdapterError, ConflictError
from event_journal.kernel.errors.validation import (
    InvalidEventNameError,
    InvalidRefError,
    InvalidVersionTypeError,
    MissingEventNameError,
    MissingRefError,
    NegativeVersionError,
    NonIntegerVersionError,
    PayloadIsCustomObjectError,
    PayloadIsFunctionError,
    RangeInvertedError,
    ValidationError,
)

__all__ = [
    "AdapterError",
    "AlreadyInitializedError",
    "ClientInitializationError",
    "ConflictError",
    "InvalidAdapterError",
    "InvalidEventNameError",
    "InvalidRefError",
    "InvalidVersionTypeError",
    "JournalError",
    "LifecycleError",
    "MissingEventNameError",
    "MissingRefError",
    "NegativeVersionError",
    "NonIntegerVersionError",
    "NotInitializedError",
    "PayloadIsCustomObjectError",
    "PayloadIsFunctionError",
    "RangeInvertedError",
    "ValidationError",
]
