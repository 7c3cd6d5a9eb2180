"""
Exceptions raised by bdaddress.

Lookup misses and stale selections are not errors: they come back as None,
empty lists or unset fields. The classes below cover caller mistakes and
broken reference tables only.
"""
from typing import Dict, Optional


class AddressContractError(TypeError):
    """A selection or record argument was None or of the wrong type."""


class ReferenceDataError(ValueError):
    """The hierarchy tables violate their own referential invariants."""


class IncompleteAddressError(ValueError):
    """Raised on form submit when one or more hierarchy levels are unset."""

    def __init__(self, errors: Dict[str, str], message: Optional[str] = None):
        self.errors = dict(errors)
        super().__init__(message or f"Address is incomplete: missing {', '.join(sorted(self.errors))}")
