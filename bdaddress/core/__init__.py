"""Core hierarchy logic: validation, reconciliation, form state."""
