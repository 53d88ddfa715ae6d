"""Voice command handlers, one per intent."""
