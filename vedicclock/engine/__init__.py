"""Calendar computation engine."""
