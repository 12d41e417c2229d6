"""Schema layer: the key → Rule registry and the recognized key table."""
