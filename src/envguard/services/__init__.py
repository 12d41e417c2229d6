"""Service layer: validation, access contracts, and CLI-facing reports."""
