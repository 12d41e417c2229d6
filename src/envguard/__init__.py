"""envguard: schema-driven resolution of process configuration."""

__version__ = "0.1.0"
