"""Adaptadores de I/O (HTTP) que implementan los contratos de `core.interfaces`."""
