"""Dominio de craftdash: entidades canónicas, descriptor de página y registro de recursos.

Nada aquí hace I/O; la normalización (`core.normalization`) produce estos tipos.
"""
