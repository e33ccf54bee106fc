"""Core de craftdash: dominio, normalización pura, servicios y configuración."""
