"""Servicios del Core (orquestación con I/O a través de `ApiTransport`)."""
