"""Adaptadores de I/O: URLs, transporte httpx, decodificación y endpoints."""
