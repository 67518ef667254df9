"""Modelos, rutas y errores del dominio.

Estructuras puras (Pydantic v2 / Enum); nada de I/O.
"""
