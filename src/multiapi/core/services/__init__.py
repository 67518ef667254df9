"""Servicios del Core (orquestación sobre adaptadores)."""
