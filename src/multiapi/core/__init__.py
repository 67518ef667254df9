"""Core del cliente: configuración, dominio y contratos.

No conoce httpx ni la CLI.
"""
