"""Modelos, constantes y errores del dominio.

- `models`: payloads de Wikipedia validados con Pydantic v2.
- `errors`: jerarquía cerrada de fallas del pipeline.
"""
