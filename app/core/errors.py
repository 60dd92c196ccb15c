# app/core/errors.py
"""
Errores de dominio. Los services los lanzan y los routers
los traducen a HTTPException con su status.
"""


class UnauthenticatedError(Exception):
    """Credencial ausente, inválida o vencida (401)."""


class ConflictError(ValueError):
    """Campo único duplicado, p. ej. email (409)."""


class NotFoundError(LookupError):
    """Video o usuario inexistente (404)."""
