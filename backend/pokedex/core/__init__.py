"""
Core module - Security, errors, rate limiting, and other core utilities.
"""
from pokedex.core.errors import PokedexError
from pokedex.core.rate_limit import check_rate_limit, enforce_rate_limit
from pokedex.core.security import (
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)

__all__ = [
    "PokedexError",
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_token",
    "check_rate_limit",
    "enforce_rate_limit",
]
