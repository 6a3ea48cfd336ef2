from .mutators import (
    bearer_auth_mutator,
    chain_mutators,
    credentials_mutator,
    csrf_header_mutator,
    header_mutator,
)

__all__ = [
    "bearer_auth_mutator",
    "chain_mutators",
    "credentials_mutator",
    "csrf_header_mutator",
    "header_mutator",
]
