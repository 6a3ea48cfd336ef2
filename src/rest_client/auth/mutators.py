"""
Ready-made options mutators for Rest.

Each factory returns a callable that receives the per-request options dict
and mutates it in place.
"""
import logging
from typing import Callable, Iterable, Optional, Union

from ..types import OptionsMutator, RequestOptions

logger = logging.getLogger(__name__)
LOG_PREFIX = "[AUTH:mutators]"

TokenSource = Union[str, Callable[[], Optional[str]], None]

SAFE_METHODS = ("get", "head", "options")


def _mask_value(val: Optional[str]) -> str:
    """Mask sensitive value for logging, showing first 10 chars."""
    if not val:
        return "<empty>"
    if len(val) <= 10:
        return "*" * len(val)
    return val[:10] + "*" * (len(val) - 10)


def _resolve_token(token: TokenSource) -> Optional[str]:
    if callable(token):
        return token()
    return token


def credentials_mutator(policy: str = "same-origin") -> OptionsMutator:
    """Set the fetch credentials policy on every request."""
    def mutate(options: RequestOptions) -> None:
        options["credentials"] = policy
    return mutate


def header_mutator(name: str, value: TokenSource) -> OptionsMutator:
    """Set a static (or lazily resolved) header on every request."""
    def mutate(options: RequestOptions) -> None:
        resolved = _resolve_token(value)
        if resolved:
            options.setdefault("headers", {})[name] = resolved
    return mutate


def csrf_header_mutator(
    token: TokenSource,
    header_name: str = "X-CSRFToken",
    safe_methods: Iterable[str] = SAFE_METHODS,
) -> OptionsMutator:
    """
    Add a CSRF token header to state-changing requests only.

    token may be a string or a zero-argument callable read on every request,
    e.g. one that pulls the value from a cookie jar.
    """
    safe = {m.lower() for m in safe_methods}

    def mutate(options: RequestOptions) -> None:
        method = str(options.get("method", "get")).lower()
        if method in safe:
            return
        resolved = _resolve_token(token)
        if not resolved:
            logger.warning(f"{LOG_PREFIX} csrf_header_mutator: no token for {method} request")
            return
        logger.debug(f"{LOG_PREFIX} csrf_header_mutator: {header_name}={_mask_value(resolved)}")
        options.setdefault("headers", {})[header_name] = resolved
    return mutate


def bearer_auth_mutator(token: TokenSource) -> OptionsMutator:
    """Add an Authorization: Bearer header when a token is available."""
    def mutate(options: RequestOptions) -> None:
        resolved = _resolve_token(token)
        if not resolved:
            return
        header = f"Bearer {resolved}"
        logger.debug(f"{LOG_PREFIX} bearer_auth_mutator: Authorization={_mask_value(header)}")
        options.setdefault("headers", {})["Authorization"] = header
    return mutate


def chain_mutators(*mutators: Optional[OptionsMutator]) -> OptionsMutator:
    """Compose mutators, applied in the given order. None entries are skipped."""
    active = [m for m in mutators if m is not None]

    def mutate(options: RequestOptions) -> None:
        for mutator in active:
            mutator(options)
    return mutate
