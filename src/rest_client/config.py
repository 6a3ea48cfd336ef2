"""
Configuration models and validation for rest-client.
"""
import json
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from .env import ENV_PREFIX, resolve, resolve_bool, resolve_optional_float
from .exceptions import RestConfigError

# Constants
DEFAULT_TIMEOUT_CONNECT = 5.0
DEFAULT_TIMEOUT_READ = 30.0
DEFAULT_TIMEOUT_WRITE = 10.0
JSON_CONTENT_TYPE = "application/json"


class TimeoutConfig(BaseModel):
    """Timeout configuration for the default httpx transport."""
    connect: float = DEFAULT_TIMEOUT_CONNECT
    read: float = DEFAULT_TIMEOUT_READ
    write: float = DEFAULT_TIMEOUT_WRITE
    pool: Optional[float] = None


class RestConfig(BaseModel):
    """
    Construction-time configuration for Rest and its default transport.

    base_url and use_trailing_slashes shape every built URL. origin, timeout,
    headers and raise_for_status only reach HttpxTransport.
    """
    model_config = {"frozen": True}

    base_url: str = ""
    use_trailing_slashes: bool = False
    origin: Optional[str] = None
    timeout: Optional[Union[float, TimeoutConfig]] = None
    headers: Dict[str, str] = Field(default_factory=dict)
    raise_for_status: bool = True

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if any(ch.isspace() for ch in v):
            raise ValueError("base_url must not contain whitespace")
        return v

    @field_validator("origin")
    @classmethod
    def validate_origin(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        if not v.startswith(("http://", "https://")):
            raise ValueError("origin must start with http:// or https://")
        return v.rstrip("/")

    @classmethod
    def from_env(
        cls,
        config: Optional[Dict[str, Any]] = None,
        base_url: Optional[str] = None,
        use_trailing_slashes: Optional[bool] = None,
        origin: Optional[str] = None,
        timeout: Optional[Union[float, TimeoutConfig]] = None,
        headers: Optional[Dict[str, str]] = None,
        raise_for_status: Optional[bool] = None,
    ) -> "RestConfig":
        """
        Build a config resolving each field from, in order:
        1. Direct arguments
        2. REST_CLIENT_* environment variables
        3. Config dictionary
        4. Default values
        """
        timeout = resolve(timeout, f"{ENV_PREFIX}TIMEOUT", config, "timeout", None)
        # TimeoutConfig and mappings are left for pydantic to validate
        if isinstance(timeout, Mapping):
            timeout = dict(timeout)
        elif not isinstance(timeout, TimeoutConfig):
            timeout = resolve_optional_float(timeout, [], None, None, None)

        env_headers = resolve(headers, f"{ENV_PREFIX}HEADERS", config, "headers", None)
        if isinstance(env_headers, str):
            try:
                env_headers = json.loads(env_headers)
            except json.JSONDecodeError as e:
                raise RestConfigError(f"{ENV_PREFIX}HEADERS must be a JSON object: {e}") from e

        try:
            return cls(
                base_url=resolve(base_url, f"{ENV_PREFIX}BASE_URL", config, "base_url", ""),
                use_trailing_slashes=resolve_bool(
                    use_trailing_slashes, f"{ENV_PREFIX}USE_TRAILING_SLASHES",
                    config, "use_trailing_slashes", False
                ),
                origin=resolve(origin, f"{ENV_PREFIX}ORIGIN", config, "origin", None) or None,
                timeout=timeout,
                headers=env_headers or {},
                raise_for_status=resolve_bool(
                    raise_for_status, f"{ENV_PREFIX}RAISE_FOR_STATUS",
                    config, "raise_for_status", True
                ),
            )
        except ValidationError as e:
            raise RestConfigError(str(e)) from e


def normalize_timeout(timeout: Optional[Union[float, TimeoutConfig]]) -> TimeoutConfig:
    """Normalize timeout to TimeoutConfig object."""
    if timeout is None:
        return TimeoutConfig()
    if isinstance(timeout, (int, float)):
        return TimeoutConfig(connect=float(timeout), read=float(timeout), write=float(timeout))
    return timeout
