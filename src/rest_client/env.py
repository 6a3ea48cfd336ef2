"""
Layered value resolution for RestConfig.from_env.

Each resolver takes a value from the first source that provides one: direct
argument, environment variables, config dictionary, then the default. Blank
environment values are treated as unset so an exported but empty
REST_CLIENT_* variable does not shadow the config dictionary.
"""
import os
from typing import Any, Dict, List, Optional, Union

ENV_PREFIX = "REST_CLIENT_"


def resolve(
    arg: Any,
    env_keys: Union[str, List[str]],
    config: Optional[Dict[str, Any]],
    config_key: Optional[str],
    default: Any
) -> Any:
    """Resolve a raw value; first non-None argument, non-blank env var, config entry, default."""
    # 1. Argument
    if arg is not None:
        return arg

    # 2. Env Vars
    if isinstance(env_keys, str):
        env_keys = [env_keys]

    for key in env_keys:
        if key:
            val = os.getenv(key)
            if val is not None and val.strip():
                return val

    # 3. Config object
    if config and config_key and config_key in config:
        return config[config_key]

    # 4. Default
    return default


def resolve_bool(
    arg: Any,
    env_keys: Union[str, List[str]],
    config: Optional[Dict[str, Any]],
    config_key: Optional[str],
    default: bool
) -> bool:
    """Resolve boolean value with string conversion support."""
    val = resolve(arg, env_keys, config, config_key, default)

    if isinstance(val, bool):
        return val
    if isinstance(val, str):
        return val.strip().lower() in ("true", "1", "yes", "on")
    return bool(val)


def resolve_optional_float(
    arg: Any,
    env_keys: Union[str, List[str]],
    config: Optional[Dict[str, Any]],
    config_key: Optional[str],
    default: Optional[float] = None
) -> Optional[float]:
    """Resolve float value; empty or unparseable input falls back to default."""
    val = resolve(arg, env_keys, config, config_key, default)
    if val is None or val == "":
        return default
    try:
        return float(val)
    except (ValueError, TypeError):
        return default
