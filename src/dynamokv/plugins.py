"""Backend discovery via Python entry points."""

from importlib.metadata import entry_points
from typing import Any

from dynamokv.config import StoreConfig
from dynamokv.exceptions import ConfigError
from dynamokv.protocols import Store

BACKEND_GROUP = "dynamokv.stores"


def discover_backends() -> dict[str, Any]:
    """Discover all registered store backends.

    Returns:
        Dictionary mapping backend names to their classes
    """
    eps = entry_points(group=BACKEND_GROUP)
    return {ep.name: ep.load() for ep in eps}


def get_backend(name: str) -> Any:
    """Get a store backend class by name.

    Args:
        name: The backend name (e.g., "dynamodb", "memory")

    Returns:
        The backend class

    Raises:
        ConfigError: If the backend is not found
    """
    backends = discover_backends()
    if name not in backends:
        available = ", ".join(sorted(backends.keys())) or "(none)"
        raise ConfigError(f"Backend '{name}' not found. Available: {available}")
    return backends[name]


def create_store(backend: str, **kwargs: Any) -> Store:
    """Create a Store instance.

    Args:
        backend: The backend name (e.g., "dynamodb", "memory")
        **kwargs: Backend-specific configuration

    Returns:
        A Store implementation
    """
    cls = get_backend(backend)
    return cls(**kwargs)


def create_store_from_config(config: StoreConfig, **kwargs: Any) -> Store:
    """Create the Store described by a StoreConfig.

    Backends that provide a ``from_config`` classmethod get the whole
    config; others get its table name, codec and TTL. Extra kwargs
    (e.g. ``client``) are passed through.
    """
    cls = get_backend(config.backend)
    if hasattr(cls, "from_config"):
        return cls.from_config(config, **kwargs)
    return cls(
        table_name=config.table_name,
        codec=config.codec,
        ttl=config.ttl,
        **kwargs,
    )
