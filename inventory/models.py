from inventory.infrastructure.models import KeyPool, PoolKey, SeenKey  # noqa: F401
