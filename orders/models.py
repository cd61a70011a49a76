from orders.infrastructure.models import Order  # noqa: F401
