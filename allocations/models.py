from allocations.infrastructure.models import Assignment  # noqa: F401
