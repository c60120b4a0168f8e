"""Application services."""

from rentals.application.services.role_aggregation import RoleAggregationService

__all__ = ["RoleAggregationService"]
