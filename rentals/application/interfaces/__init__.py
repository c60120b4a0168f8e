"""Application ports (repository protocols)."""

from rentals.application.interfaces.repositories import (
    IPersonRepository,
    IRoleMembershipRepository,
)

__all__ = ["IPersonRepository", "IRoleMembershipRepository"]
