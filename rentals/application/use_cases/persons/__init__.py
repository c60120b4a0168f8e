"""Person use cases."""

from rentals.application.use_cases.persons.person_operations import PersonService

__all__ = ["PersonService"]
