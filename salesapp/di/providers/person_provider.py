from typing import TYPE_CHECKING
from ...domain.repositories.person_repository import PersonRepository
from ...application.services.person_service import PersonService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PersonProvider:
    """Person service provider - registers person-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register person service.
        Service is created with repository from container.
        """
        container.register_singleton(
            PersonService,
            PersonService(
                person_repository=container.get(PersonRepository)
            )
        )
