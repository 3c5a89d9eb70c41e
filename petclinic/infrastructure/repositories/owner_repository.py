"""Owner repository for the customers service."""

from petclinic.domain.interfaces import IOwnerRepository
from petclinic.domain.models.owner import Owner
from petclinic.infrastructure.persistence.database import Database
from petclinic.infrastructure.repositories.base_repository import BaseRepository


class OwnerRepository(BaseRepository[Owner], IOwnerRepository[Owner]):
    """Database operations for owners.

    Pets (ordered by name) and their types are eager-loaded through the
    relationships declared on the model, so an owner returned from here can
    be serialized after its session has closed.
    """

    def __init__(self, database: Database) -> None:
        super().__init__(database, Owner)
