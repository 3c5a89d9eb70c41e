"""Repository implementations."""

from petclinic.infrastructure.repositories.base_repository import BaseRepository
from petclinic.infrastructure.repositories.owner_repository import OwnerRepository


__all__ = ["BaseRepository", "OwnerRepository"]
