"""Domain models."""

from petclinic.domain.models.base import Base
from petclinic.domain.models.owner import Owner, Pet, PetType


__all__ = ["Base", "Owner", "Pet", "PetType"]
