"""Owner, pet and pet type domain models for the customers service.

Owners are loaded eagerly with their pets (ordered by name) and each pet
with its type, which is exactly the shape of the owner document the
customers service serves to the API gateway.
"""

from datetime import date

from sqlalchemy import Date, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petclinic.domain.models.base import BaseEntity


class PetType(BaseEntity):
    """Kind of pet (cat, dog, lizard, ...)."""

    __tablename__ = "types"

    name: Mapped[str] = mapped_column(
        String(80),
        nullable=False,
        index=True,
        comment="Pet type name",
    )


class Pet(BaseEntity):
    """A pet belonging to exactly one owner.

    Attributes:
        id: Integer primary key
        name: Pet name
        birth_date: Date of birth (optional)
        type_id: Foreign key to the pet type
        owner_id: Foreign key to the owning owner
    """

    __tablename__ = "pets"

    name: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    type_id: Mapped[int] = mapped_column(ForeignKey("types.id"), nullable=False)
    owner_id: Mapped[int] = mapped_column(ForeignKey("owners.id"), nullable=False, index=True)

    type: Mapped[PetType] = relationship(lazy="joined")
    owner: Mapped["Owner"] = relationship(back_populates="pets")

    def __repr__(self) -> str:
        return f"<Pet(id={self.id}, name={self.name}, owner_id={self.owner_id})>"


class Owner(BaseEntity):
    """Pet owner registered with the clinic.

    Attributes:
        id: Integer primary key
        first_name: Given name
        last_name: Family name (indexed for lookups)
        address: Street address
        city: City
        telephone: Digits only, at most 12
        pets: Owner's pets ordered by name
    """

    __tablename__ = "owners"

    first_name: Mapped[str] = mapped_column(String(30), nullable=False)
    last_name: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    address: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(80), nullable=False)
    telephone: Mapped[str] = mapped_column(String(12), nullable=False)

    pets: Mapped[list[Pet]] = relationship(
        back_populates="owner",
        lazy="selectin",
        order_by="Pet.name",
    )

    def __repr__(self) -> str:
        return f"<Owner(id={self.id}, first_name={self.first_name}, last_name={self.last_name})>"
