"""Owner details documents composed by the API gateway.

These are plain request-scoped value documents: the customers service
supplies the owner with its pets, the visits service supplies the visits,
and the gateway splices the two together. Field names are camelCase on
the wire and snake_case in Python.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, PositiveInt
from pydantic.alias_generators import to_camel


class Document(BaseModel):
    """Base model for upstream documents (camelCase aliases, unknown keys ignored)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class PetType(Document):
    """Kind of pet (cat, dog, ...)."""

    id: PositiveInt
    name: str


class VisitDetails(Document):
    """A single visit of a pet to the clinic, tagged with the pet it belongs to."""

    id: PositiveInt
    pet_id: PositiveInt
    visit_date: date | None = Field(default=None, alias="date")
    description: str | None = None


class Visits(Document):
    """Visits service response: visits for a set of pets, in upstream order."""

    items: list[VisitDetails] = Field(default_factory=list)


class PetDetails(Document):
    """Pet summary as served by the customers service, plus its visits."""

    id: PositiveInt
    name: str
    birth_date: date | None = None
    type: PetType | None = None
    visits: list[VisitDetails] = Field(default_factory=list)


class OwnerDetails(Document):
    """Owner with pets, as served by the customers service and composed by the gateway."""

    id: PositiveInt
    first_name: str
    last_name: str
    address: str | None = None
    city: str | None = None
    telephone: str | None = None
    pets: list[PetDetails] = Field(default_factory=list)

    @property
    def pet_ids(self) -> list[int]:
        """Ids of the owner's pets, in pet order."""
        return [pet.id for pet in self.pets]
