"""API gateway response schemas.

The composed owner is served without the ``petId`` tag that the visits
service puts on each visit; visits are already nested under their pet.
"""

from datetime import date

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from petclinic.domain.documents import OwnerDetails
from petclinic.presentation.schemas.base import CamelModel


class PetTypeResponse(CamelModel):
    id: int = Field(..., description="Pet type identifier")
    name: str = Field(..., description="Pet type name (cat, dog, ...)")


class VisitResponse(CamelModel):
    """A visit nested under the pet it belongs to."""

    id: int = Field(..., description="Visit identifier")
    visit_date: date | None = Field(None, alias="date", description="Day of the visit")
    description: str | None = Field(None, description="What the visit was about")


class PetDetailsResponse(CamelModel):
    id: int = Field(..., description="Pet identifier")
    name: str = Field(..., description="Pet name")
    birth_date: date | None = Field(None, description="Pet birth date")
    type: PetTypeResponse | None = Field(None, description="Kind of pet")
    visits: list[VisitResponse] = Field(
        default_factory=list, description="Visits of this pet, in visits service order"
    )


class OwnerDetailsResponse(CamelModel):
    """Owner with pets and each pet's visits."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "id": 6,
                    "firstName": "Jean",
                    "lastName": "Coleman",
                    "address": "105 N. Lake St.",
                    "city": "Monona",
                    "telephone": "6085552654",
                    "pets": [
                        {
                            "id": 7,
                            "name": "Samantha",
                            "birthDate": "2012-09-04",
                            "type": {"id": 1, "name": "cat"},
                            "visits": [
                                {"id": 1, "date": "2013-01-01", "description": "rabies shot"},
                                {"id": 4, "date": "2013-01-04", "description": "spayed"},
                            ],
                        },
                        {
                            "id": 8,
                            "name": "Max",
                            "birthDate": "2012-09-04",
                            "type": {"id": 1, "name": "cat"},
                            "visits": [],
                        },
                    ],
                }
            ]
        },
    )

    id: int = Field(..., description="Owner identifier")
    first_name: str = Field(..., description="Owner first name")
    last_name: str = Field(..., description="Owner last name")
    address: str | None = Field(None, description="Street address")
    city: str | None = Field(None, description="City")
    telephone: str | None = Field(None, description="Telephone number, digits only")
    pets: list[PetDetailsResponse] = Field(default_factory=list, description="Owner's pets")

    @classmethod
    def from_document(cls, owner: OwnerDetails) -> "OwnerDetailsResponse":
        """Build the response from a composed owner document."""
        return cls.model_validate(owner.model_dump())
