"""Owner API request and response schemas of the customers service."""

from datetime import date

from pydantic import ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from petclinic.presentation.schemas.base import CamelModel


class OwnerRequest(CamelModel):
    """Request body for creating or replacing an owner.

    Every field is required and may not be blank; the telephone is up to
    twelve digits with no separators.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "firstName": "George",
                    "lastName": "Franklin",
                    "address": "110 W. Liberty St.",
                    "city": "Madison",
                    "telephone": "6085551023",
                }
            ]
        },
    )

    first_name: str = Field(..., max_length=30, description="Owner first name")
    last_name: str = Field(..., max_length=30, description="Owner last name")
    address: str = Field(..., max_length=255, description="Street address")
    city: str = Field(..., max_length=80, description="City")
    telephone: str = Field(
        ...,
        pattern=r"^\d{1,12}$",
        description="Telephone number (1-12 digits)",
    )

    @field_validator("first_name", "last_name", "address", "city")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject empty and whitespace-only values."""
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class PetTypeResponse(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    name: str


class PetResponse(CamelModel):
    """Pet as listed under its owner (visits live in the visits service)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int = Field(..., description="Pet identifier")
    name: str = Field(..., description="Pet name")
    birth_date: date | None = Field(None, description="Pet birth date")
    type: PetTypeResponse | None = Field(None, description="Kind of pet")


class OwnerResponse(CamelModel):
    """Owner with its pets, ordered by pet name."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        json_schema_extra={
            "examples": [
                {
                    "id": 1,
                    "firstName": "George",
                    "lastName": "Franklin",
                    "address": "110 W. Liberty St.",
                    "city": "Madison",
                    "telephone": "6085551023",
                    "pets": [
                        {
                            "id": 1,
                            "name": "Leo",
                            "birthDate": "2010-09-07",
                            "type": {"id": 1, "name": "cat"},
                        }
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
    telephone: str | None = Field(None, description="Telephone number")
    pets: list[PetResponse] = Field(default_factory=list, description="Owner's pets")
