"""
Author Pydantic Schemas

These schemas define the shape of data for Author-related API operations.

JSON uses camelCase (`birthDate`, `newName`) while Python code uses
snake_case; the alias generator maps between them, and populate_by_name
lets tests and services build the models with Python names.

Business rules (blank names, future birth dates) are checked in
bookcatalog.services.validation rather than here, so they raise the same
BadRequestError whether a request came over HTTP or from Python.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for every schema exchanged as camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class AuthorCreate(CamelModel):
    """
    Schema for creating a new author.

    Example request body:
    {
        "name": "Natsume Soseki",
        "birthDate": "1867-02-09"
    }
    """

    name: str = Field(
        ...,
        max_length=255,
        description="Author's full name",
        examples=["Natsume Soseki"],
    )

    birth_date: date = Field(
        ...,
        description="Date of birth, not in the future",
        examples=["1867-02-09"],
    )


class AuthorUpdate(CamelModel):
    """
    Schema for a partial author update.

    Omitted (or null) fields keep their stored value. At least one field
    must be present; an empty body is rejected as "nothing to update".
    """

    new_name: str | None = Field(
        default=None,
        max_length=255,
        description="Replacement name",
    )

    new_birth_date: date | None = Field(
        default=None,
        description="Replacement date of birth",
    )

    def changes(self) -> dict:
        """Fields present in the request, keyed by Author column name."""
        patch = self.model_dump(exclude_none=True)
        return {
            column: patch[field]
            for field, column in (("new_name", "name"), ("new_birth_date", "birth_date"))
            if field in patch
        }


class AuthorResponse(CamelModel):
    """
    Schema for author responses.

    from_attributes=True allows building it straight from an Author row:
        AuthorResponse.model_validate(author)
    """

    id: int = Field(..., description="Unique identifier", examples=[1])
    name: str = Field(..., description="Author's full name")
    birth_date: date = Field(..., description="Date of birth")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Natsume Soseki",
                "birthDate": "1867-02-09",
            }
        },
    )
