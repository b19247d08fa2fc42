from pydantic import BaseModel
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel

# Integer columns are 32-bit signed, matching the int32 fields of the gRPC messages
INT32_MAX = 2**31 - 1


class Entity(BaseModel):
    """Base entity class with a store-assigned integer identifier."""

    id: int | None = PydanticField(
        default=None,
        description="Identifier assigned by the data store on creation",
    )


class EntityTable(SQLModel, table=False):
    """Base table class with an auto-increment integer primary key."""

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Auto-increment identity",
    )
