"""Requests and Response models"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_PRICE = 1000
MAX_PAGE_SIZE = 50
DEFAULT_PAGE_SIZE = 5


# --- REQUEST MODELS ---
class GameRequest(BaseModel):
    """Body of POST /games and PUT /games/{id}."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(alias="titulo", min_length=3, max_length=100)
    publisher: str = Field(alias="produtora", min_length=3, max_length=100)
    price: float = Field(alias="preco", ge=0, le=MAX_PRICE)

    @field_validator("title", "publisher")
    @classmethod
    def strip_whitespace(cls, value: str) -> str:
        value = value.strip()
        if len(value) < 3:
            raise ValueError("Must contain at least 3 non-blank characters.")
        return value


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    title: str = Field(alias="titulo")
    publisher: str = Field(alias="produtora")
    price: float = Field(alias="preco")
