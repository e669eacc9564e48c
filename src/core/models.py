"""
Boundary layer data model(s).

These objects are what the Service exchanges with the repositories.
The API layer (higher) and the db layer (lower) each keep their own representation and convert to/from the model defined here.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class GameModel:
    """Transport-safe representation of a catalog entry used between Service and DB layers."""

    id: UUID
    title: str
    publisher: str
    price: float
