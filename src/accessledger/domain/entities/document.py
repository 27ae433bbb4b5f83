"""Document entity - protected resource."""

from dataclasses import dataclass


@dataclass
class Document:
    """Document - text stored under an entity id."""

    id: str
    text: str
