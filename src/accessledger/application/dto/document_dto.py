"""Document DTOs."""

from dataclasses import dataclass


@dataclass
class DocumentOutput:
    """Output DTO for a fetched document."""

    id: str
    text: str
    user_id: str
