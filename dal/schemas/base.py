"""Record Base — the pydantic base every persisted record type extends.

Invariants:
    - id is an int; 0 means the record has not been persisted yet
    - Attribute assignment is allowed (the graph mapper wires relations after
      construction, insert assigns the generated id)
"""

from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    """A persisted entity identified by an integer id."""
    model_config = ConfigDict(validate_assignment=False)

    id: int = 0

    @property
    def is_persisted(self) -> bool:
        return self.id != 0
