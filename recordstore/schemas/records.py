"""Pydantic base model for records kept in a RecordStore."""

from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    """A record identified by a unique string id. Subclass to add fields."""

    model_config = ConfigDict(frozen=True)

    id: str
