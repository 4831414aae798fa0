"""
RASA NLU payload schemas.

The proxy passes payloads through untouched; these models describe the
upstream contract for the API document only.
"""
from pydantic import BaseModel, Field
from typing import List, Optional


class Entity(BaseModel):
    """An entity annotated or extracted within an utterance."""
    start: int = Field(description="The start index of the entity substring in the text")
    end: int = Field(description="The end index of the entity substring in the text")
    value: str = Field(description="The entity instance or synonym")
    entity: str = Field(description="The entity name")


class Example(BaseModel):
    """A labelled training utterance."""
    text: str = Field(description="The utterance to parse.")
    intent: str = Field(description="The intent of the utterance.")
    entities: List[Entity] = Field(
        description="The list of entities extracted from the utterance."
    )


class DataContainer(BaseModel):
    common_examples: List[Example]


class Payload(BaseModel):
    """Training payload posted to /train."""
    rasa_nlu_data: DataContainer


class Message(BaseModel):
    """Parse query posted to /parse."""
    q: str = Field(description="The utterance to parse.")


class Intent(BaseModel):
    confidence: Optional[float] = Field(
        default=None,
        description="A decimal percentage that represents RASA's confidence in the intent.",
    )
    name: Optional[str] = Field(default=None, description="The name of the intent.")


class ParseResponse(BaseModel):
    """Upstream answer to a parse query."""
    text: Optional[str] = Field(default=None, description="The parsed utterance.")
    entities: List[Entity] = Field(
        default_factory=list, description="The list of extracted entities."
    )
    intent: Optional[Intent] = Field(default=None, description="The top scoring intent.")
    intent_ranking: List[Intent] = Field(
        default_factory=list, description="The list of all matching intents."
    )
