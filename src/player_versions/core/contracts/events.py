"""Event contracts: discrete lifecycle events correlated with a transition.

Events belong to the *later* snapshot of a transition. They are evidence
about why fields changed, not authoritative diffs: an event may mention a
field that did not actually change, and consumers must tolerate that.

The union is discriminated on ``type`` so raw feed payloads validate into
the right variant::

    {"type": "Recomposition", "time": "...", "new_display_name": "Max Power"}
    {"type": "AttributeAugment", "time": "...", "attribute": "Contact", "value": 5}
    {"type": "Party", "attribute": "Power", "value": 3}
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class Recomposition(BaseModel):
    """The player was recomposed into (or reverted to) a new identity."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: Literal["Recomposition"] = "Recomposition"
    time: datetime
    new_display_name: str
    reverts_prior_recomposition: bool = False


class AttributeAugment(BaseModel):
    """A single attribute was augmented by ``value``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: Literal["AttributeAugment"] = "AttributeAugment"
    time: datetime
    attribute: str
    value: int


class Party(BaseModel):
    """A party bumped one attribute by ``value``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: Literal["Party"] = "Party"
    attribute: str
    value: int


Event = Annotated[Recomposition | AttributeAugment | Party, Field(discriminator="type")]


__all__ = ["AttributeAugment", "Event", "Party", "Recomposition"]
