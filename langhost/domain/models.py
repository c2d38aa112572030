"""Pydantic models shared between the host adapter and the i18n layer."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

LANGUAGE_SETTING = "cl_language"


class QueryStatus(str, Enum):
    """Outcome of a client setting query, as reported by the host."""

    VALUE_INTACT = "value_intact"
    NOT_FOUND = "not_found"
    NOT_A_SETTING = "not_a_setting"
    PROTECTED = "protected"


class GameClient(BaseModel):
    slot: int = Field(ge=0)
    name: str | None = None
    is_valid: bool = True
    is_hltv: bool = False
    is_fake_client: bool = False

    @property
    def is_real_player(self) -> bool:
        """Connected human client, not a spectator proxy or a bot."""

        return self.is_valid and not self.is_hltv and not self.is_fake_client


__all__ = ["GameClient", "LANGUAGE_SETTING", "QueryStatus"]
