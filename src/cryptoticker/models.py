from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

NULL_MARKER = "null"


class Currency(BaseModel):
  """One asset's latest market snapshot, as served by the ticker API.

  Every numeric-looking field is kept as the text upstream sent. The ticker
  only passes these values through to the status line; it never does math
  on them.
  """

  model_config = ConfigDict(populate_by_name=True, extra="ignore")

  id: str
  name: str
  symbol: str
  rank: str

  price_usd: str | None = None
  price_btc: str | None = None
  volume_usd_24h: str | None = Field(default=None, alias="24h_volume_usd")
  market_cap_usd: str | None = None
  available_supply: str | None = None
  total_supply: str | None = None
  percent_change_1h: str | None = None
  percent_change_24h: str | None = None
  percent_change_7d: str | None = None
  last_updated: str | None = None

  @field_validator("*", mode="before")
  @classmethod
  def keep_numbers_as_text(cls, v: object) -> object:  # noqa: N805
    """Stringifies bare JSON numbers instead of rejecting them.

    The API has served ranks and prices both quoted and unquoted. Booleans
    are left alone so pydantic still rejects them.
    """
    if isinstance(v, (int, float)) and not isinstance(v, bool):
      return str(v)
    return v

  def price_display(self) -> str:
    return self.price_usd if self.price_usd is not None else NULL_MARKER

  def to_json(self) -> str:
    """Serializes with the upstream key names, matching one API array element."""
    return self.model_dump_json(by_alias=True)
