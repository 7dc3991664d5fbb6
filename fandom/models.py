"""
Wiki records as returned by the Wikia list API, and the screen state built from them.
"""
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

ARTICLES_COUNT = "{count} articles"
ARTICLES_COUNT_THOUSANDS = "{count}K articles"


class WikiStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    articles: int = Field(default=0, ge=0)

    def articles_string(
        self,
        template: str = ARTICLES_COUNT,
        thousands_template: str = ARTICLES_COUNT_THOUSANDS,
    ) -> str:
        """Format the article count, abbreviated to thousands from 1000 up."""
        if self.articles < 1000:
            return template.format(count=self.articles)
        return thousands_template.format(count=self.articles // 1000)


class Wiki(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    stats: WikiStats
    image: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        # the API sends numeric ids
        if isinstance(value, int):
            return str(value)
        return value


class Wikis(BaseModel):
    """Response body of the list endpoint."""

    items: List[Wiki] = Field(default_factory=list)


class FandomState(BaseModel):
    model_config = ConfigDict(frozen=True)

    wikis: Tuple[Wiki, ...] = ()
    page: int = Field(default=1, ge=1)

    def evolve(self, **changes) -> "FandomState":
        """Return a validated copy with the given fields replaced."""
        return FandomState.model_validate({"wikis": self.wikis, "page": self.page, **changes})
