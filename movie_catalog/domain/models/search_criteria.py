from datetime import date
from typing import Optional

from pydantic import BaseModel, field_validator


class SearchCriteria(BaseModel):
    """Optional search parameters. Text criteria are stripped; blank ones count as absent."""

    title: Optional[str] = None
    genre: Optional[str] = None
    min_rating: Optional[float] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @field_validator("title", "genre")
    @classmethod
    def strip_text(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None

    @property
    def has_title(self) -> bool:
        return self.title is not None

    @property
    def has_genre(self) -> bool:
        return self.genre is not None

    @property
    def has_min_rating(self) -> bool:
        return self.min_rating is not None

    @property
    def has_date_range(self) -> bool:
        return self.start_date is not None and self.end_date is not None
