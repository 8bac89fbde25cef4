from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from movie_catalog.domain.models.search_criteria import SearchCriteria


class MovieSearchFilter(BaseModel):
    title: Optional[str] = Field(default=None, description="Case-insensitive substring of the title")
    genre: Optional[str] = Field(default=None, description="Exact genre")
    rating: Optional[float] = Field(default=None, description="Minimum rating")
    start_date: Optional[date] = Field(default=None, description="Earliest release date, inclusive")
    end_date: Optional[date] = Field(default=None, description="Latest release date, inclusive")

    def to_criteria(self) -> SearchCriteria:
        return SearchCriteria(
            title=self.title,
            genre=self.genre,
            min_rating=self.rating,
            start_date=self.start_date,
            end_date=self.end_date,
        )
