from datetime import date
from typing import Optional

from pydantic import BaseModel

MUTABLE_FIELDS = ("title", "description", "director", "genre", "rating", "release_date")


class Movie(BaseModel):
    title: str
    description: Optional[str] = None
    director: Optional[str] = None
    genre: Optional[str] = None
    rating: Optional[float] = None
    release_date: Optional[date] = None
    id: Optional[int] = None

    def replace_fields(self, candidate: "Movie") -> "Movie":
        """Return a copy keeping this movie's id and taking every mutable field from candidate."""
        return self.model_copy(update={field: getattr(candidate, field) for field in MUTABLE_FIELDS})
