from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from movie_catalog.domain.models.movie import Movie


class MovieSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str
    description: Optional[str] = None
    director: Optional[str] = None
    genre: Optional[str] = None
    rating: Optional[float] = None
    release_date: Optional[date] = None

    def to_domain(self) -> Movie:
        return Movie(
            title=self.title,
            description=self.description,
            director=self.director,
            genre=self.genre,
            rating=self.rating,
            release_date=self.release_date,
        )


class MoviePublic(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    title: str
    description: Optional[str] = None
    director: Optional[str] = None
    genre: Optional[str] = None
    rating: Optional[float] = None
    release_date: Optional[date] = None

    @classmethod
    def from_domain(cls, movie: Movie) -> "MoviePublic":
        return cls(
            id=movie.id,
            title=movie.title,
            description=movie.description,
            director=movie.director,
            genre=movie.genre,
            rating=movie.rating,
            release_date=movie.release_date,
        )


class MovieList(BaseModel):
    movies: list[MoviePublic]
