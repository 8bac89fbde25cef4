from abc import ABC, abstractmethod
from datetime import date
from typing import AsyncContextManager, List, Optional

from movie_catalog.domain.models.movie import Movie


class MovieRepository(ABC):
    """Sole gateway to durable storage for movies.

    Mutations become durable when the enclosing ``transaction()`` block commits.
    """

    @abstractmethod
    def transaction(self) -> AsyncContextManager[None]:
        """Scope a unit of work: commit on normal exit, roll back and re-raise on error."""

    @abstractmethod
    async def create(self, movie: Movie) -> Movie:
        pass

    @abstractmethod
    async def find_by_id(self, movie_id: int) -> Optional[Movie]:
        pass

    @abstractmethod
    async def find_all(self) -> List[Movie]:
        pass

    @abstractmethod
    async def exists_by_id(self, movie_id: int) -> bool:
        pass

    @abstractmethod
    async def delete_by_id(self, movie_id: int) -> None:
        pass

    @abstractmethod
    async def save(self, movie: Movie) -> Movie:
        """Persist the fields of an existing movie. Raises NotFoundError for an unknown id."""

    @abstractmethod
    async def find_by_title_contains(self, substring: str, case_insensitive: bool = True) -> List[Movie]:
        pass

    @abstractmethod
    async def find_by_genre(self, genre: str) -> List[Movie]:
        pass

    @abstractmethod
    async def find_by_rating_at_least(self, threshold: float) -> List[Movie]:
        pass

    @abstractmethod
    async def find_by_release_date_between(self, start: date, end: date, inclusive: bool = True) -> List[Movie]:
        pass
