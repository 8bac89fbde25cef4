from contextlib import asynccontextmanager
from datetime import date
from typing import AsyncIterator, List, Optional

from sqlalchemy import Select, delete, exists, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.domain.exceptions import NotFoundError, StorageError
from movie_catalog.domain.models.movie import MUTABLE_FIELDS
from movie_catalog.domain.models.movie import Movie as DomainMovie
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.infrastructure.persistence.models import Movie as SQLMovie

# Ids above the signed 64-bit range cannot exist in any supported database.
MAX_MOVIE_ID = 2**63 - 1


class SQLAlchemyMovieRepository(MovieRepository):
    """Movie gateway over an ``AsyncSession``.

    Writes are flushed, never committed, here; ``transaction()`` owns commit
    and rollback.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, sql_movie: SQLMovie) -> DomainMovie:
        return DomainMovie(
            id=sql_movie.id,
            title=sql_movie.title,
            description=sql_movie.description,
            director=sql_movie.director,
            genre=sql_movie.genre,
            rating=sql_movie.rating,
            release_date=sql_movie.release_date,
        )

    @staticmethod
    def _storable_id(movie_id: Optional[int]) -> bool:
        return movie_id is not None and 1 <= movie_id <= MAX_MOVIE_ID

    @asynccontextmanager
    async def _storage_errors(self, operation: str) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to {operation}: {e}") from e

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        try:
            yield
        except Exception:
            await self.session.rollback()
            raise

        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StorageError(f"Failed to commit transaction: {e}") from e

    async def _fetch(self, query: Select, operation: str) -> List[DomainMovie]:
        async with self._storage_errors(operation):
            result = await self.session.scalars(query.order_by(SQLMovie.id))
            return [self._to_domain(movie) for movie in result.all()]

    async def create(self, movie: DomainMovie) -> DomainMovie:
        sql_movie = SQLMovie(
            title=movie.title,
            description=movie.description,
            director=movie.director,
            genre=movie.genre,
            rating=movie.rating,
            release_date=movie.release_date,
        )
        async with self._storage_errors("create movie"):
            self.session.add(sql_movie)
            await self.session.flush()
        return self._to_domain(sql_movie)

    async def find_by_id(self, movie_id: int) -> Optional[DomainMovie]:
        if not self._storable_id(movie_id):
            return None
        async with self._storage_errors(f"load movie {movie_id}"):
            sql_movie = await self.session.scalar(select(SQLMovie).where(SQLMovie.id == movie_id))
        return self._to_domain(sql_movie) if sql_movie else None

    async def find_all(self) -> List[DomainMovie]:
        return await self._fetch(select(SQLMovie), "list movies")

    async def exists_by_id(self, movie_id: int) -> bool:
        if not self._storable_id(movie_id):
            return False
        async with self._storage_errors(f"check movie {movie_id}"):
            found = await self.session.scalar(select(exists().where(SQLMovie.id == movie_id)))
        return bool(found)

    async def delete_by_id(self, movie_id: int) -> None:
        if not self._storable_id(movie_id):
            return
        async with self._storage_errors(f"delete movie {movie_id}"):
            await self.session.execute(delete(SQLMovie).where(SQLMovie.id == movie_id))
            await self.session.flush()

    async def save(self, movie: DomainMovie) -> DomainMovie:
        if not self._storable_id(movie.id):
            raise NotFoundError(f"Movie with id {movie.id} not found")
        async with self._storage_errors(f"save movie {movie.id}"):
            sql_movie = await self.session.scalar(select(SQLMovie).where(SQLMovie.id == movie.id))
            if not sql_movie:
                raise NotFoundError(f"Movie with id {movie.id} not found")

            for field in MUTABLE_FIELDS:
                setattr(sql_movie, field, getattr(movie, field))

            await self.session.flush()
        return self._to_domain(sql_movie)

    async def find_by_title_contains(self, substring: str, case_insensitive: bool = True) -> List[DomainMovie]:
        if case_insensitive:
            condition = SQLMovie.title.icontains(substring, autoescape=True)
        else:
            condition = SQLMovie.title.contains(substring, autoescape=True)
        return await self._fetch(select(SQLMovie).where(condition), "search movies by title")

    async def find_by_genre(self, genre: str) -> List[DomainMovie]:
        return await self._fetch(select(SQLMovie).where(SQLMovie.genre == genre), "search movies by genre")

    async def find_by_rating_at_least(self, threshold: float) -> List[DomainMovie]:
        return await self._fetch(select(SQLMovie).where(SQLMovie.rating >= threshold), "search movies by rating")

    async def find_by_release_date_between(
        self, start: date, end: date, inclusive: bool = True
    ) -> List[DomainMovie]:
        if inclusive:
            condition = SQLMovie.release_date.between(start, end)
        else:
            condition = (SQLMovie.release_date > start) & (SQLMovie.release_date < end)
        return await self._fetch(select(SQLMovie).where(condition), "search movies by release date")
