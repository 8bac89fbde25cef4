from typing import List

from movie_catalog.domain.exceptions import NotFoundError, ValidationError
from movie_catalog.domain.models.movie import Movie
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.domain.services.movie_validator import MovieValidator


class MovieService:
    """Lifecycle operations for movies.

    The only caller of the repository's mutating methods. Every mutation runs
    inside ``repository.transaction()`` so a failure at any step leaves storage
    untouched. Concurrent updates of one movie are not coordinated: the last
    commit wins.
    """

    def __init__(self, movie_repository: MovieRepository, validator: MovieValidator, logger: LoggerPort):
        self.movie_repository = movie_repository
        self.validator = validator
        self.logger = logger

    async def list_all(self) -> List[Movie]:
        return await self.movie_repository.find_all()

    async def get_by_id(self, movie_id: int) -> Movie:
        movie = await self.movie_repository.find_by_id(movie_id)
        if movie is None:
            self.logger.warning(f"Movie {movie_id} not found")
            raise NotFoundError(f"Movie with id {movie_id} not found")
        return movie

    async def create(self, candidate: Movie) -> Movie:
        self._ensure_valid(candidate)

        async with self.movie_repository.transaction():
            created = await self.movie_repository.create(candidate.model_copy(update={"id": None}))

        self.logger.info(f"Movie created: {created.id} '{created.title}'")
        return created

    async def update(self, movie_id: int, candidate: Movie) -> Movie:
        async with self.movie_repository.transaction():
            existing = await self.get_by_id(movie_id)
            self._ensure_valid(candidate)
            updated = await self.movie_repository.save(existing.replace_fields(candidate))

        self.logger.info(f"Movie updated: {updated.id} '{updated.title}'")
        return updated

    async def delete(self, movie_id: int) -> None:
        async with self.movie_repository.transaction():
            if not await self.movie_repository.exists_by_id(movie_id):
                self.logger.warning(f"Movie {movie_id} not found")
                raise NotFoundError(f"Movie with id {movie_id} not found")
            await self.movie_repository.delete_by_id(movie_id)

        self.logger.info(f"Movie deleted: {movie_id}")

    def _ensure_valid(self, candidate: Movie) -> None:
        violations = self.validator.validate(candidate)
        if violations:
            error = ValidationError(violations)
            self.logger.warning(str(error))
            raise error
