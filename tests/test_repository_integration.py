from datetime import date
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.domain.exceptions import NotFoundError, StorageError
from movie_catalog.domain.services.movie_service import MovieService
from movie_catalog.domain.services.movie_validator import MovieValidator
from movie_catalog.infrastructure.adapters.repositories.sqlalchemy_movie_repository import (
    MAX_MOVIE_ID,
    SQLAlchemyMovieRepository,
)

from tests.factories import movie_factory


class TestSQLAlchemyMovieRepository:
    """Integration tests for the SQLAlchemy movie repository"""

    @pytest.fixture
    def repository(self, session):
        return SQLAlchemyMovieRepository(session)

    async def _create(self, repository, **fields):
        async with repository.transaction():
            return await repository.create(movie_factory.create_domain_movie(**fields))

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_stores_fields(self, repository):
        created = await self._create(repository)

        found = await repository.find_by_id(created.id)

        assert created.id is not None
        assert found == created
        assert found.release_date == date(2010, 7, 16)
        assert found.rating == 8.8

    @pytest.mark.asyncio
    async def test_find_missing_movie_returns_none(self, repository):
        assert await repository.find_by_id(999) is None
        assert await repository.exists_by_id(999) is False

    @pytest.mark.asyncio
    async def test_find_all_in_insertion_order(self, repository):
        for title in ("Tenet", "Inception", "Memento"):
            await self._create(repository, title=title)

        movies = await repository.find_all()

        assert [m.title for m in movies] == ["Tenet", "Inception", "Memento"]

    @pytest.mark.asyncio
    async def test_save_updates_existing(self, repository):
        created = await self._create(repository)

        async with repository.transaction():
            saved = await repository.save(created.model_copy(update={"title": "Inception 2", "genre": None}))

        found = await repository.find_by_id(created.id)
        assert saved == found
        assert found.title == "Inception 2"
        assert found.genre is None

    @pytest.mark.asyncio
    async def test_save_unknown_id_raises_not_found(self, repository):
        with pytest.raises(NotFoundError):
            async with repository.transaction():
                await repository.save(movie_factory.create_domain_movie(id=404))

    @pytest.mark.asyncio
    async def test_delete_by_id(self, repository):
        created = await self._create(repository)

        async with repository.transaction():
            await repository.delete_by_id(created.id)

        assert await repository.exists_by_id(created.id) is False
        assert await repository.find_by_id(created.id) is None

    @pytest.mark.asyncio
    async def test_rolled_back_transaction_leaves_no_trace(self, repository):
        with pytest.raises(RuntimeError):
            async with repository.transaction():
                await repository.create(movie_factory.create_domain_movie())
                raise RuntimeError("abort")

        assert await repository.find_all() == []

    @pytest.mark.asyncio
    async def test_title_contains_is_case_insensitive(self, repository):
        await self._create(repository, title="Inception")
        await self._create(repository, title="Princess Bride")

        results = await repository.find_by_title_contains("INCE")

        assert [m.title for m in results] == ["Inception", "Princess Bride"]
        assert [m.title for m in await repository.find_by_title_contains("ince")] == [
            "Inception",
            "Princess Bride",
        ]

    @pytest.mark.asyncio
    async def test_title_contains_treats_wildcards_literally(self, repository):
        await self._create(repository, title="100% Wolf")
        await self._create(repository, title="1000 Wolves")

        results = await repository.find_by_title_contains("100%")

        assert [m.title for m in results] == ["100% Wolf"]

    @pytest.mark.asyncio
    async def test_find_by_genre_is_exact(self, repository):
        await self._create(repository, title="Alien", genre="Sci-Fi")
        await self._create(repository, title="Spaceballs", genre="Sci-Fi Comedy")

        results = await repository.find_by_genre("Sci-Fi")

        assert [m.title for m in results] == ["Alien"]

    @pytest.mark.asyncio
    async def test_find_by_rating_at_least(self, repository):
        await self._create(repository, title="High", rating=9.0)
        await self._create(repository, title="Edge", rating=7.5)
        await self._create(repository, title="Low", rating=3.0)
        await self._create(repository, title="Unrated", rating=None)

        results = await repository.find_by_rating_at_least(7.5)

        assert [m.title for m in results] == ["High", "Edge"]

    @pytest.mark.asyncio
    async def test_find_by_release_date_between(self, repository):
        await self._create(repository, title="Start", release_date=date(2010, 1, 1))
        await self._create(repository, title="Middle", release_date=date(2010, 7, 16))
        await self._create(repository, title="End", release_date=date(2010, 12, 31))
        await self._create(repository, title="Outside", release_date=date(2011, 1, 1))
        await self._create(repository, title="Undated", release_date=None)

        inclusive = await repository.find_by_release_date_between(date(2010, 1, 1), date(2010, 12, 31))
        exclusive = await repository.find_by_release_date_between(
            date(2010, 1, 1), date(2010, 12, 31), inclusive=False
        )

        assert [m.title for m in inclusive] == ["Start", "Middle", "End"]
        assert [m.title for m in exclusive] == ["Middle"]

    @pytest.mark.asyncio
    async def test_database_errors_become_storage_errors(self, repository, session):
        session.scalars = AsyncMock(side_effect=OperationalError("SELECT", {}, Exception("connection lost")))

        with pytest.raises(StorageError, match="list movies") as exc_info:
            await repository.find_all()

        assert isinstance(exc_info.value.__cause__, OperationalError)

    @pytest.mark.asyncio
    async def test_failed_commit_rolls_back_and_raises_storage_error(self, repository, session):
        session.commit = AsyncMock(side_effect=OperationalError("COMMIT", {}, Exception("disk I/O error")))

        with pytest.raises(StorageError, match="commit") as exc_info:
            async with repository.transaction():
                await repository.create(movie_factory.create_domain_movie())

        assert isinstance(exc_info.value.__cause__, OperationalError)
        assert await repository.find_all() == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("movie_id", [MAX_MOVIE_ID + 1, 99999999999999999999])
    async def test_ids_beyond_storage_range_are_absent(self, repository, movie_id):
        await self._create(repository)

        assert await repository.find_by_id(movie_id) is None
        assert await repository.exists_by_id(movie_id) is False
        with pytest.raises(NotFoundError):
            async with repository.transaction():
                await repository.save(movie_factory.create_domain_movie(id=movie_id))

        async with repository.transaction():
            await repository.delete_by_id(movie_id)
        assert len(await repository.find_all()) == 1


class TestMovieServiceWithDatabase:
    """Lifecycle semantics against a real database with one session per caller"""

    def _service(self, session, mock_logger):
        return MovieService(SQLAlchemyMovieRepository(session), MovieValidator(), mock_logger)

    @pytest.mark.asyncio
    async def test_last_write_wins_across_sessions(self, sqlite_engine, mock_logger):
        async with AsyncSession(sqlite_engine, expire_on_commit=False) as setup_session:
            created = await self._service(setup_session, mock_logger).create(movie_factory.create_domain_movie())

        async with AsyncSession(sqlite_engine, expire_on_commit=False) as first_session, AsyncSession(
            sqlite_engine, expire_on_commit=False
        ) as second_session:
            first = self._service(first_session, mock_logger)
            second = self._service(second_session, mock_logger)

            # Both callers see the same version before either writes.
            assert (await first.get_by_id(created.id)).title == "Inception"
            assert (await second.get_by_id(created.id)).title == "Inception"
            await first_session.commit()
            await second_session.commit()

            await first.update(created.id, movie_factory.create_domain_movie(title="First edit"))
            await second.update(created.id, movie_factory.create_domain_movie(title="Second edit"))

        async with AsyncSession(sqlite_engine, expire_on_commit=False) as check_session:
            fetched = await self._service(check_session, mock_logger).get_by_id(created.id)

        assert fetched.title == "Second edit"

    @pytest.mark.asyncio
    async def test_scenario_create_get_update_delete(self, session, mock_logger):
        service = self._service(session, mock_logger)

        created = await service.create(
            movie_factory.create_domain_movie(
                title="Inception", rating=8.8, description=None, director=None, genre=None
            )
        )
        assert created.id == 1
        assert await service.get_by_id(1) == created

        await service.update(1, movie_factory.create_domain_movie(title="Inception 2", rating=9.0))
        updated = await service.get_by_id(1)
        assert updated.title == "Inception 2"
        assert updated.rating == 9.0

        await service.delete(1)
        with pytest.raises(NotFoundError):
            await service.get_by_id(1)
