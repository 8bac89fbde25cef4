from typing import List

from movie_catalog.domain.models.movie import Movie
from movie_catalog.domain.models.search_criteria import SearchCriteria
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.services.logger import LoggerPort


class MovieSearchService:
    """Turns search criteria into a single repository filter call.

    The filters do not compose. When several criteria are given only the first
    one in this order is applied: title, genre, minimum rating, date range.
    The date range needs both bounds. With nothing usable every movie is returned.
    """

    def __init__(self, movie_repository: MovieRepository, logger: LoggerPort):
        self.movie_repository = movie_repository
        self.logger = logger

    async def search(self, criteria: SearchCriteria) -> List[Movie]:
        if criteria.has_title:
            self.logger.debug(f"Searching movies by title containing '{criteria.title}'")
            return await self.movie_repository.find_by_title_contains(criteria.title, case_insensitive=True)

        if criteria.has_genre:
            self.logger.debug(f"Searching movies by genre '{criteria.genre}'")
            return await self.movie_repository.find_by_genre(criteria.genre)

        if criteria.has_min_rating:
            self.logger.debug(f"Searching movies rated at least {criteria.min_rating}")
            return await self.movie_repository.find_by_rating_at_least(criteria.min_rating)

        if criteria.has_date_range:
            self.logger.debug(f"Searching movies released between {criteria.start_date} and {criteria.end_date}")
            return await self.movie_repository.find_by_release_date_between(
                criteria.start_date, criteria.end_date, inclusive=True
            )

        return await self.movie_repository.find_all()
