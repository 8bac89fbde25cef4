from movie_catalog.applications.interfaces.dtos.movie import MovieList, MoviePublic
from movie_catalog.applications.interfaces.dtos.movie_search_filter import MovieSearchFilter
from movie_catalog.domain.services.movie_search_service import MovieSearchService


class GetMoviesUseCase:
    def __init__(self, search_service: MovieSearchService):
        self.search_service = search_service

    async def execute(self, search_filter: MovieSearchFilter) -> MovieList:
        movies = await self.search_service.search(search_filter.to_criteria())

        return MovieList(movies=[MoviePublic.from_domain(movie) for movie in movies])
