from movie_catalog.applications.interfaces.dtos.movie import MoviePublic, MovieSchema
from movie_catalog.domain.services.movie_service import MovieService


class UpdateMovieUseCase:
    def __init__(self, movie_service: MovieService):
        self.movie_service = movie_service

    async def execute(self, movie_id: int, movie_data: MovieSchema) -> MoviePublic:
        updated_movie = await self.movie_service.update(movie_id, movie_data.to_domain())
        return MoviePublic.from_domain(updated_movie)
