from movie_catalog.applications.interfaces.dtos.movie import MoviePublic, MovieSchema
from movie_catalog.domain.services.movie_service import MovieService


class CreateMovieUseCase:
    def __init__(self, movie_service: MovieService):
        self.movie_service = movie_service

    async def execute(self, movie_data: MovieSchema) -> MoviePublic:
        created_movie = await self.movie_service.create(movie_data.to_domain())

        if created_movie.id is None:
            raise RuntimeError("Movie creation failed - no ID assigned")

        return MoviePublic.from_domain(created_movie)
