from datetime import date
from http import HTTPStatus
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from movie_catalog.applications.interfaces.dtos.message import Message
from movie_catalog.applications.interfaces.dtos.movie import MovieList, MoviePublic, MovieSchema
from movie_catalog.applications.interfaces.dtos.movie_search_filter import MovieSearchFilter
from movie_catalog.applications.use_cases.movie.create_movie import CreateMovieUseCase
from movie_catalog.applications.use_cases.movie.delete_movie import DeleteMovieUseCase
from movie_catalog.applications.use_cases.movie.get_movie import GetMovieUseCase
from movie_catalog.applications.use_cases.movie.get_movies import GetMoviesUseCase
from movie_catalog.applications.use_cases.movie.update_movie import UpdateMovieUseCase
from movie_catalog.domain.exceptions import NotFoundError, ValidationError
from movie_catalog.domain.services.movie_search_service import MovieSearchService
from movie_catalog.domain.services.movie_service import MovieService
from movie_catalog.infrastructure.config.dependencies import get_movie_search_service, get_movie_service

router = APIRouter(prefix="/movies", tags=["movies"])

MovieServiceDep = Annotated[MovieService, Depends(get_movie_service)]
MovieSearchServiceDep = Annotated[MovieSearchService, Depends(get_movie_search_service)]


def _bad_request(error: ValidationError) -> HTTPException:
    return HTTPException(
        status_code=HTTPStatus.BAD_REQUEST,
        detail=[violation.model_dump() for violation in error.violations],
    )


@router.post("/", status_code=HTTPStatus.CREATED, response_model=MoviePublic)
async def create_movie(movie: MovieSchema, movie_service: MovieServiceDep):
    try:
        use_case = CreateMovieUseCase(movie_service)
        return await use_case.execute(movie)
    except ValidationError as e:
        raise _bad_request(e)


@router.get("/{movie_id}", response_model=MoviePublic)
async def read_movie(movie_id: int, movie_service: MovieServiceDep):
    try:
        use_case = GetMovieUseCase(movie_service)
        return await use_case.execute(movie_id)
    except NotFoundError as e:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=str(e))


@router.get("/", response_model=MovieList)
async def read_movies(
    search_service: MovieSearchServiceDep,
    title: Annotated[Optional[str], Query(description="Case-insensitive substring of the title")] = None,
    genre: Annotated[Optional[str], Query(description="Exact genre")] = None,
    rating: Annotated[Optional[float], Query(description="Minimum rating")] = None,
    start_date: Annotated[Optional[date], Query(alias="startDate")] = None,
    end_date: Annotated[Optional[date], Query(alias="endDate")] = None,
):
    search_filter = MovieSearchFilter(
        title=title, genre=genre, rating=rating, start_date=start_date, end_date=end_date
    )
    use_case = GetMoviesUseCase(search_service)
    return await use_case.execute(search_filter)


@router.put("/{movie_id}", response_model=MoviePublic)
async def update_movie(movie_id: int, movie: MovieSchema, movie_service: MovieServiceDep):
    try:
        use_case = UpdateMovieUseCase(movie_service)
        return await use_case.execute(movie_id, movie)
    except NotFoundError as e:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=str(e))
    except ValidationError as e:
        raise _bad_request(e)


@router.delete("/{movie_id}", response_model=Message)
async def delete_movie(movie_id: int, movie_service: MovieServiceDep):
    try:
        use_case = DeleteMovieUseCase(movie_service)
        return await use_case.execute(movie_id)
    except NotFoundError as e:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=str(e))
