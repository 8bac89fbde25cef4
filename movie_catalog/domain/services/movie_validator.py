import math
from typing import List, Optional

from movie_catalog.domain.exceptions import FieldViolation
from movie_catalog.domain.models.movie import Movie

MIN_RATING = 0.0
MAX_RATING = 10.0
MAX_TITLE_LENGTH = 255
MAX_DIRECTOR_LENGTH = 255
MAX_GENRE_LENGTH = 100


class MovieValidator:
    """Checks candidate movie data before any write.

    Stateless: the same instance is shared by create and update.
    """

    def validate(self, movie: Movie) -> List[FieldViolation]:
        violations: List[FieldViolation] = []

        if not movie.title.strip():
            violations.append(FieldViolation(field="title", reason="Title must not be blank"))
        elif len(movie.title) > MAX_TITLE_LENGTH:
            violations.append(
                FieldViolation(field="title", reason=f"Title must be at most {MAX_TITLE_LENGTH} characters")
            )

        rating_violation = self._check_rating(movie.rating)
        if rating_violation:
            violations.append(rating_violation)

        for field, limit in (("director", MAX_DIRECTOR_LENGTH), ("genre", MAX_GENRE_LENGTH)):
            value = getattr(movie, field)
            if value is not None and len(value) > limit:
                violations.append(
                    FieldViolation(field=field, reason=f"{field.capitalize()} must be at most {limit} characters")
                )

        return violations

    def is_valid(self, movie: Movie) -> bool:
        return not self.validate(movie)

    @staticmethod
    def _check_rating(rating: Optional[float]) -> Optional[FieldViolation]:
        if rating is None:
            return None
        if not math.isfinite(rating) or not MIN_RATING <= rating <= MAX_RATING:
            return FieldViolation(
                field="rating", reason=f"Rating must be between {MIN_RATING:g} and {MAX_RATING:g}"
            )
        return None
