from datetime import date
from typing import Optional

from sqlalchemy import Date, Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column, registry

table_registry = registry()


@table_registry.mapped_as_dataclass
class Movie:
    __tablename__ = "movies"

    id: Mapped[int] = mapped_column(init=False, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[Optional[str]] = mapped_column(Text, default=None)
    director: Mapped[Optional[str]] = mapped_column(String(255), default=None)
    genre: Mapped[Optional[str]] = mapped_column(String(100), default=None, index=True)
    rating: Mapped[Optional[float]] = mapped_column(Float, default=None)
    release_date: Mapped[Optional[date]] = mapped_column(Date, default=None)
