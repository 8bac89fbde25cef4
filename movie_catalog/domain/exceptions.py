from typing import List

from pydantic import BaseModel


class FieldViolation(BaseModel):
    field: str
    reason: str


class DomainError(Exception):
    pass


class ValidationError(DomainError):
    def __init__(self, violations: List[FieldViolation]):
        self.violations = list(violations)
        fields = ", ".join(violation.field for violation in self.violations)
        super().__init__(f"Invalid movie data: {fields}")

    @property
    def fields(self) -> List[str]:
        return [violation.field for violation in self.violations]


class NotFoundError(DomainError):
    pass


class StorageError(DomainError):
    pass
