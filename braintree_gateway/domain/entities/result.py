"""Tagged result returned by gateway operations."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator


class ResultStatus(str, Enum):
    OK = "ok"
    ERROR = "error"


@dataclass(frozen=True)
class Result:
    """
    Outcome of a single gateway call.

    Unpacks as `(status, value)` so callers can write
    `status, transaction = await service.find("123")`.
    """

    status: ResultStatus
    value: Any

    @classmethod
    def ok(cls, value: Any) -> "Result":
        return cls(status=ResultStatus.OK, value=value)

    @classmethod
    def error(cls, value: Any) -> "Result":
        return cls(status=ResultStatus.ERROR, value=value)

    @property
    def is_ok(self) -> bool:
        return self.status == ResultStatus.OK

    @property
    def is_error(self) -> bool:
        return self.status == ResultStatus.ERROR

    def __iter__(self) -> Iterator[Any]:
        return iter((self.status, self.value))
