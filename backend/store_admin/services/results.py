"""
Outcome of a dashboard action

Forms and cell actions never show notifications themselves; they return a
FormResult and the presentation layer renders `message` as a toast.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class ResultStatus(str, Enum):
    SUCCESS = "success"
    INVALID = "invalid"  # client-side validation failed, nothing was sent
    FAILED = "failed"  # transport error or unexpected API error
    CONFLICT = "conflict"  # blocked by dependent records
    IGNORED = "ignored"  # another request was already in flight


@dataclass(frozen=True)
class FormResult:
    status: ResultStatus
    message: Optional[str] = None
    field_errors: Dict[str, str] = field(default_factory=dict)
    data: Optional[Dict[str, Any]] = None
    navigated_to: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == ResultStatus.SUCCESS

    @property
    def is_error(self) -> bool:
        """Whether the message should be rendered as an error toast"""
        return self.status in (ResultStatus.FAILED, ResultStatus.CONFLICT)

    @classmethod
    def success(cls, message: str, data: Dict[str, Any] = None, navigated_to: str = None) -> "FormResult":
        return cls(ResultStatus.SUCCESS, message=message, data=data, navigated_to=navigated_to)

    @classmethod
    def failure(cls, message: str, conflict: bool = False) -> "FormResult":
        status = ResultStatus.CONFLICT if conflict else ResultStatus.FAILED
        return cls(status, message=message)

    @classmethod
    def invalid(cls, field_errors: Dict[str, str]) -> "FormResult":
        return cls(ResultStatus.INVALID, field_errors=dict(field_errors))

    @classmethod
    def ignored(cls) -> "FormResult":
        return cls(ResultStatus.IGNORED)
