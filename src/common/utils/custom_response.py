from enum import Enum
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ValidationError

T = TypeVar("T")


class ResultKind(str, Enum):
    OK = "ok"
    VALIDATION = "validation"
    IO = "io"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


class OperationResult(BaseModel, Generic[T]):
    ok: bool
    kind: ResultKind
    message: str
    data: Optional[T] = None


def send_custom_response(kind: ResultKind, message: str, data: Optional[T] = None):
    return OperationResult(
        ok=kind == ResultKind.OK, kind=kind, message=message, data=data
    ).model_dump(mode="json")


def validation_message(e: ValidationError) -> str:
    messages = []
    for err in e.errors():
        if err["type"] == "value_error":
            # raised by our own validators, already names the field
            messages.append(err["msg"].removeprefix("Value error, "))
        elif err["loc"]:
            field = ".".join(str(part) for part in err["loc"])
            messages.append(f"{field}: {err['msg']}")
        else:
            messages.append(err["msg"])
    return "; ".join(messages)
