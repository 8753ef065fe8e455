import json
import logging
from fastapi import APIRouter, Request
from pydantic import BaseModel

from .domain import calculate_notes, notes_total
from .exceptions import InvalidRequest

log = logging.getLogger("api")
router = APIRouter()


class WithdrawResponse(BaseModel):
    notes: list[int]
    total: int


class ErrorBody(BaseModel):
    error: str
    message: str


def _reject_constant(token: str):
    # json.loads accepts NaN and Infinity; standard JSON does not
    raise ValueError(f"non-standard JSON constant: {token}")


async def read_json_body(request: Request) -> dict:
    raw = await request.body()
    try:
        body = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise InvalidRequest("Invalid JSON in request body.") from e
    if not isinstance(body, dict):
        raise InvalidRequest('Request body must be an object with an "amount" property.')
    return body


@router.post("/api/withdraw", response_model=WithdrawResponse)
async def withdraw(request: Request):
    body = await read_json_body(request)
    amount = body.get("amount")
    # calculator failures propagate to the app's exception handlers
    notes = calculate_notes(amount)
    log.info("withdraw amount=%s notes=%s", amount, notes)
    return WithdrawResponse(notes=notes, total=notes_total(notes))
