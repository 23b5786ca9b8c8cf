"""Error response body.

Every failed request returns:
{
    "error": "human readable message"
}

Successful /pnl responses are plain JSON documents (see pnl_ledger schemas),
not wrapped in an envelope.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str


def error_response(message: str) -> ErrorResponse:
    return ErrorResponse(error=message)
