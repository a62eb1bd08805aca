"""Response decoder shared by every endpoint."""
from dataclasses import fields
from typing import TypeVar, get_type_hints

import httpx

from aai_client.constants import MSG_ERR_FIELD_TYPE, MSG_ERR_NOT_AN_OBJECT
from aai_client.errors import DecodeError, HTTPStatusError

T = TypeVar("T")


def decode_response(response: httpx.Response, shape: type[T]) -> T:
    """Turn a raw response into an instance of the ``shape`` dataclass.

    Any non-2xx status raises HTTPStatusError carrying the body verbatim.
    JSON ``null`` and missing keys fall back to the field default; unknown
    keys are ignored.
    """
    response.read()
    if not response.is_success:
        raise HTTPStatusError(response.status_code, response.text)

    try:
        payload = response.json()
    except ValueError as exc:
        raise DecodeError(str(exc)) from exc

    match payload:
        case dict():
            pass
        case _:
            raise DecodeError(MSG_ERR_NOT_AN_OBJECT % type(payload).__name__)

    hints = get_type_hints(shape)
    values = {}
    for field in fields(shape):
        value = payload.get(field.name)
        if value is None:
            continue
        expected = hints[field.name]
        if not isinstance(value, expected):
            raise DecodeError(
                MSG_ERR_FIELD_TYPE % (field.name, expected.__name__, type(value).__name__)
            )
        values[field.name] = value
    return shape(**values)
