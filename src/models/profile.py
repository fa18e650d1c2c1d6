"""Foodie bucks profile models."""

from __future__ import annotations

import base64
from decimal import Decimal
from typing import Any, Callable, Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from utils.error_handling import ValidationError
from utils.logging_config import get_logger

logger = get_logger(__name__)


class ProfileRequest(BaseModel):
    """Lookup payload sent by the client."""

    model_config = ConfigDict(populate_by_name=True)

    pk: str = ""
    sk: str = ""
    table_name: str = Field(default="", alias="tableName")

    @classmethod
    def from_event(cls, event: Mapping[str, Any]) -> "ProfileRequest":
        """
        Build the request from an HTTP API (payload 2.0) event.

        The JSON body is preferred. API Gateway base64-encodes bodies it
        treats as binary, so those are decoded first. GET requests often lose
        their body on the way in, in which case the query string is used.
        Raises ValidationError when neither yields a well-formed request.
        """
        body = event.get("body")
        if body and event.get("isBase64Encoded"):
            try:
                body = base64.b64decode(body, validate=True).decode("utf-8")
            except (ValueError, UnicodeDecodeError) as exc:
                raise ValidationError("Request body is not valid base64") from exc

        if body:
            try:
                return cls.model_validate_json(body)
            except PydanticValidationError as exc:
                raise ValidationError(f"Malformed request body: {exc.error_count()} error(s)") from exc

        params = event.get("queryStringParameters") or {}
        if not params:
            raise ValidationError("Request body is empty")
        try:
            return cls.model_validate(params)
        except PydanticValidationError as exc:
            raise ValidationError("Malformed query parameters") from exc


def _to_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected string, got {type(value).__name__}")
    return value


def _to_int(value: Any) -> int:
    # boto3 deserializes every DynamoDB number as Decimal.
    if isinstance(value, bool) or not isinstance(value, (int, Decimal)):
        raise TypeError(f"expected number, got {type(value).__name__}")
    number = int(value)
    if number != value:
        raise ValueError(f"{value} is not a whole number")
    return number


_CONVERTERS: Dict[Any, Callable[[Any], Any]] = {str: _to_str, int: _to_int}


class Profile(BaseModel):
    """
    Read-only projection of a stored ``USER#``/``PROFILE#`` item.

    Aliases are the DynamoDB attribute names, which are also the JSON names
    returned to clients.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    partition_key: str = Field(default="", alias="pk")
    sort_key: str = Field(default="", alias="sk")
    display_name: str = Field(default="", alias="displayName")
    bucks_available: int = Field(default=0, alias="foodieBucksAvailable")
    bucks_used: int = Field(default=0, alias="foodieBucksUsed")
    bucks_increment: int = Field(default=0, alias="foodieBuckIncrement")

    @classmethod
    def from_item(cls, item: Mapping[str, Any]) -> "Profile":
        """
        Map a raw DynamoDB item onto a Profile.

        Attributes are converted one at a time; a malformed attribute is
        logged and left at its zero value instead of failing the request.
        """
        values: Dict[str, Any] = {}
        for name, field in cls.model_fields.items():
            attribute = field.alias
            if attribute not in item:
                continue
            try:
                values[name] = _CONVERTERS[field.annotation](item[attribute])
            except (TypeError, ValueError, ArithmeticError) as exc:
                logger.warning(
                    "Couldn't map profile attribute",
                    extra={"attribute": attribute, "pk": item.get("pk"), "error": str(exc)},
                )
        return cls(**values)

    def to_json(self) -> str:
        """Serialize using the store attribute names."""
        return self.model_dump_json(by_alias=True)
