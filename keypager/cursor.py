"""
Opaque cursor encoding for page keys.

Many backends hand out structured continuation keys (a DynamoDB
LastEvaluatedKey, a keyset of sort columns, ...). Pagers only deal in strings,
so loaders encode those keys into URL-safe tokens and decode them again on the
next call.

Example:
    def load(context, page_key, page_size):
        kwargs = {"TableName": "users", "Limit": page_size}
        if page_key:
            kwargs["ExclusiveStartKey"] = decode_dynamo_key(page_key)
        response = client.scan(**kwargs)
        next_key = response.get("LastEvaluatedKey")
        return response["Items"], encode_dynamo_key(next_key) if next_key else ""
"""

import base64
import binascii
import json
from decimal import Decimal
from typing import Any

from boto3.dynamodb.types import Binary, TypeDeserializer, TypeSerializer

from .exceptions import CursorError

_serializer = TypeSerializer()
_deserializer = TypeDeserializer()


def encode_cursor(key: dict[str, Any]) -> str:
    """
    Encodes a JSON-compatible dict as an opaque, URL-safe page key.

    Output is deterministic: keys are sorted and padding is stripped.
    An empty dict is rejected, since "" is reserved for "no more pages".
    """
    if not key:
        raise CursorError("cannot encode an empty cursor", cursor=key)
    try:
        raw = json.dumps(key, sort_keys=True, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise CursorError(
            f"cursor is not JSON serializable: {e!s}", cursor=key, original_error=e
        ) from e
    return base64.urlsafe_b64encode(raw.encode("utf-8")).decode("ascii").rstrip("=")


def decode_cursor(token: str) -> dict[str, Any]:
    """Decodes a page key produced by encode_cursor()."""
    if not token:
        raise CursorError("cannot decode an empty cursor", cursor=token)
    padded = token + "=" * (-len(token) % 4)
    try:
        raw = base64.urlsafe_b64decode(padded.encode("ascii"))
        key = json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeError, ValueError) as e:
        raise CursorError(f"malformed cursor: {e!s}", cursor=token, original_error=e) from e
    if not isinstance(key, dict):
        raise CursorError("malformed cursor: expected an object", cursor=token)
    return key


def encode_dynamo_key(last_evaluated_key: dict[str, Any]) -> str:
    """
    Encodes a DynamoDB key map as an opaque page key.

    Input:  {"pk": {"S": "room-1"}, "sk": {"N": "123"}}
    """
    try:
        plain = {
            k: _restore_to_python(_deserializer.deserialize(v))
            for k, v in last_evaluated_key.items()
        }
    except (TypeError, AttributeError) as e:
        raise CursorError(
            f"invalid DynamoDB key: {e!s}", cursor=last_evaluated_key, original_error=e
        ) from e
    return encode_cursor(plain)


def decode_dynamo_key(token: str) -> dict[str, Any]:
    """
    Decodes a page key produced by encode_dynamo_key() back into a DynamoDB key map,
    ready to be passed as ExclusiveStartKey.
    """
    plain = decode_cursor(token)
    try:
        return {k: _serializer.serialize(_prepare_for_dynamo(v)) for k, v in plain.items()}
    except TypeError as e:
        raise CursorError(f"invalid DynamoDB key: {e!s}", cursor=token, original_error=e) from e


def _restore_to_python(value: Any) -> Any:
    """Converts Decimal back to int (if whole number) or float so the key is JSON-friendly."""
    if isinstance(value, Decimal):
        if value % 1 == 0:
            return int(value)
        return float(value)
    if isinstance(value, (bytes, Binary)):
        raise TypeError("binary key attributes are not supported")
    return value


def _prepare_for_dynamo(value: Any) -> Any:
    # boto3 TypeSerializer rejects float
    if isinstance(value, float):
        return Decimal(str(value))
    return value
