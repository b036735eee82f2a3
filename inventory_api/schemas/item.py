"""Marshmallow schemas for Item."""

from __future__ import annotations

import math

from marshmallow import EXCLUDE, Schema, fields, validate


# Largest integers a BSON document can store.
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _is_json_number(value: object) -> bool:
    # bool is an int subclass; JSON true/false are not quantities
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class JsonFloat(fields.Float):
    """Float that only accepts JSON numbers (no numeric strings)."""

    default_error_messages = {"too_large": "Number too large."}

    def _deserialize(self, value, attr, data, **kwargs):  # type: ignore[no-untyped-def]
        if not _is_json_number(value):
            raise self.make_error("invalid")
        if isinstance(value, int) and not _INT64_MIN <= value <= _INT64_MAX:
            raise self.make_error("too_large")
        return super()._deserialize(value, attr, data, **kwargs)


class TruncatedInteger(fields.Integer):
    """Accept any finite JSON number and truncate it toward zero.

    The result must fit in a signed 64-bit integer.
    """

    default_error_messages = {"too_large": "Number must fit in a signed 64-bit integer."}

    def _deserialize(self, value, attr, data, **kwargs):  # type: ignore[no-untyped-def]
        if not _is_json_number(value):
            raise self.make_error("invalid")
        if isinstance(value, float) and not math.isfinite(value):
            raise self.make_error("invalid")
        number = int(value)
        if not _INT64_MIN <= number <= _INT64_MAX:
            raise self.make_error("too_large")
        return number


class ItemSchema(Schema):
    """Validate an Item body and serialize stored items without their id."""

    class Meta:
        unknown = EXCLUDE

    name = fields.String(required=True, validate=validate.Length(min=1))
    type = fields.String(required=True)
    price = JsonFloat(required=True)
    amount = TruncatedInteger(required=True)


class ItemWithIdSchema(ItemSchema):
    """Serialize Item including its id (list view)."""

    id = fields.String(required=True)
