"""Builder for filter statements passed to paginated ``get*ByStatement`` calls.

Usage:
    builder = StatementBuilder().order_by("id ASC").limit(StatementBuilder.SUGGESTED_PAGE_LIMIT)
    while True:
        page = service.service.getLineItemsByStatement(builder.to_statement())
        ...
        builder.increase_offset_by(StatementBuilder.SUGGESTED_PAGE_LIMIT)
        if builder.offset >= page.totalResultSetSize:
            break
"""

from datetime import date, datetime
from typing import Any, Optional


class StatementBuilder:
    """Builds ``WHERE ... ORDER BY ... LIMIT ... OFFSET ...`` queries."""

    SUGGESTED_PAGE_LIMIT = 500

    def __init__(self) -> None:
        self._where: Optional[str] = None
        self._order_by: Optional[str] = None
        self._limit: Optional[int] = None
        self._offset: Optional[int] = None
        self._values: dict[str, Any] = {}

    def where(self, condition: str) -> "StatementBuilder":
        self._where = condition
        return self

    def order_by(self, clause: str) -> "StatementBuilder":
        self._order_by = clause
        return self

    def limit(self, limit: Optional[int]) -> "StatementBuilder":
        if limit is not None and limit < 0:
            raise ValueError(f"Limit must not be negative, got {limit}")
        self._limit = limit
        return self

    def with_offset(self, offset: Optional[int]) -> "StatementBuilder":
        if offset is not None and offset < 0:
            raise ValueError(f"Offset must not be negative, got {offset}")
        self._offset = offset
        return self

    def with_bind_variable(self, key: str, value: Any) -> "StatementBuilder":
        """Bind ``:key`` in the WHERE clause to ``value``."""
        self._values[key] = value
        return self

    def increase_offset_by(self, amount: int) -> "StatementBuilder":
        self._offset = (self._offset or 0) + amount
        return self

    def remove_limit_and_offset(self) -> "StatementBuilder":
        self._limit = None
        self._offset = None
        return self

    @property
    def offset(self) -> int:
        return self._offset or 0

    def to_query(self) -> str:
        parts = []
        if self._where:
            parts.append(f"WHERE {self._where}")
        if self._order_by:
            parts.append(f"ORDER BY {self._order_by}")
        if self._limit is not None:
            parts.append(f"LIMIT {self._limit}")
        if self._offset is not None:
            if self._limit is None:
                raise ValueError("OFFSET requires a LIMIT")
            parts.append(f"OFFSET {self._offset}")
        return " ".join(parts)

    def to_statement(self) -> dict[str, Any]:
        """The statement as the SOAP layer expects it."""
        return {
            "query": self.to_query(),
            "values": [
                {"key": key, "value": _to_soap_value(value)}
                for key, value in self._values.items()
            ],
        }


def _to_soap_value(value: Any) -> dict[str, Any]:
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return {"xsi_type": "BooleanValue", "value": value}
    if isinstance(value, (int, float)):
        return {"xsi_type": "NumberValue", "value": str(value)}
    if isinstance(value, datetime):
        return {
            "xsi_type": "DateTimeValue",
            "value": {
                "date": {"year": value.year, "month": value.month, "day": value.day},
                "hour": value.hour,
                "minute": value.minute,
                "second": value.second,
            },
        }
    if isinstance(value, date):
        return {
            "xsi_type": "DateValue",
            "value": {"year": value.year, "month": value.month, "day": value.day},
        }
    if isinstance(value, (list, tuple, set)):
        return {"xsi_type": "SetValue", "values": [_to_soap_value(v) for v in value]}
    if value is None:
        raise ValueError("Bind variables cannot be None")
    return {"xsi_type": "TextValue", "value": str(value)}
