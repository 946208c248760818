"""Contract-driven cleanup of validated records.

One routine replaces per-task cleaning code: the Contract's field metadata
decides what gets trimmed and filtered, so adding a task never means writing
new cleaning logic.
"""

from __future__ import annotations

from typing import Any

from crystal_design.contracts.fields import ArrayOf, Contract, ObjectField, Scalar


def normalize(contract: Contract, record: dict[str, Any]) -> dict[str, Any]:
    """Return a cleaned copy of ``record``.

    - string leaves are trimmed; absent ones become ``""``
    - string arrays are trimmed per element and emptied entries dropped;
      absent ones become ``[]``
    - nested records and arrays of records are cleaned recursively
    - numbers, booleans and enums are copied as-is; absent optional ones stay
      absent

    The function is pure and idempotent: ``normalize(c, normalize(c, x))``
    equals ``normalize(c, x)``.
    """
    return _normalize_object(contract, record)


def _clean(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _normalize_object(contract: Contract, value: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for name, spec in contract.fields.items():
        current = value.get(name)
        if isinstance(spec, Scalar):
            if spec.kind == "string":
                out[name] = _clean(current)
            elif current is not None:
                out[name] = current
        elif isinstance(spec, ObjectField):
            source = current if isinstance(current, dict) else spec.contract.empty_default()
            out[name] = _normalize_object(spec.contract, source)
        else:
            out[name] = _normalize_array(spec, current)
    return out


def _normalize_array(spec: ArrayOf, value: Any) -> list[Any]:
    items = value if isinstance(value, list) else []
    if spec.holds_strings:
        cleaned = (_clean(item) for item in items)
        return [item for item in cleaned if item]
    if isinstance(spec.element, ObjectField):
        nested = spec.element.contract
        return [
            _normalize_object(nested, item) for item in items if isinstance(item, dict)
        ]
    return list(items)
