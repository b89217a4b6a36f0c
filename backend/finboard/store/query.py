from __future__ import annotations

from typing import Iterable

EQUAL_TO = "EqualTo"
STARTS_WITH = "StartsWith"
ASC = "ASC"
DESC = "DESC"


def field_list(names: Iterable[str]) -> list[dict]:
    return [{"field": {"Name": n}} for n in names]


def where_equal(field: str, value) -> dict:
    return {"FieldName": field, "Operator": EQUAL_TO, "Values": [value]}


def where_starts_with(field: str, prefix: str) -> dict:
    return {"FieldName": field, "Operator": STARTS_WITH, "Values": [prefix]}


def order_by(field: str, direction: str = ASC) -> dict:
    return {"fieldName": field, "sorttype": direction}


def requested_fields(params: dict) -> list[str]:
    out: list[str] = []
    for f in params.get("fields") or []:
        name = (f.get("field") or {}).get("Name")
        if name:
            out.append(name)
    return out


def _clause_matches(record: dict, clause: dict) -> bool:
    field = clause.get("FieldName")
    op = clause.get("Operator")
    values = clause.get("Values") or []
    v = record.get(field)

    if op == EQUAL_TO:
        return v in values
    if op == STARTS_WITH:
        if v is None:
            return False
        return any(str(v).startswith(str(p)) for p in values)
    raise ValueError(f"unsupported operator: {op}")


def matches(record: dict, where: list[dict] | None) -> bool:
    return all(_clause_matches(record, c) for c in (where or []))


def sort_records(records: list[dict], order: list[dict] | None) -> list[dict]:
    out = list(records)
    # Stable sorts applied last-key-first give a multi-key ordering.
    for o in reversed(order or []):
        field = o.get("fieldName")
        desc = (o.get("sorttype") or ASC).upper() == DESC
        present = [r for r in out if r.get(field) is not None]
        missing = [r for r in out if r.get(field) is None]
        present.sort(key=lambda r: r[field], reverse=desc)
        out = present + missing
    return out


def project(record: dict, fields: list[str]) -> dict:
    if not fields:
        return dict(record)
    out = {"Id": record.get("Id")}
    for f in fields:
        out[f] = record.get(f)
    return out
