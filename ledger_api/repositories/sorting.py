"""Sort Expressions - parse "field dir, field dir" strings into ORDER BY clauses.

Invariants:
    - Only whitelisted fields are sortable; anything else raises InvalidSortError
    - Accepted forms per term: "field", "field asc", "field desc", "-field"
    - camelCase field names are accepted as aliases of snake_case ones
    - An empty expression yields the caller's default
"""

import re

from sqlalchemy.sql.elements import ColumnElement, UnaryExpression

from ledger_api.core.domain_types import SortDirection
from ledger_api.core.errors import InvalidSortError

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _snake(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def parse_sort_terms(expr: str, allowed: list[str]) -> list[tuple[str, SortDirection]]:
    """Split a sort expression into (field, direction) pairs."""
    terms: list[tuple[str, SortDirection]] = []
    for raw in (expr or "").split(","):
        term = raw.strip()
        if not term:
            continue
        parts = term.split()
        if len(parts) > 2:
            raise InvalidSortError(term, allowed)

        name = parts[0]
        direction = SortDirection.ASC
        if name.startswith("-"):
            name = name[1:]
            direction = SortDirection.DESC
            if len(parts) == 2:
                raise InvalidSortError(term, allowed)
        elif len(parts) == 2:
            try:
                direction = SortDirection(parts[1].lower())
            except ValueError:
                raise InvalidSortError(term, allowed) from None

        field = _snake(name)
        if field not in allowed:
            raise InvalidSortError(term, allowed)
        terms.append((field, direction))
    return terms


def build_order_by(
    expr: str,
    columns: dict[str, ColumnElement],
    default: str,
    tiebreaker: ColumnElement,
) -> list[UnaryExpression]:
    """Resolve a sort expression against a column whitelist.

    The tiebreaker column is appended in the direction of the first term so
    that rows with equal sort keys keep a stable order across pages.
    """
    allowed = list(columns)
    terms = parse_sort_terms(expr, allowed) or parse_sort_terms(default, allowed)
    clauses = [
        columns[field].desc() if direction is SortDirection.DESC else columns[field].asc()
        for field, direction in terms
    ]
    first_direction = terms[0][1] if terms else SortDirection.ASC
    clauses.append(
        tiebreaker.desc() if first_direction is SortDirection.DESC else tiebreaker.asc()
    )
    return clauses
