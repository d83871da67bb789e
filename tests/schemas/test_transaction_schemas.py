"""Transaction Schemas - boundary validation and camelCase wire format."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from ledger_api.schemas.transaction import (
    DEFAULT_SORT,
    CreateTransactionRequest,
    GetTransactionResponse,
    GetTransactionsQuery,
)


def _create(**overrides):
    data = {
        "userId": "user001", "amount": 10.0,
        "type": "credit", "status": "pending",
    }
    data.update(overrides)
    return CreateTransactionRequest(**data)


def test_create_request_accepts_camel_case():
    req = _create(description="coffee")
    assert req.user_id == "user001"
    assert req.description == "coffee"


def test_create_request_accepts_snake_case():
    req = CreateTransactionRequest(
        user_id="user002", amount=1.5, type="debit", status="completed",
    )
    assert req.user_id == "user002"
    assert req.description == ""


def test_create_request_strips_user_id():
    assert _create(userId="  user001  ").user_id == "user001"


def test_create_request_rejects_blank_user_id():
    with pytest.raises(ValidationError):
        _create(userId="   ")


@pytest.mark.parametrize("amount", [float("nan"), float("inf"), float("-inf")])
def test_create_request_rejects_non_finite_amount(amount):
    with pytest.raises(ValidationError):
        _create(amount=amount)


def test_create_request_keeps_free_text_type_and_status():
    req = _create(type=" refund ", status="Reversed")
    assert req.type == "refund"
    assert req.status == "Reversed"


def test_create_request_rejects_overlong_type():
    with pytest.raises(ValidationError):
        _create(type="x" * 21)


def test_create_request_rejects_blank_status():
    with pytest.raises(ValidationError):
        _create(status="  ")


def test_response_serializes_camel_case():
    now = datetime(2026, 1, 1, tzinfo=timezone.utc)
    resp = GetTransactionResponse(
        transaction_id="tx001", user_id="user001", amount=1.0,
        type="credit", status="completed", description="",
        created_at=now, updated_at=now,
    )
    dumped = resp.model_dump(by_alias=True)
    assert set(dumped) == {
        "transactionId", "userId", "amount", "type", "status",
        "description", "createdAt", "updatedAt",
    }


def test_query_defaults():
    q = GetTransactionsQuery()
    assert (q.page, q.size, q.sort) == (1, 10, DEFAULT_SORT)
    assert q.type is None and q.status is None and q.search is None
    assert q.offset == 0


def test_query_blank_filters_become_none():
    q = GetTransactionsQuery(type="", status="  ", search="")
    assert q.type is None
    assert q.status is None
    assert q.search is None


def test_query_offset_from_page_and_size():
    assert GetTransactionsQuery(page=3, size=20).offset == 40


@pytest.mark.parametrize("kwargs", [{"page": 0}, {"size": 0}, {"size": 101}])
def test_query_bounds(kwargs):
    with pytest.raises(ValidationError):
        GetTransactionsQuery(**kwargs)
