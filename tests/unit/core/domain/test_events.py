"""
core/domain/events.py 테스트

이벤트 생성, 직렬화/역직렬화, 입력 종류별 생성 테스트
"""

import json
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from core.domain.events import (
    EVENT_CLASSES,
    DividendPaid,
    EventTypes,
    PriceObtained,
    StockIdentifier,
    StocksBought,
    create_event,
    event_from_dict,
    event_from_json,
)
from core.domain.money import Amount
from core.errors import CorruptEventError, MalformedAmountError


class TestEventTypes:
    """EventTypes 상수 테스트"""

    def test_all_types(self) -> None:
        assert set(EventTypes.all_types()) == {"StocksBought", "PriceObtained", "DividendPaid"}

    def test_is_valid_type(self) -> None:
        assert EventTypes.is_valid_type("StocksBought") is True
        assert EventTypes.is_valid_type("StocksSold") is False

    def test_registry_matches(self) -> None:
        assert set(EVENT_CLASSES) == set(EventTypes.all_types())


class TestStockIdentifier:
    """StockIdentifier 테스트"""

    def test_of_str(self) -> None:
        assert StockIdentifier.of("AAPL") == StockIdentifier("AAPL")

    def test_str(self) -> None:
        assert str(StockIdentifier("ASR.AS")) == "ASR.AS"

    def test_hashable(self) -> None:
        assert len({StockIdentifier("AAPL"), StockIdentifier("AAPL")}) == 1


class TestEventCreation:
    """이벤트 생성 테스트"""

    def test_stocks_bought(self, iphone_launched_at: datetime) -> None:
        event = StocksBought.create(10, "150.0 USD", "AAPL", created_at=iphone_launched_at)

        assert event.amount == 10.0
        assert event.price == Amount(Decimal("150.0"), "USD")
        assert event.identifier == StockIdentifier("AAPL")
        assert event.created_at == iphone_launched_at
        assert event.event_type == "StocksBought"
        assert event.currency == "USD"

    def test_price_obtained(self, iphone_launched_at: datetime) -> None:
        event = PriceObtained.create("170 USD", "AAPL", created_at=iphone_launched_at)

        assert event.event_type == "PriceObtained"
        assert event.price.num == Decimal("170")

    def test_dividend_paid(self, iphone_launched_at: datetime) -> None:
        event = DividendPaid.create("0.5 EUR", "ASR.AS", created_at=iphone_launched_at)

        assert event.event_type == "DividendPaid"
        assert event.currency == "EUR"

    def test_default_created_at_is_now_utc(self) -> None:
        before = datetime.now(timezone.utc)
        event = PriceObtained.create("1 USD", "AAPL")
        after = datetime.now(timezone.utc)

        assert before <= event.created_at <= after
        assert event.created_at.tzinfo == timezone.utc

    def test_naive_created_at_treated_as_utc(self) -> None:
        event = PriceObtained.create("1 USD", "AAPL", created_at=datetime(2020, 1, 1))

        assert event.created_at == datetime(2020, 1, 1, tzinfo=timezone.utc)

    def test_aware_created_at_normalized(self) -> None:
        """다른 타임존 → UTC로 변환"""
        kst = timezone(timedelta(hours=9))
        event = PriceObtained.create(
            "1 USD", "AAPL", created_at=datetime(2020, 1, 1, 9, 0, tzinfo=kst)
        )

        assert event.created_at == datetime(2020, 1, 1, 0, 0, tzinfo=timezone.utc)
        assert event.created_at.tzinfo == timezone.utc

    def test_malformed_price(self) -> None:
        with pytest.raises(MalformedAmountError):
            StocksBought.create(1, "150", "AAPL")

    def test_frozen(self, aapl_bought: StocksBought) -> None:
        """불변성 확인"""
        with pytest.raises(AttributeError):
            aapl_bought.amount = 1.0  # type: ignore


class TestCreateEvent:
    """create_event 테스트"""

    def test_buy(self, iphone_launched_at: datetime) -> None:
        event = create_event("buy", "150 USD", "AAPL", amount=3, created_at=iphone_launched_at)

        assert isinstance(event, StocksBought)
        assert event.amount == 3.0

    def test_dividend_ignores_amount(self) -> None:
        event = create_event("dividend", "0.5 USD", "AAPL", amount=99)

        assert isinstance(event, DividendPaid)
        assert not hasattr(event, "amount")

    def test_price(self) -> None:
        assert isinstance(create_event("price", "1 USD", "AAPL"), PriceObtained)

    def test_unknown_kind(self) -> None:
        with pytest.raises(ValueError):
            create_event("sell", "1 USD", "AAPL")


class TestEventSerialization:
    """이벤트 직렬화 / 역직렬화 테스트"""

    def test_to_dict_shape(self, aapl_bought: StocksBought) -> None:
        data = aapl_bought.to_dict()

        assert data["type"] == "StocksBought"
        assert data["identifier"] == "AAPL"
        assert data["amount"] == 10.0
        assert data["price"] == {"num": "150.0", "currency": "USD"}
        assert data["created_at"].startswith("2007-01-09T09:42:00")

    def test_json_roundtrip_each_type(
        self,
        aapl_bought: StocksBought,
        aapl_price: PriceObtained,
        aapl_dividend: DividendPaid,
    ) -> None:
        for event in (aapl_bought, aapl_price, aapl_dividend):
            assert event_from_json(event.to_json()) == event

    def test_extra_keys_ignored(self, aapl_price: PriceObtained) -> None:
        data = aapl_price.to_dict()
        data["note"] = "추가 필드"

        assert event_from_dict(data) == aapl_price

    def test_unknown_type(self) -> None:
        with pytest.raises(CorruptEventError):
            event_from_dict({"type": "StocksSold", "created_at": "2020-01-01T00:00:00+00:00"})

    def test_missing_type(self) -> None:
        with pytest.raises(CorruptEventError):
            event_from_dict({"identifier": "AAPL"})

    def test_missing_field(self, aapl_bought: StocksBought) -> None:
        data = aapl_bought.to_dict()
        del data["amount"]

        with pytest.raises(CorruptEventError):
            event_from_dict(data)

    @pytest.mark.parametrize("identifier", [123, None, ["AAPL"], {"ticker": "AAPL"}])
    def test_non_string_identifier(self, aapl_price: PriceObtained, identifier: object) -> None:
        """identifier가 문자열이 아니면 복원 실패"""
        data = aapl_price.to_dict()
        data["identifier"] = identifier

        with pytest.raises(CorruptEventError):
            event_from_dict(data)

    def test_non_string_type(self) -> None:
        with pytest.raises(CorruptEventError):
            event_from_dict({"type": 1, "created_at": "2020-01-01T00:00:00+00:00"})

    def test_invalid_price(self, aapl_price: PriceObtained) -> None:
        data = aapl_price.to_dict()
        data["price"] = {"num": "not-a-number", "currency": "USD"}

        with pytest.raises(CorruptEventError):
            event_from_dict(data)

    def test_invalid_json(self) -> None:
        with pytest.raises(CorruptEventError):
            event_from_json("{not json")

    def test_non_object_json(self) -> None:
        with pytest.raises(CorruptEventError):
            event_from_json(json.dumps(["StocksBought"]))
