"""
Exchange Service Tests - Unit Tests for the Currency Exchange and its Observers

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- tengepay.application.exchange_service (CurrencyExchange, Subject)
- tengepay.adapters.observers (BankObserver, InvestorObserver, ExchangeOfficeObserver)
- unittest.mock (Mock observers)
"""
from unittest.mock import Mock, call

import pytest

from tengepay.adapters.observers import (
    BankObserver,
    ExchangeOfficeObserver,
    InvestorObserver,
    RateObserver,
)
from tengepay.application.exchange_service import CurrencyExchange, Subject


class RecordingObserver(RateObserver):
    """Records the rates it receives into a shared log."""

    def __init__(self, label, log):
        super().__init__(writer=lambda _: None)
        self.label = label
        self.log = log

    def update(self, rate):
        self.log.append((self.label, rate))


@pytest.fixture
def exchange():
    return CurrencyExchange(writer=lambda _: None)


class TestCurrencyExchange:
    def test_initial_state(self, exchange):
        assert exchange.rate == 0.0
        assert exchange.observers == ()
        assert isinstance(exchange, Subject)

    def test_set_rate_updates_rate_and_prints_notice(self):
        lines = []
        exchange = CurrencyExchange(writer=lines.append)

        change = exchange.set_rate(495.0)

        assert exchange.rate == 495.0
        assert change.previous == 0.0
        assert change.current == 495.0
        assert change.notified == 0
        assert lines == ["\nNew USD rate: 495.0"]

    def test_notifies_in_subscription_order(self, exchange):
        log = []
        a, b, c = (RecordingObserver(n, log) for n in "abc")
        for o in (a, b, c):
            exchange.add_observer(o)

        exchange.set_rate(12.5)

        assert log == [("a", 12.5), ("b", 12.5), ("c", 12.5)]

    def test_duplicates_are_notified_twice(self, exchange):
        log = []
        a = RecordingObserver("a", log)
        exchange.add_observer(a)
        exchange.add_observer(a)

        assert exchange.notify_observers() == 2
        assert log == [("a", 0.0), ("a", 0.0)]

    def test_remove_first_occurrence_only(self, exchange):
        log = []
        a = RecordingObserver("a", log)
        b = RecordingObserver("b", log)
        for o in (a, b, a):
            exchange.add_observer(o)

        exchange.remove_observer(a)

        assert exchange.observers == (b, a)

    def test_remove_absent_is_noop(self, exchange):
        log = []
        a = RecordingObserver("a", log)
        b = RecordingObserver("b", log)
        exchange.add_observer(a)

        exchange.remove_observer(b)

        assert exchange.observers == (a,)

    def test_remove_uses_identity(self, exchange):
        class AlwaysEqual(RecordingObserver):
            def __eq__(self, other):
                return True

            __hash__ = RateObserver.__hash__

        log = []
        a = AlwaysEqual("a", log)
        b = AlwaysEqual("b", log)
        exchange.add_observer(a)
        exchange.add_observer(b)

        exchange.remove_observer(b)

        assert exchange.observers == (a,)
        assert exchange.observers[0] is a

    def test_add_remove_sequence(self, exchange):
        log = []
        a, b, c = (RecordingObserver(n, log) for n in "abc")
        exchange.add_observer(a)
        exchange.add_observer(b)
        exchange.remove_observer(a)
        exchange.add_observer(c)
        exchange.add_observer(a)
        exchange.remove_observer(c)

        exchange.set_rate(1.0)

        assert log == [("b", 1.0), ("a", 1.0)]

    def test_unsubscribe_during_notification_applies_next_time(self, exchange):
        log = []
        b = RecordingObserver("b", log)

        class Unsubscriber(RecordingObserver):
            def update(self, rate):
                super().update(rate)
                exchange.remove_observer(b)

        a = Unsubscriber("a", log)
        exchange.add_observer(a)
        exchange.add_observer(b)

        exchange.set_rate(1.0)
        exchange.set_rate(2.0)

        assert log == [("a", 1.0), ("b", 1.0), ("a", 2.0)]

    def test_mock_observers_receive_current_rate(self, exchange):
        observer = Mock(spec=RateObserver)
        exchange.add_observer(observer)

        exchange.set_rate(495.0)
        exchange.set_rate(510.0)

        assert observer.update.call_args_list == [call(495.0), call(510.0)]


class TestObservers:
    def test_bank(self):
        lines = []
        BankObserver(writer=lines.append).update(495.0)
        assert lines == ["Bank received an update. New rate: 495.0"]

    def test_exchange_office(self):
        lines = []
        ExchangeOfficeObserver(writer=lines.append).update(510.0)
        assert lines == ["Exchange office updated its board. USD = 510.0"]

    @pytest.mark.parametrize(
        "rate, expected",
        [
            (495.0, "Investor: The rate is low, time to buy!"),
            (500.0, "Investor: The rate is low, time to buy!"),
            (500.01, "Investor: The rate is high, time to sell!"),
            (530.0, "Investor: The rate is high, time to sell!"),
            (-1.0, "Investor: The rate is low, time to buy!"),
        ],
    )
    def test_investor_threshold(self, rate, expected):
        lines = []
        InvestorObserver(threshold=500, writer=lines.append).update(rate)
        assert lines == [expected]

    def test_investor_default_threshold_from_settings(self):
        with_settings = InvestorObserver(writer=lambda _: None)
        assert with_settings.threshold == 500.0
        assert with_settings.should_sell(500.0) is False
        assert with_settings.should_sell(501.0) is True

    def test_investor_custom_threshold(self):
        investor = InvestorObserver(threshold=0.0, writer=lambda _: None)
        assert investor.should_sell(0.0) is False
        assert investor.should_sell(0.1) is True

    def test_observer_base_is_abstract(self):
        with pytest.raises(TypeError):
            RateObserver()

    def test_default_writer_prints(self, capsys):
        BankObserver().update(1.5)
        assert "1.5" in capsys.readouterr().out


class TestRateScenario:
    def test_bank_investor_office(self):
        lines = []
        exchange = CurrencyExchange(writer=lines.append)
        bank = Mock(wraps=BankObserver(writer=lines.append))
        investor = InvestorObserver(threshold=500, writer=lines.append)
        office = ExchangeOfficeObserver(writer=lines.append)
        for o in (bank, investor, office):
            exchange.add_observer(o)

        first = exchange.set_rate(495.0)
        second = exchange.set_rate(510.0)
        exchange.remove_observer(bank)
        third = exchange.set_rate(530.0)

        assert (first.notified, second.notified, third.notified) == (3, 3, 2)
        assert bank.update.call_args_list == [call(495.0), call(510.0)]
        assert lines == [
            "\nNew USD rate: 495.0",
            "Bank received an update. New rate: 495.0",
            "Investor: The rate is low, time to buy!",
            "Exchange office updated its board. USD = 495.0",
            "\nNew USD rate: 510.0",
            "Bank received an update. New rate: 510.0",
            "Investor: The rate is high, time to sell!",
            "Exchange office updated its board. USD = 510.0",
            "\nNew USD rate: 530.0",
            "Investor: The rate is high, time to sell!",
            "Exchange office updated its board. USD = 530.0",
        ]
