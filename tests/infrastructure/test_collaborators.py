from launchbar.core.launch_config import Choice, Interest, Option
from launchbar.domain.events import ApplicationLaunched, EventBus, IntentDispatched, InterestDispatched
from launchbar.infrastructure import EventBusDispatcher, FileLaunchConfigProvider, StaticOptionProvider


def make_provider() -> StaticOptionProvider:
    return StaticOptionProvider(
        {
            "pairs": [Option(value="USD/GBP"), Option(value="EUR/USD")],
            "tickers": [Option(value="AAPL", display="Apple")],
        }
    )


def test_choice_filtering_honours_ignore_case() -> None:
    provider = make_provider()
    assert provider.filter_choice(Choice(key="pair", list="pairs"), "eur") == [Option(value="EUR/USD")]
    assert provider.filter_choice(Choice(key="pair", list="pairs", ignoreCase=False), "eur") == []


def test_interest_filtering_matches_display() -> None:
    provider = make_provider()
    assert provider.filter_interest(Interest(topic="stock", list="tickers"), "app") == [
        Option(value="AAPL", display="Apple")
    ]


def test_unknown_or_missing_list_yields_nothing() -> None:
    provider = make_provider()
    assert provider.filter_choice(Choice(key="x", list="nope"), "") == []
    assert provider.filter_interest(Interest(topic="news"), "") == []


def test_event_bus_dispatcher_publishes_events() -> None:
    bus = EventBus()
    received = []
    for event_type in (ApplicationLaunched, IntentDispatched, InterestDispatched):
        bus.subscribe(event_type, received.append)
    dispatcher = EventBusDispatcher(bus)

    dispatcher.launch("https://mail")
    dispatcher.dispatch_intent("trade", "fx", None, {"side": "BUY"})
    dispatcher.dispatch_interest("stock", None, None, {"ticker": "AAPL"})

    assert [type(event) for event in received] == [ApplicationLaunched, IntentDispatched, InterestDispatched]
    assert received[1].payload == {"side": "BUY"}
    assert received[2].body == {"ticker": "AAPL"}


def test_file_provider_caches_until_reload(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text('{"applications": [{"url": "a"}]}', encoding="utf-8")
    provider = FileLaunchConfigProvider(path)

    first = provider.fetch_launch_config()
    path.write_text('{"applications": [{"url": "b"}]}', encoding="utf-8")

    assert provider.fetch_launch_config() is first
    assert provider.reload().applications[0].url == "b"
