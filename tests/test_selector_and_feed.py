import pytest

from conftest import make_article
from headlines.errors import TransportError
from headlines.feed import HeadlinesFeed
from headlines.models import Category, Idle, Loading, Success
from headlines.services.selector import CategorySelector


async def no_sleep(delay: float) -> None:
    return None


def test_selector_notifies_once_per_distinct_selection() -> None:
    selector = CategorySelector()
    seen: list[Category] = []
    selector.subscribe(seen.append)

    assert selector.current is Category.GENERAL
    assert selector.select("sports") is True
    assert selector.select(Category.SPORTS) is False
    assert selector.select(Category.HEALTH) is True

    assert seen == [Category.SPORTS, Category.HEALTH]
    assert selector.current is Category.HEALTH


def test_selector_rejects_unknown_category() -> None:
    selector = CategorySelector()
    with pytest.raises(ValueError):
        selector.select("weather")
    assert selector.current is Category.GENERAL


def test_selector_unsubscribe() -> None:
    selector = CategorySelector(Category.SCIENCE)
    seen: list[Category] = []
    unsubscribe = selector.subscribe(seen.append)
    unsubscribe()
    selector.select(Category.BUSINESS)
    assert seen == []


@pytest.mark.asyncio
async def test_feed_loads_default_category_on_start(settings, stub_service) -> None:
    service = stub_service({Category.GENERAL: [[make_article("Top")]]})
    feed = HeadlinesFeed(service, settings, sleep=no_sleep)
    assert isinstance(feed.state, Idle)

    feed.start()
    feed.start()
    assert isinstance(feed.state, Loading)
    await feed.drain()

    assert service.calls == [Category.GENERAL]
    assert isinstance(feed.state, Success)
    assert feed.state.articles[0].title == "Top"


@pytest.mark.asyncio
async def test_reselecting_active_category_is_a_no_op(settings, stub_service) -> None:
    service = stub_service({Category.GENERAL: [[make_article("Top")]]})
    feed = HeadlinesFeed(service, settings, sleep=no_sleep)
    feed.start()
    await feed.drain()
    before = feed.state

    assert feed.select(Category.GENERAL) is False
    await feed.drain()

    assert service.calls == [Category.GENERAL]
    assert feed.state is before


@pytest.mark.asyncio
async def test_switching_category_starts_new_sequence(settings, stub_service) -> None:
    service = stub_service(
        {
            Category.GENERAL: [[make_article("Top")]],
            Category.ENTERTAINMENT: [[make_article("Film")]],
        }
    )
    feed = HeadlinesFeed(service, settings, sleep=no_sleep)
    feed.start()
    await feed.drain()

    assert feed.select("entertainment") is True
    state = feed.state
    assert isinstance(state, Loading)
    assert state.category is Category.ENTERTAINMENT
    await feed.drain()

    assert feed.category is Category.ENTERTAINMENT
    assert feed.state.articles[0].title == "Film"
    assert service.calls == [Category.GENERAL, Category.ENTERTAINMENT]


@pytest.mark.asyncio
async def test_select_before_start_fetches_only_once(settings, stub_service) -> None:
    service = stub_service()
    feed = HeadlinesFeed(service, settings, sleep=no_sleep)

    feed.select(Category.GENERAL)
    feed.start()
    await feed.drain()

    assert service.calls == [Category.GENERAL]


@pytest.mark.asyncio
async def test_refresh_retries_failed_category(settings, stub_service) -> None:
    failures = [TransportError("down")] * 3
    service = stub_service({Category.GENERAL: [*failures, [make_article("Up")]]})
    feed = HeadlinesFeed(service, settings, sleep=no_sleep)
    feed.start()
    await feed.drain()
    assert feed.state.status == "failed"

    feed.refresh()
    await feed.drain()

    assert isinstance(feed.state, Success)
    assert len(service.calls) == 4
