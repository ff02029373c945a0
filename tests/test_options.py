import dataclasses
from datetime import timedelta

from nyquest.options import CachingBehavior, ClientOptions


def test_defaults():
    options = ClientOptions()
    assert options.base_url is None
    assert options.user_agent is None
    assert options.default_headers == []
    assert options.caching_behavior is CachingBehavior.BEST_EFFORT
    assert options.use_default_proxy is True
    assert options.use_cookies is True
    assert options.follow_redirects is True
    assert options.max_response_buffer_size is None
    assert options.request_timeout is None


def test_default_headers_not_shared():
    first = ClientOptions()
    second = ClientOptions()
    first.default_headers.append(("Accept", "application/json"))
    assert second.default_headers == []


def test_replace_keeps_other_fields():
    options = ClientOptions(base_url="http://localhost:8080", use_cookies=False)
    changed = dataclasses.replace(options, caching_behavior=CachingBehavior.DISABLED)
    assert changed.base_url == "http://localhost:8080"
    assert changed.use_cookies is False
    assert changed.caching_behavior is CachingBehavior.DISABLED
    assert options.caching_behavior is CachingBehavior.BEST_EFFORT


def test_equality_and_timeout():
    a = ClientOptions(request_timeout=timedelta(seconds=1), max_response_buffer_size=10)
    b = ClientOptions(request_timeout=timedelta(seconds=1), max_response_buffer_size=10)
    assert a == b
    assert a != ClientOptions(request_timeout=timedelta(seconds=10))


def test_caching_behaviors_distinct():
    disabled = ClientOptions(caching_behavior=CachingBehavior.DISABLED)
    assert disabled.caching_behavior is CachingBehavior.DISABLED
    assert disabled != ClientOptions()
    assert set(CachingBehavior) == {CachingBehavior.DISABLED, CachingBehavior.BEST_EFFORT}