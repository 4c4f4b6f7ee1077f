from authdesk.shared.middleware.rate_limit import InMemoryRateLimiter


def test_rate_limiter_sliding_window() -> None:
    now = [0.0]
    limiter = InMemoryRateLimiter(2, 10.0, clock=lambda: now[0])

    assert limiter.allow("ip") is True
    assert limiter.allow("ip") is True
    assert limiter.allow("ip") is False
    assert limiter.allow("other-ip") is True

    now[0] = 10.5
    assert limiter.allow("ip") is True


def test_idle_buckets_are_dropped() -> None:
    now = [0.0]
    limiter = InMemoryRateLimiter(5, 10.0, clock=lambda: now[0])

    for i in range(100):
        limiter.allow(f"client-{i}")
    assert len(limiter) == 100

    now[0] = 30.0
    assert limiter.allow("client-0") is True
    assert len(limiter) == 1
