async def async_coro(response):
    return response


class FakeClock:
    """
    monotonic clock moving forward only when asked to
    """
    def __init__(self, start=1000):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


def make_fake_sleep(clock: FakeClock, sleeps: list):
    async def fake_sleep(seconds):
        sleeps.append(seconds)
        clock.advance(seconds)
    return fake_sleep
