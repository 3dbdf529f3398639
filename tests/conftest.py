import pytest


class FakeHandle:
    """Stands in for a threading.Timer."""

    def __init__(self, delay, callback):
        self.delay = delay
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.callback()


class FakeScheduler:
    """Records scheduled callbacks so tests decide when they run."""

    def __init__(self):
        self.handles = []

    def __call__(self, delay, callback):
        handle = FakeHandle(delay, callback)
        self.handles.append(handle)
        return handle

    @property
    def last(self):
        return self.handles[-1]

    def run_pending(self):
        for handle in list(self.handles):
            if not handle.cancelled:
                handle.fire()
        self.handles.clear()


class LastChoice:
    """Random source that always picks the last option."""

    def __init__(self):
        self.seen = []

    def choice(self, options):
        self.seen.append(list(options))
        return options[-1]


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def last_choice():
    return LastChoice()
