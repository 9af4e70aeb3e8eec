import pytest


class DummyMCP:
    """Minimal FastMCP stand-in to capture tool/resource registration."""

    def __init__(self, name: str = "dummy", **kwargs) -> None:
        self.name = name
        self.kwargs = kwargs
        self.tools = {}
        self.resources = {}
        self.run_calls = []

    def tool(self, *, name: str):
        def _decorator(fn):
            self.tools[name] = fn
            return fn
        return _decorator

    def resource(self, uri: str, **kwargs):
        def _decorator(fn):
            self.resources[uri] = fn
            return fn
        return _decorator

    def run(self, *, transport: str) -> None:
        self.run_calls.append({"transport": transport})


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeFetcher:
    """Fetcher returning scripted values or raising scripted errors per key."""

    def __init__(self, values=None, errors=None) -> None:
        self.values = dict(values or {})
        self.errors = dict(errors or {})
        self.calls = []

    async def fetch(self, key: str):
        self.calls.append(key)
        if key in self.errors:
            raise self.errors[key]
        if key in self.values:
            return self.values[key]
        return f"value:{key}:{self.calls.count(key)}"


class DummyScheduler:
    """AsyncIOScheduler stand-in recording jobs instead of running them."""

    def __init__(self) -> None:
        self.jobs = []
        self.running = False
        self.started = 0
        self.shutdown_calls = []

    def add_job(self, func, trigger, **kwargs):
        job = DummyJob(self, func, trigger, kwargs)
        self.jobs.append(job)
        return job

    def start(self) -> None:
        self.running = True
        self.started += 1

    def shutdown(self, wait: bool = True) -> None:
        self.running = False
        self.shutdown_calls.append(wait)


class DummyJob:
    def __init__(self, scheduler, func, trigger, kwargs) -> None:
        self.scheduler = scheduler
        self.func = func
        self.trigger = trigger
        self.kwargs = kwargs
        self.removed = False

    def remove(self) -> None:
        self.removed = True
        self.scheduler.jobs.remove(self)


@pytest.fixture
def dummy_mcp():
    return DummyMCP()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fake_fetcher():
    return FakeFetcher()


@pytest.fixture
def dummy_scheduler():
    return DummyScheduler()

