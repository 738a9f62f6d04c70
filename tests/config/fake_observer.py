"""Fake ConfigObserver for use in tests — records events without mocking."""


class FakeConfigObserver:
    def __init__(self) -> None:
        self.loaded: list[dict[str, object]] = []
        self.defaulted: int = 0

    def config_loaded(self, path: str, levels: list[str]) -> None:
        self.loaded.append({"path": path, "levels": levels})

    def config_defaulted(self) -> None:
        self.defaulted += 1
