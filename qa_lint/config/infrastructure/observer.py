"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, path: str, levels: list[str]) -> None:
        self._log.info("config.loaded", path=path, levels=levels)

    def config_defaulted(self) -> None:
        self._log.debug("config.defaulted", message="No config file; using defaults")
