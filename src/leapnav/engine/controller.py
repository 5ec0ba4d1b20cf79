"""Single active search at a time."""

from __future__ import annotations

from typing import TYPE_CHECKING

from leapnav.config import DEFAULT_CONFIG, Config
from leapnav.engine.session import Scheduler, SearchSession
from leapnav.models.options import BIDIRECTIONAL, SearchOptions

if TYPE_CHECKING:
    from leapnav.engine.protocols import EditorHostProtocol, QueryInputProtocol


class JumpController:
    """Starts search sessions, superseding any session still running."""

    def __init__(
        self,
        host: EditorHostProtocol,
        *,
        config: Config = DEFAULT_CONFIG,
        schedule: Scheduler | None = None,
    ) -> None:
        self._host = host
        self._config = config
        self._schedule = schedule
        self._session: SearchSession | None = None

    @property
    def session(self) -> SearchSession | None:
        return self._session

    def start(
        self, options: SearchOptions, query_input: QueryInputProtocol | None = None
    ) -> SearchSession:
        self.cancel()
        self._session = SearchSession(
            self._host,
            options,
            config=self._config,
            query_input=query_input,
            schedule=self._schedule,
        )
        return self._session

    def forward(self, query_input: QueryInputProtocol | None = None) -> SearchSession:
        return self.start(SearchOptions.FORWARD, query_input)

    def backward(self, query_input: QueryInputProtocol | None = None) -> SearchSession:
        return self.start(SearchOptions.BACKWARD, query_input)

    def all_editors(self, query_input: QueryInputProtocol | None = None) -> SearchSession:
        return self.start(BIDIRECTIONAL | SearchOptions.ALL_EDITORS, query_input)

    def cancel(self) -> None:
        if self._session is not None:
            self._session.cancel()
            self._session = None
