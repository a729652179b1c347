"""Search prompt driving a :class:`SearchSession` one key at a time."""

from __future__ import annotations

from kilo_engine.runtime import telemetry
from kilo_engine.search import SearchAction, SearchSession
from kilo_engine.terminal.keys import KeyEvent

from .base_mode import ModeContext, ModeResult
from .prompt_mode import PromptMode


class SearchMode(PromptMode):
    name = "search"
    template = "Search: {} (Use ESC/Arrows/Enter)"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.search = SearchSession()

    def on_enter(self, previous: str | None) -> None:
        self.search = SearchSession.start(self.session.viewport)
        super().on_enter(previous)

    def on_change(self, key: KeyEvent) -> None:
        before = self.session.cursor
        self.search.advance(self.session.document, self.session.viewport, self.text, key)
        if self.search.last_match is not None and self.session.cursor != before:
            telemetry.record_event(
                "search.match",
                level="debug",
                data={"query": self.text, "row": self.search.last_match},
            )

    def on_submit(self, key: KeyEvent) -> ModeResult:
        action = self.search.advance(self.session.document, self.session.viewport, self.text, key)
        self.context.bus.emit("search.commit", self.text)
        return ModeResult(
            consumed=True,
            switch_to=self.return_to,
            status=action.value,
            message=self.text,
        )

    def on_cancel(self, key: KeyEvent) -> ModeResult:
        action = self.search.advance(self.session.document, self.session.viewport, self.text, key)
        if action is SearchAction.CANCEL:
            self.search.restore(self.session.viewport)
        self.context.bus.emit("search.cancel", self.text)
        return ModeResult(consumed=True, switch_to=self.return_to, status=action.value)


__all__ = ["SearchMode"]
