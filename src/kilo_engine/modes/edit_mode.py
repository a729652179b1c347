"""Edit mode: the default mode, dispatching keys through the keymap."""

from __future__ import annotations

from kilo_engine.editing import insert_byte
from kilo_engine.keymaps import EDIT_MODE, ResolutionMatch
from kilo_engine.runtime import telemetry
from kilo_engine.terminal.keys import KeyEvent

from .base_mode import Mode, ModeContext, ModeResult
from .keymap_helpers import require_keymap_resolver


class EditMode(Mode):
    """Bound keys run their action; unbound insertable bytes go into the document.

    After every key the cursor column is clamped to the line it ended on, and
    any key other than a refused quit re-arms the quit confirmation counter.
    """

    name = EDIT_MODE

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self._resolver = require_keymap_resolver(context)

    def handle_key(self, key: KeyEvent) -> ModeResult:
        result = self._dispatch(key)
        if result.status != "quit_pending":
            self.session.reset_quit_confirmation()
        self.session.clamp_cursor()
        return result

    def _dispatch(self, key: KeyEvent) -> ModeResult:
        resolution = self._resolver.resolve(self.name, (key.token,))
        if resolution.match is not None:
            return self._execute_match(resolution.match)

        if key.is_insertable and key.byte is not None:
            insert_byte(self.session, key.byte)
            return ModeResult(consumed=True, status="insert")
        return ModeResult(consumed=False, status="miss", message="unbound")

    def _execute_match(self, match: ResolutionMatch) -> ModeResult:
        with telemetry.span(
            "keymaps::execute",
            component="keymaps",
            metadata={"binding_id": match.binding.id, "action": match.action.id},
        ):
            outcome = match.action(self.context, match)

        if isinstance(outcome, ModeResult):
            return outcome
        return ModeResult(consumed=True)


__all__ = ["EditMode"]
