"""Single-line prompts shown in the message bar."""

from __future__ import annotations

from kilo_engine.terminal.keys import KeyEvent

from .base_mode import Mode, ModeContext, ModeResult

_ERASE_KEYS = {"BACKSPACE", "DELETE"}


class PromptMode(Mode):
    """Collects a line of text, echoing ``template`` with the text so far.

    Subclasses react through ``on_change`` (every key), ``on_submit`` (Enter)
    and ``on_cancel`` (ESC). The message bar is cleared on submit and cancel.
    """

    name = "prompt"
    template = "{}"
    return_to = "edit"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.text = ""

    def on_enter(self, previous: str | None) -> None:
        if previous:
            self.return_to = previous
        self.text = ""
        self._show()

    def handle_key(self, key: KeyEvent) -> ModeResult:
        if key.key == "ENTER":
            self.session.set_message("")
            return self.on_submit(key)
        if key.key == "ESC":
            self.session.set_message("")
            return self.on_cancel(key)

        if key.key in _ERASE_KEYS or key.is_ctrl("h"):
            self.text = self.text[:-1]
        elif key.is_prompt_text:
            self.text += key.key
        self.on_change(key)
        self._show()
        return ModeResult(consumed=True, status="editing")

    def on_change(self, key: KeyEvent) -> None:
        del key

    def on_submit(self, key: KeyEvent) -> ModeResult:
        del key
        return ModeResult(consumed=True, switch_to=self.return_to, status="submit", message=self.text)

    def on_cancel(self, key: KeyEvent) -> ModeResult:
        del key
        return ModeResult(consumed=True, switch_to=self.return_to, status="cancel")

    def _show(self) -> None:
        self.session.set_message(self.template.format(self.text), pinned=True)


class SaveAsMode(PromptMode):
    """Asks for a filename, then saves under it."""

    name = "save_as"
    template = "Save as: {}"

    def on_submit(self, key: KeyEvent) -> ModeResult:
        del key
        if not self.text:
            self.session.set_message("Save aborted")
            return ModeResult(consumed=True, switch_to=self.return_to, status="save_aborted")
        self.session.filename = self.text
        saved = self.session.save()
        self.context.bus.emit("file.save", {"path": self.text, "ok": saved})
        return ModeResult(
            consumed=True,
            switch_to=self.return_to,
            status="saved" if saved else "save_failed",
            message=self.text,
        )

    def on_cancel(self, key: KeyEvent) -> ModeResult:
        del key
        self.session.set_message("Save aborted")
        return ModeResult(consumed=True, switch_to=self.return_to, status="save_aborted")


__all__ = ["PromptMode", "SaveAsMode"]
