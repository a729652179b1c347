"""Executable terminal host that wires the engine to a raw tty."""

from __future__ import annotations

import argparse
import os
import sys
from contextlib import suppress
from typing import Callable, Optional, Sequence

from kilo_engine import __version__
from kilo_engine.keymaps import KeymapRegistry, KeymapResolver, help_message, load_default_keymaps
from kilo_engine.modes import EditMode, ModeBus, ModeContext, ModeResult, SaveAsMode, SearchMode
from kilo_engine.modes.mode_manager import ModeManager
from kilo_engine.runtime import telemetry
from kilo_engine.runtime.config import EditorConfig
from kilo_engine.session import EditorSession
from kilo_engine.terminal import (
    FileDescriptorSource,
    InputDecoder,
    RawTerminal,
    TerminalError,
    get_window_size,
)
from kilo_engine.view import Viewport, ansi

Writer = Callable[[bytes], object]


def create_default_manager(session: EditorSession, *, bus: ModeBus | None = None) -> ModeManager:
    """Build a ModeManager with the edit, search and save-as modes + default keymaps."""

    registry = KeymapRegistry()
    load_default_keymaps(registry)
    resolver = KeymapResolver(registry)
    context = ModeContext(session=session, bus=bus or ModeBus(), extras={})
    manager = ModeManager(
        context,
        keymap_registry=registry,
        keymap_resolver=resolver,
        load_defaults=False,
    )
    manager.register_mode(EditMode)
    manager.register_mode(SearchMode)
    manager.register_mode(SaveAsMode)
    return manager


def fd_writer(fd: int) -> Callable[[bytes], int]:
    """Return a writer that pushes every byte to ``fd`` or raises TerminalError."""

    def write(data: bytes) -> int:
        view = memoryview(data)
        while view:
            try:
                written = os.write(fd, view)
            except OSError as exc:
                raise TerminalError("write", exc) from exc
            if written <= 0:
                raise TerminalError("write")
            view = view[written:]
        return len(data)

    return write


class Editor:
    """Refresh-read-dispatch loop around one session and its mode manager."""

    def __init__(
        self,
        session: EditorSession,
        decoder: InputDecoder,
        write: Writer,
        *,
        manager: ModeManager | None = None,
    ) -> None:
        self.session = session
        self.decoder = decoder
        self.write = write
        self.manager = manager or create_default_manager(session)
        self.running = True
        self._subscribe_events()

    def _subscribe_events(self) -> None:
        bus = self.manager.context.bus
        for name in ("file.save", "search.commit", "search.cancel", "editor.quit"):
            bus.subscribe(name, self._event_recorder(name))

    @staticmethod
    def _event_recorder(name: str) -> Callable[[object], None]:
        def record(payload: object) -> None:
            data = payload if isinstance(payload, dict) else {"value": payload}
            telemetry.record_event(f"bus.{name}", level="debug", data=data)

        return record

    def refresh(self) -> None:
        self.write(self.session.render())

    def step(self) -> Optional[ModeResult]:
        """Redraw, then handle at most one key. Returns None on a read timeout."""

        self.refresh()
        key = self.decoder.poll_key()
        if key is None:
            return None
        result = self.manager.handle_key(key)
        if result.status == "quit":
            self.running = False
        return result

    def run(self) -> None:
        with telemetry.span("app::run", component=True) as handle:
            keys = 0
            while self.running:
                if self.step() is not None:
                    keys += 1
            handle.add_metadata("keys", keys)
        self.write(ansi.clear_screen())


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="kilo", description="A small terminal text editor.")
    parser.add_argument("filename", nargs="?", help="File to open (created on first save)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    stdin_fd, stdout_fd = sys.stdin.fileno(), sys.stdout.fileno()
    write = fd_writer(stdout_fd)
    config = EditorConfig.from_env()

    try:
        if not os.isatty(stdin_fd):
            raise TerminalError("isatty")
        with RawTerminal(stdin_fd):
            source = FileDescriptorSource(stdin_fd)
            rows, cols = get_window_size(stdout_fd, write, source.read_byte)
            viewport = Viewport.for_screen(rows, cols, reserved_rows=config.reserved_rows)
            session = EditorSession(viewport=viewport, config=config)
            if args.filename:
                session.open_file(args.filename)
            editor = Editor(session, InputDecoder(source), write)
            if session.message is None:
                session.set_message(help_message(editor.manager.keymap_registry))
            editor.run()
    except TerminalError as exc:
        with suppress(TerminalError):
            write(ansi.clear_screen())
        telemetry.record_event("app.fatal", level="error", data={"operation": exc.operation})
        print(str(exc), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - manual run
    raise SystemExit(main())
