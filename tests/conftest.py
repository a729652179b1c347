from __future__ import annotations

import pytest

from kilo_engine.app import create_default_manager
from kilo_engine.modes.mode_manager import ModeManager
from kilo_engine.session import EditorSession

from support import make_session


@pytest.fixture
def session() -> EditorSession:
    return make_session()


@pytest.fixture
def manager(session: EditorSession) -> ModeManager:
    return create_default_manager(session)
