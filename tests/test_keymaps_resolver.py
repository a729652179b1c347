from __future__ import annotations

from kilo_engine.keymaps import (
    ActionRef,
    Binding,
    KeySequence,
    KeymapRegistry,
    KeymapResolver,
)


def make_action(action_id: str) -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    binding_id: str,
    *,
    mode: str = "edit",
    keys: tuple[str, ...] = ("ctrl+k",),
    action_id: str = "core.test",
) -> Binding:
    return Binding(
        id=binding_id,
        mode=mode,
        sequence=KeySequence.from_strings(*keys),
        action_id=action_id,
    )


def build_registry(bindings: list[Binding]) -> KeymapRegistry:
    registry = KeymapRegistry()
    action_ids = {binding.action_id for binding in bindings}
    for action_id in action_ids:
        registry.register_action(make_action(action_id))
    for binding in bindings:
        registry.register_binding(binding)
    return registry


def test_resolver_matches_bound_key() -> None:
    binding = make_binding("edit.k")
    resolver = KeymapResolver(build_registry([binding]))

    result = resolver.resolve("edit", ("ctrl+k",))

    assert result.status == "match"
    assert result.match is not None
    assert result.match.binding.id == binding.id
    assert result.match.action.id == "core.test"


def test_resolver_miss_for_unknown_token() -> None:
    resolver = KeymapResolver(build_registry([make_binding("edit.k")]))

    result = resolver.resolve("edit", ("x",))

    assert result.status == "miss"
    assert result.match is None


def test_resolver_is_scoped_by_mode() -> None:
    resolver = KeymapResolver(build_registry([make_binding("search.k", mode="search")]))

    assert resolver.resolve("edit", ("ctrl+k",)).status == "miss"
    assert resolver.resolve("search", ("ctrl+k",)).status == "match"


def test_resolver_follows_replaced_binding() -> None:
    registry = build_registry([make_binding("edit.k")])
    resolver = KeymapResolver(registry)
    assert resolver.resolve("edit", ("ctrl+k",)).match.binding.id == "edit.k"

    registry.register_action(make_action("core.other"))
    registry.register_binding(make_binding("edit.k2", action_id="core.other"), replace=True)

    result = resolver.resolve("edit", ("ctrl+k",))
    assert result.match is not None
    assert result.match.binding.id == "edit.k2"
    assert result.match.action.id == "core.other"


def test_resolver_cache_refreshes_on_revision() -> None:
    registry = build_registry([])
    resolver = KeymapResolver(registry)

    miss = resolver.resolve("edit", ("x",))
    assert miss.status == "miss"

    new_binding = make_binding("edit.x", keys=("x",), action_id="core.x")
    registry.register_action(make_action("core.x"))
    registry.register_binding(new_binding)

    match = resolver.resolve("edit", ("x",))
    assert match.status == "match"
    assert match.match is not None
    assert match.match.binding.id == new_binding.id
