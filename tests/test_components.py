import pickle

import pytest

from htmlgen.components import (
    ABSENT,
    ComponentRegistry,
    ComponentSignature,
    Parameter,
    bind,
)
from htmlgen.errors import ComponentNotFound

SIGNATURE = [{"size": "m"}, "color"]


class RecordingViews:
    def __init__(self):
        self.calls = []

    def make(self, view, data):
        self.calls.append((view, data))
        return f"{view}:{sorted(data)}"


def test_bind_uses_argument_when_given():
    assert bind(SIGNATURE, ["l"]) == {"size": "l", "color": ABSENT}


def test_bind_falls_back_to_defaults():
    assert bind(SIGNATURE, []) == {"size": "m", "color": ABSENT}


@pytest.mark.parametrize("empty", ["", 0, 0.0, False, None, [], {}, "0"])
def test_falsy_arguments_fall_back(empty):
    assert bind(SIGNATURE, [empty, "red"]) == {"size": "m", "color": "red"}


def test_absent_policy_keeps_falsy_values():
    assert bind(SIGNATURE, ["", 0], fallback="absent") == {"size": "", "color": 0}
    assert bind(SIGNATURE, [None], fallback="absent") == {"size": "m", "color": ABSENT}


def test_extra_arguments_are_ignored():
    assert bind(["a"], [1, 2, 3]) == {"a": 1}


def test_unknown_fallback_policy():
    with pytest.raises(ValueError):
        bind(SIGNATURE, [], fallback="strict")
    with pytest.raises(ValueError):
        ComponentRegistry(fallback="strict")


def test_signature_declaration_forms():
    expected = (Parameter("size", "m"), Parameter("color"))

    assert ComponentSignature.parse(SIGNATURE).parameters == expected
    assert ComponentSignature.parse([("size", "m"), "color"]).parameters == expected
    assert ComponentSignature.parse({"size": "m", 0: "color"}).parameters == expected
    assert ComponentSignature.parse(None).parameters == ()
    assert ComponentSignature.parse("label").names == ["label"]


def test_signature_rejects_unknown_entries():
    with pytest.raises(TypeError):
        ComponentSignature.parse([42])


def test_absent_sentinel():
    assert not ABSENT
    assert str(ABSENT) == ""
    assert repr(ABSENT) == "ABSENT"
    assert ABSENT is not None
    assert pickle.loads(pickle.dumps(ABSENT)) is ABSENT
    assert not Parameter("color").has_default
    assert Parameter("size", None).has_default


def test_registry_last_registration_wins():
    registry = ComponentRegistry()
    registry.register("button", "components.button", SIGNATURE)
    registry.register("button", "components.big_button", ["label"])

    spec = registry.get("button")
    assert spec.view == "components.big_button"
    assert spec.signature.names == ["label"]
    assert registry.names() == ["button"]
    assert len(registry) == 1
    assert "button" in registry
    assert "card" not in registry


def test_registries_are_isolated():
    first = ComponentRegistry()
    second = ComponentRegistry()
    first.register("button", "components.button")

    assert first.has("button")
    assert not second.has("button")


def test_render_unregistered_component_fails_before_binding():
    views = RecordingViews()
    registry = ComponentRegistry()

    with pytest.raises(ComponentNotFound) as excinfo:
        registry.render("missing", ["x"], views)

    assert excinfo.value.name == "missing"
    assert isinstance(excinfo.value, LookupError)
    assert views.calls == []


def test_render_hands_bound_data_to_view_once():
    views = RecordingViews()
    registry = ComponentRegistry()
    registry.register("button", "components.button", SIGNATURE)

    registry.render("button", ["l", "red"], views)

    assert views.calls == [("components.button", {"size": "l", "color": "red"})]


def test_registry_fallback_policy_applies_to_bind():
    registry = ComponentRegistry(fallback="absent")
    registry.register("counter", "components.counter", [{"count": 10}])

    _, data = registry.bind("counter", [0])
    assert data == {"count": 0}


def test_unbound_parameters_are_dropped_from_markup():
    from htmlgen.attributes import attributes
    from htmlgen.listing import dl

    data = bind(SIGNATURE, ["l"])

    assert attributes({"class": data["color"], "data-size": data["size"]}) == ' data-size="l"'
    assert attributes([data["color"]]) == ""
    assert dl({"Color": data["color"]}) == "<dl><dt>Color</dt></dl>"
