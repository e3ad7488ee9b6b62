"""Tests for typed actions and their catalog helpers."""
import pytest
from pydantic import TypeAdapter, ValidationError

from vdwall.domain.actions import (
    Action,
    ACTION_TYPES,
    Brightness,
    FadeTime,
    InputSource,
    InputSwitch,
    create_action,
)
from vdwall.errors import ParameterOutOfRange, UnknownAction


def test_input_sources():
    assert [source.name for source in InputSource] == [
        "V1", "V2", "VGA1", "VGA2", "HDMI", "DVI", "DP", "EXT", "YPBPR",
    ]
    assert InputSource.HDMI == 4


def test_fade_labels():
    assert [fade.label for fade in FadeTime] == ["0.0s", "0.5s", "1.0s", "1.5s"]
    assert FadeTime.ONE_AND_HALF_SECONDS.seconds == 1.5


def test_actions_are_frozen():
    action = Brightness(level=10)
    with pytest.raises(ValidationError):
        action.level = 20


def test_direct_construction_validates():
    with pytest.raises(ValidationError):
        InputSwitch(fade_time=0, input_source=9)


def test_from_params_raises_parameter_error():
    with pytest.raises(ParameterOutOfRange) as info:
        InputSwitch.from_params({"fade_time": 4, "input_source": 1})
    assert info.value.name == "fade_time"
    assert info.value.value == 4
    assert (info.value.low, info.value.high) == (0, 3)


def test_parameter_error_is_value_error():
    with pytest.raises(ValueError):
        Brightness.from_params({"level": 500})


def test_from_params_ignores_unrelated_keys():
    action = Brightness.from_params({"level": 5, "label": "ignored"})
    assert action == Brightness(level=5)


def test_input_switch_requires_fade_time():
    with pytest.raises(ParameterOutOfRange) as info:
        InputSwitch.from_params({"input_source": 2})
    assert info.value.name == "fade_time"


def test_int_enum_members_accepted():
    action = InputSwitch.from_params({"fade_time": FadeTime.ONE_SECOND, "input_source": InputSource.HDMI})
    assert (action.fade_time, action.input_source) == (2, 4)


def test_create_action_lookup():
    assert isinstance(create_action("InputSwitch", {"fade_time": 0, "input_source": 1}), InputSwitch)
    assert isinstance(create_action("Brightness", {"level": 1}), Brightness)
    assert set(ACTION_TYPES) == {"InputSwitch", "Brightness"}


def test_create_action_unknown():
    with pytest.raises(UnknownAction) as info:
        create_action("PowerOff", {})
    assert info.value.action == "PowerOff"
    assert "InputSwitch" in str(info.value)


def test_action_union_discriminates_on_kind():
    adapter = TypeAdapter(Action)
    action = adapter.validate_python({"kind": "Brightness", "level": 42})
    assert action == Brightness(level=42)
    action = adapter.validate_python({"kind": "InputSwitch", "input_source": 3, "fade_time": 1})
    assert action == InputSwitch(input_source=3, fade_time=1)
