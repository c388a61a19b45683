"""
Unit tests for Compass response unwrapping.
"""

import pytest

from compass.responses import GenericMobileResponse, parse_body, to_jsonable, unwrap


@pytest.mark.parametrize("value", ["foo", 1, [1], None, {"a": "foo"}])
def test_unwrapped_values_are_returned_unchanged(value):
    assert unwrap(value) == value


def test_d_envelope_returns_inner_value():
    assert unwrap({"d": "foo"}) == "foo"


def test_generic_mobile_response_is_built():
    result = unwrap({"__type": "GenericMobileResponse", "data": 1})

    assert result == GenericMobileResponse(data=1)


def test_d_envelope_around_generic_mobile_response():
    result = unwrap({"d": {"__type": "GenericMobileResponse", "data": {"firstName": "Alice"}}})

    assert isinstance(result, GenericMobileResponse)
    assert result.data == {"firstName": "Alice"}


def test_other_typed_objects_are_left_alone():
    value = {"__type": "SomethingElse", "data": 1}

    assert unwrap(value) == value


def test_parse_body_decodes_and_unwraps():
    assert parse_body('{"d": [1, 2]}') == [1, 2]


def test_parse_body_rejects_non_json():
    with pytest.raises(ValueError):
        parse_body("<html>Login</html>")


def test_to_jsonable_dumps_models():
    assert to_jsonable(GenericMobileResponse(data=[1])) == {"data": [1]}
    assert to_jsonable({"a": 1}) == {"a": 1}


def test_d_with_sibling_keys_is_not_an_envelope():
    value = {"d": "foo", "other": 1}

    assert unwrap(value) == value
