import pytest

from yaml_settings.errors import NonStringKeyError, ParseError
from yaml_settings.normalize import normalize


def test_normalize_keeps_string_keyed_tree():
    tree = {"a": [1, {"b": None}, "x"], "c": {"d": 1.5, "e": True}}
    assert normalize(tree) == tree


def test_normalize_builds_new_containers():
    inner = {"b": 1}
    tree = {"a": inner, "l": [inner]}
    result = normalize(tree)
    assert result["a"] is not inner
    assert result["l"][0] is not inner


def test_normalize_scalar_is_identity():
    marker = object()
    assert normalize(marker) is marker
    assert normalize("text") == "text"


def test_normalize_empty_list_stays_list():
    assert normalize({"a": []}) == {"a": []}
    assert normalize([]) == []


def test_non_string_key_at_top_level():
    with pytest.raises(NonStringKeyError) as exc_info:
        normalize({1: "v"})
    assert exc_info.value.location == ""
    assert exc_info.value.key == 1
    assert "at top level" in str(exc_info.value)


def test_non_string_key_reports_nested_location():
    with pytest.raises(NonStringKeyError) as exc_info:
        normalize({"a": {"b": {True: "x"}}})
    assert exc_info.value.location == "a.b"
    assert str(exc_info.value) == "Non-string key in a.b: True"


def test_non_string_key_inside_sequence():
    with pytest.raises(NonStringKeyError) as exc_info:
        normalize({"a": [{"b": 1}, {2: 3}]})
    assert exc_info.value.location == "a[1]"
    assert str(exc_info.value) == "Non-string key in a[1]: 2"


def test_normalize_uses_path_prefix():
    with pytest.raises(NonStringKeyError) as exc_info:
        normalize([[{None: 1}]], "root")
    assert exc_info.value.location == "root[0][0]"


def test_normalize_shares_results_for_shared_nodes():
    shared = {"b": [1, 2]}
    result = normalize({"x": shared, "y": shared, "z": [shared]})
    assert result == {"x": {"b": [1, 2]}, "y": {"b": [1, 2]}, "z": [{"b": [1, 2]}]}
    assert result["x"] is result["y"]
    assert result["z"][0] is result["x"]
    assert result["x"] is not shared


def test_normalize_rejects_cycles():
    cyclic = {"b": []}
    cyclic["b"].append(cyclic)
    with pytest.raises(ParseError, match=r"recursive alias in a\.b\[0\]"):
        normalize({"a": cyclic})
