"""Tests for ActiveSessionsResult."""

import pytest

from ccactive.types import ActiveSessionsResult


def test_unsupported_result_is_empty() -> None:
    result = ActiveSessionsResult.unsupported()

    assert result.supported is False
    assert result.active_paths == frozenset()


def test_unsupported_result_cannot_carry_paths() -> None:
    with pytest.raises(ValueError, match="cannot carry active paths"):
        ActiveSessionsResult(supported=False, active_paths=frozenset({"/a"}))


def test_is_active_uses_exact_match() -> None:
    result = ActiveSessionsResult(supported=True, active_paths=frozenset({"/home/user/project"}))

    assert result.is_active("/home/user/project") is True
    assert result.is_active("/home/user/project/") is False
    assert result.is_active("/home/user") is False
    assert result.is_active("/home/user/project/src") is False


def test_to_json_dict_uses_camel_case_and_sorted_paths() -> None:
    result = ActiveSessionsResult(supported=True, active_paths=frozenset({"/b", "/a"}))

    assert result.to_json_dict() == {"supported": True, "activePaths": ["/a", "/b"]}


def test_to_json_dict_unsupported() -> None:
    assert ActiveSessionsResult.unsupported().to_json_dict() == {
        "supported": False,
        "activePaths": [],
    }


def test_from_json_dict() -> None:
    result = ActiveSessionsResult.from_json_dict({"supported": True, "activePaths": ["/a", "/a"]})

    assert result == ActiveSessionsResult(supported=True, active_paths=frozenset({"/a"}))


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"supported": "yes", "activePaths": []},
        {"supported": True, "activePaths": "/a"},
        {"supported": True, "activePaths": [1]},
        {"supported": False, "activePaths": ["/a"]},
    ],
)
def test_from_json_dict_rejects_malformed_input(data: dict) -> None:
    with pytest.raises(ValueError):
        ActiveSessionsResult.from_json_dict(data)
