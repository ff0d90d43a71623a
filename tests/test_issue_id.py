import pytest

from centy.issue_id import (
    generate_issue_id,
    is_legacy_number,
    is_uuid,
    is_valid_issue_folder,
    short_id,
)


@pytest.mark.parametrize(
    "value",
    [
        "a3f2b1c9-4d5e-6f7a-8b9c-0d1e2f3a4b5c",
        "550e8400-e29b-41d4-a716-446655440000",
        "550e8400e29b41d4a716446655440000",
        "{550e8400-e29b-41d4-a716-446655440000}",
        "urn:uuid:550e8400-e29b-41d4-a716-446655440000",
    ],
)
def test_is_uuid_valid(value):
    assert is_uuid(value) is True


@pytest.mark.parametrize(
    "value",
    ["not-a-uuid", "0001", "", "a3f2b1c9-4d5e-6f7a-8b9c", "550e8400e29b-41d4-a716-4466-55440000"],
)
def test_is_uuid_invalid(value):
    assert is_uuid(value) is False


@pytest.mark.parametrize("value", ["0001", "0042", "9999"])
def test_is_legacy_number_valid(value):
    assert is_legacy_number(value) is True


@pytest.mark.parametrize("value", ["001", "00001", "abcd", ""])
def test_is_legacy_number_invalid(value):
    assert is_legacy_number(value) is False


def test_is_valid_issue_folder():
    assert is_valid_issue_folder("a3f2b1c9-4d5e-6f7a-8b9c-0d1e2f3a4b5c")
    assert is_valid_issue_folder("0001")
    assert is_valid_issue_folder("0042")
    assert not is_valid_issue_folder("random-folder")
    assert not is_valid_issue_folder(".DS_Store")


def test_generate_issue_id():
    first = generate_issue_id()
    second = generate_issue_id()
    assert is_uuid(first)
    assert first != second
    assert len(first) == 36


def test_short_id():
    assert short_id("a3f2b1c9-4d5e-6f7a-8b9c-0d1e2f3a4b5c") == "a3f2b1c9"
    assert short_id("0001") == "0001"
    assert short_id("abc") == "abc"