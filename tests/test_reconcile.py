import json
from pathlib import Path

import pytest

from centy.metadata import IssueMetadata, MetadataError
from centy.reconcile import get_next_display_number, reconcile_display_numbers

UUID1 = "550e8400-e29b-41d4-a716-446655440001"
UUID2 = "550e8400-e29b-41d4-a716-446655440002"
UUID3 = "550e8400-e29b-41d4-a716-446655440003"


def create_test_issue(issues_path: Path, folder_name: str, display_number: int, created_at: str) -> None:
    issue_path = issues_path / folder_name
    issue_path.mkdir(parents=True, exist_ok=True)
    metadata = {
        "displayNumber": display_number,
        "status": "open",
        "priority": 2,
        "createdAt": created_at,
        "updatedAt": created_at,
    }
    (issue_path / "metadata.json").write_text(json.dumps(metadata, indent=2))
    (issue_path / "issue.md").write_text("# Test Issue\n")


def read_metadata(issues_path: Path, folder_name: str) -> IssueMetadata:
    return IssueMetadata.from_json((issues_path / folder_name / "metadata.json").read_text())


@pytest.fixture
def issues_path(tmp_path):
    path = tmp_path / "issues"
    path.mkdir()
    return path


def test_reconcile_no_conflicts(issues_path):
    create_test_issue(issues_path, UUID1, 1, "2024-01-01T10:00:00Z")
    create_test_issue(issues_path, UUID2, 2, "2024-01-01T11:00:00Z")
    assert reconcile_display_numbers(issues_path) == 0
    assert read_metadata(issues_path, UUID1).display_number == 1
    assert read_metadata(issues_path, UUID2).display_number == 2


def test_reconcile_with_conflict(issues_path):
    create_test_issue(issues_path, UUID1, 4, "2024-01-01T10:00:00Z")
    create_test_issue(issues_path, UUID2, 4, "2024-01-01T10:05:00Z")
    create_test_issue(issues_path, UUID3, 5, "2024-01-01T10:10:00Z")

    assert reconcile_display_numbers(issues_path) == 1
    assert read_metadata(issues_path, UUID1).display_number == 4
    reassigned = read_metadata(issues_path, UUID2)
    assert reassigned.display_number == 6
    assert reassigned.updated_at != "2024-01-01T10:05:00Z"
    assert read_metadata(issues_path, UUID3).display_number == 5


def test_reconcile_oldest_wins_regardless_of_folder_order(issues_path):
    create_test_issue(issues_path, UUID1, 2, "2024-02-01T00:00:00Z")
    create_test_issue(issues_path, UUID2, 2, "2024-01-01T00:00:00Z")
    assert reconcile_display_numbers(issues_path) == 1
    assert read_metadata(issues_path, UUID2).display_number == 2
    assert read_metadata(issues_path, UUID1).display_number == 3


def test_reconcile_legacy_zero_numbers_all_reassigned(issues_path):
    create_test_issue(issues_path, UUID1, 0, "2024-01-01T10:00:00Z")
    create_test_issue(issues_path, UUID2, 0, "2024-01-01T11:00:00Z")
    create_test_issue(issues_path, UUID3, 3, "2024-01-01T12:00:00Z")

    assert reconcile_display_numbers(issues_path) == 2
    numbers = {read_metadata(issues_path, u).display_number for u in (UUID1, UUID2)}
    assert numbers == {4, 5}
    assert read_metadata(issues_path, UUID3).display_number == 3


def test_reconcile_is_idempotent(issues_path):
    create_test_issue(issues_path, UUID1, 1, "2024-01-01T10:00:00Z")
    create_test_issue(issues_path, UUID2, 1, "2024-01-01T11:00:00Z")
    assert reconcile_display_numbers(issues_path) == 1
    assert reconcile_display_numbers(issues_path) == 0


def test_reconcile_skips_invalid_folders_and_malformed_metadata(issues_path):
    create_test_issue(issues_path, UUID1, 1, "2024-01-01T10:00:00Z")
    create_test_issue(issues_path, "random-folder", 1, "2024-01-01T09:00:00Z")
    broken = issues_path / UUID2
    broken.mkdir()
    (broken / "metadata.json").write_text("{not json")
    assert reconcile_display_numbers(issues_path) == 0
    assert read_metadata(issues_path, UUID1).display_number == 1


def test_reconcile_missing_directory(tmp_path):
    assert reconcile_display_numbers(tmp_path / "issues") == 0


def test_reconcile_accepts_legacy_folder_names(issues_path):
    create_test_issue(issues_path, "0001", 7, "2024-01-01T10:00:00Z")
    create_test_issue(issues_path, "0002", 7, "2024-01-01T11:00:00Z")
    assert reconcile_display_numbers(issues_path) == 1
    assert read_metadata(issues_path, "0002").display_number == 8


def test_get_next_display_number_empty(tmp_path):
    assert get_next_display_number(tmp_path / "issues") == 1


def test_get_next_display_number_empty_existing_directory(issues_path):
    assert get_next_display_number(issues_path) == 1


def test_get_next_display_number_with_existing(issues_path):
    create_test_issue(issues_path, UUID1, 5, "2024-01-01T10:00:00Z")
    assert get_next_display_number(issues_path) == 6


def test_get_next_display_number_ignores_malformed(issues_path):
    create_test_issue(issues_path, UUID1, 2, "2024-01-01T10:00:00Z")
    broken = issues_path / UUID2
    broken.mkdir()
    (broken / "metadata.json").write_text("[]")
    assert get_next_display_number(issues_path) == 3


def test_metadata_written_by_reconcile_is_readable(issues_path):
    create_test_issue(issues_path, UUID1, 1, "2024-01-01T10:00:00Z")
    create_test_issue(issues_path, UUID2, 1, "2024-01-01T11:00:00Z")
    reconcile_display_numbers(issues_path)
    data = json.loads((issues_path / UUID2 / "metadata.json").read_text())
    assert data["displayNumber"] == 2
    assert data["priority"] == 2
    assert data["createdAt"] == "2024-01-01T11:00:00Z"
    with pytest.raises(MetadataError):
        IssueMetadata.from_json("{}")