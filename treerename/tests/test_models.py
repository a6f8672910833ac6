"""Unit tests for data models."""

import pytest
from pydantic import ValidationError

from treerename.models.rename import RenameOutcome, RenameRequest


class TestRenameRequest:
    """Tests for RenameRequest model."""

    @pytest.fixture
    def sample_request(self):
        return RenameRequest(root_path="/res", match_name="img.png", target_name="icon.png")

    def test_match_name_defaults_to_empty(self):
        """Test that the filter is optional."""
        request = RenameRequest(root_path="/res", target_name="icon.png")

        assert request.match_name == ""
        assert request.matches_any_file is True

    def test_matches_exact_name(self, sample_request):
        """Test exact, case-sensitive matching."""
        assert sample_request.matches("img.png") is True
        assert sample_request.matches("IMG.png") is False
        assert sample_request.matches("img.png.bak") is False

    @pytest.mark.parametrize("match_name", ["", "   ", "\t"])
    def test_blank_filter_matches_everything(self, match_name):
        """Test that blank filters make every file a candidate."""
        request = RenameRequest(root_path="/res", match_name=match_name, target_name="icon.png")

        assert request.matches("anything.txt") is True

    def test_is_frozen(self, sample_request):
        """Test that a request cannot be changed once built."""
        with pytest.raises(ValidationError):
            sample_request.target_name = "other.png"

    @pytest.mark.parametrize("target_name", ["", "  "])
    def test_blank_target_rejected(self, target_name):
        """Test that a blank new file name is rejected."""
        with pytest.raises(ValidationError, match="Please enter a new file name"):
            RenameRequest(root_path="/res", target_name=target_name)

    def test_blank_root_rejected(self):
        """Test that a blank root path is rejected."""
        with pytest.raises(ValidationError, match="Please enter a path"):
            RenameRequest(root_path=" ", target_name="icon.png")

    @pytest.mark.parametrize("target_name", ["sub/icon.png", "..", "."])
    def test_target_must_be_bare_name(self, target_name):
        """Test that the new name cannot point outside the file's directory."""
        with pytest.raises(ValidationError, match="bare file name"):
            RenameRequest(root_path="/res", target_name=target_name)

    def test_str_representation(self, sample_request):
        """Test string representation."""
        result = str(sample_request)

        assert "/res" in result
        assert "'img.png' -> 'icon.png'" in result


class TestRenameOutcome:
    """Tests for RenameOutcome model."""

    def test_empty_outcome(self):
        """Test default outcome."""
        outcome = RenameOutcome()

        assert outcome.log == []
        assert outcome.matched is False
        assert outcome.renamed == 0
        assert len(outcome) == 0

    def test_merge_concatenates_logs_in_order(self):
        """Test that merged logs keep the order of both sides."""
        first = RenameOutcome(log=["Found /a/img.png", "Renamed to /a/icon.png"], matched=True, renamed=1)
        second = RenameOutcome(log=["Found /a/b/img.png"], matched=True)

        merged = first.merge(second)

        assert merged.log == ["Found /a/img.png", "Renamed to /a/icon.png", "Found /a/b/img.png"]
        assert merged.renamed == 1
        assert len(merged) == 3

    @pytest.mark.parametrize(
        "left,right,expected",
        [
            (False, False, False),
            (True, False, True),
            (False, True, True),
            (True, True, True),
        ],
    )
    def test_merge_combines_matched_with_or(self, left, right, expected):
        """Test that matched is true if either side matched."""
        merged = RenameOutcome(matched=left).merge(RenameOutcome(matched=right))

        assert merged.matched is expected

    def test_merge_does_not_mutate_inputs(self):
        """Test that merge returns a new outcome."""
        first = RenameOutcome(log=["Found /a/img.png"], matched=True)
        second = RenameOutcome(log=["Found /b/img.png"], matched=True)

        first.merge(second)

        assert first.log == ["Found /a/img.png"]
        assert second.log == ["Found /b/img.png"]

    def test_renamed_cannot_be_negative(self):
        """Test validation of the rename count."""
        with pytest.raises(ValidationError):
            RenameOutcome(renamed=-1)
