"""Tests for conventional commit classification."""

from __future__ import annotations

import pytest

from ccv.core.commits import BumpSignal, classify
from ccv.core.version import BumpType


class TestClassifyPatch:
    """Tests for fix commits."""

    @pytest.mark.parametrize(
        "message",
        [
            "fix: handle null response",
            "fix(parser): handle null response",
            "fix(api/v2): handle null response\n\nLonger explanation.",
        ],
    )
    def test_fix_is_patch_only(self, message: str):
        """fix: and fix(scope): set only the patch bit."""
        assert classify(message) == BumpSignal(patch=True)

    def test_fix_without_space_is_ignored(self):
        """The colon must be followed by a space."""
        assert classify("fix:no space") == BumpSignal()

    def test_fix_empty_scope_is_ignored(self):
        """An empty scope does not match."""
        assert classify("fix(): nothing in scope") == BumpSignal()

    def test_fix_not_at_start_is_ignored(self):
        """The type must start the message."""
        assert classify("hotfix: something") == BumpSignal()
        assert classify("Revert \"fix: something\"") == BumpSignal()


class TestClassifyMinor:
    """Tests for feat commits."""

    def test_feat_is_minor_only(self):
        """feat: sets only the minor bit."""
        assert classify("feat: add new feature") == BumpSignal(minor=True)

    def test_feat_with_scope(self):
        """feat(scope): sets only the minor bit."""
        assert classify("feat(core): add new feature") == BumpSignal(minor=True)

    def test_type_in_body_is_ignored(self):
        """A conventional prefix on a later line does not count."""
        assert classify("Update docs\n\nfeat: not really") == BumpSignal()


class TestClassifyMajor:
    """Tests for breaking changes."""

    @pytest.mark.parametrize(
        "message",
        [
            "feat!: redesign API",
            "fix!: drop support for old config",
            "feat(core)!: change config format",
        ],
    )
    def test_exclamation_is_major(self, message: str):
        """A ! before the colon marks a breaking change."""
        signal = classify(message)

        assert signal.major
        assert not signal.minor
        assert not signal.patch

    def test_breaking_change_footer(self):
        """BREAKING CHANGE: in the body marks a breaking change."""
        signal = classify("feat: new feature\n\nBREAKING CHANGE: old API removed")

        assert signal == BumpSignal(major=True, minor=True)

    def test_breaking_change_footer_on_any_commit_type(self):
        """The footer counts regardless of the commit type."""
        assert classify("chore: cleanup\n\nBREAKING CHANGE: removed x") == BumpSignal(major=True)

    def test_breaking_change_without_space_is_ignored(self):
        """The footer marker must be followed by a space."""
        assert classify("chore: x\n\nBREAKING CHANGE:removed") == BumpSignal()


class TestClassifyOther:
    """Tests for messages that carry no signal."""

    @pytest.mark.parametrize(
        "message",
        [
            "docs: update readme",
            "chore(deps): bump pydantic",
            "perf: faster walk",
            "Updated the readme file",
            "",
        ],
    )
    def test_no_signal(self, message: str):
        """Other types and free-form messages carry no signal."""
        assert classify(message) == BumpSignal()
        assert not classify(message)

    @pytest.mark.parametrize("message", ["Fix: typo", "FEAT: uppercase", "Feat!: loud"])
    def test_case_sensitive(self, message: str):
        """Types are matched case-sensitively."""
        assert classify(message) == BumpSignal()

    def test_breaking_change_case_sensitive(self):
        """The footer marker is matched case-sensitively."""
        assert classify("fix: x\n\nbreaking change: y") == BumpSignal(patch=True)


class TestBumpSignal:
    """Tests for combining signals."""

    def test_or_combines_bits(self):
        """| sets every bit set on either side."""
        combined = BumpSignal(patch=True) | BumpSignal(minor=True)

        assert combined == BumpSignal(minor=True, patch=True)

    def test_or_never_clears(self):
        """Combining with an empty signal keeps all bits."""
        signal = BumpSignal(major=True, patch=True)

        assert signal | BumpSignal() == signal

    def test_empty_is_falsy(self):
        """An empty signal is falsy, any set bit makes it truthy."""
        assert not BumpSignal()
        assert BumpSignal(patch=True)

    @pytest.mark.parametrize(
        ("signal", "expected"),
        [
            (BumpSignal(), BumpType.NONE),
            (BumpSignal(patch=True), BumpType.PATCH),
            (BumpSignal(minor=True, patch=True), BumpType.MINOR),
            (BumpSignal(major=True, minor=True, patch=True), BumpType.MAJOR),
            (BumpSignal(major=True), BumpType.MAJOR),
        ],
    )
    def test_bump_priority(self, signal: BumpSignal, expected: BumpType):
        """major beats minor beats patch."""
        assert signal.bump == expected

    def test_feat_takes_precedence_over_fix(self):
        """A feat and a fix together ask for a minor release."""
        signal = classify("fix: a fix") | classify("feat: a feature")

        assert signal.bump == BumpType.MINOR
