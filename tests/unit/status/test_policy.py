import pytest

from gitline.enums import UntrackedPolicy
from gitline.status import (
    POLICY_PRECEDENCE,
    UNTRACKED_MODE_CHOICES,
    parse_untracked_mode,
    resolve_untracked_policy,
)


class TestParseUntrackedMode:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("none", UntrackedPolicy.EXCLUDE),
            ("no", UntrackedPolicy.EXCLUDE),
            ("collapse-directories", UntrackedPolicy.COLLAPSE),
            ("normal", UntrackedPolicy.COLLAPSE),
            ("enumerate-all", UntrackedPolicy.ENUMERATE),
            ("all", UntrackedPolicy.ENUMERATE),
            ("  ALL ", UntrackedPolicy.ENUMERATE),
        ],
    )
    def test_accepts_names_and_git_spellings(
        self, value: str, expected: UntrackedPolicy
    ) -> None:
        assert parse_untracked_mode(value) is expected

    def test_every_advertised_choice_parses(self) -> None:
        for choice in UNTRACKED_MODE_CHOICES:
            parse_untracked_mode(choice)

    def test_unknown_mode_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown untracked-files mode 'some'"):
            parse_untracked_mode("some")


class TestResolveUntrackedPolicy:
    def test_default_when_nothing_given(self) -> None:
        assert resolve_untracked_policy(None) is UntrackedPolicy.EXCLUDE

    def test_configured_default_used(self) -> None:
        policy = resolve_untracked_policy(None, default=UntrackedPolicy.COLLAPSE)

        assert policy is UntrackedPolicy.COLLAPSE

    def test_show_all_beats_default(self) -> None:
        policy = resolve_untracked_policy(
            None, show_all=True, default=UntrackedPolicy.COLLAPSE
        )

        assert policy is UntrackedPolicy.ENUMERATE

    def test_mode_beats_show_all(self) -> None:
        policy = resolve_untracked_policy(UntrackedPolicy.COLLAPSE, show_all=True)

        assert policy is UntrackedPolicy.COLLAPSE

    def test_explicit_exclude_beats_show_all(self) -> None:
        policy = resolve_untracked_policy(UntrackedPolicy.EXCLUDE, show_all=True)

        assert policy is UntrackedPolicy.EXCLUDE

    def test_table_covers_every_flag_combination(self) -> None:
        assert set(POLICY_PRECEDENCE) == {
            (False, False),
            (False, True),
            (True, False),
            (True, True),
        }
