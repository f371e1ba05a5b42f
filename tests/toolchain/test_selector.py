"""
Tests for toolchainlocator.toolchain.selector module.
"""

from pathlib import Path

from toolchainlocator.toolchain.scanner import Candidate
from toolchainlocator.toolchain.selector import rank_candidates, select_best
from toolchainlocator.toolchain.version import VersionKey


def candidate(name, version=None, date="", probed=True):
    version_key = VersionKey.from_strings(version, date) if probed else None
    return Candidate(path=Path(f"/toolchains/{name}/bin/rustfmt"), version_key=version_key)


class TestSelectBest:
    """Tests for select_best."""

    def test_empty(self):
        """Test no candidates yields no result."""
        assert select_best([]) is None

    def test_single(self):
        """Test a single candidate is selected even without a version."""
        only = candidate("broken", probed=False)

        assert select_best([only]) == only.path

    def test_highest_version_wins(self):
        """Test the highest version is selected."""
        candidates = [
            candidate("1.30", "1.30.0", "2018-10-24"),
            candidate("1.32", "1.32.0", "2019-01-16"),
            candidate("1.31", "1.31.1", "2018-12-18"),
        ]

        assert select_best(candidates) == Path("/toolchains/1.32/bin/rustfmt")

    def test_newest_nightly_wins(self):
        """Test equal versions are decided by build date."""
        candidates = [
            candidate("a", "1.0.0-nightly", "2019-02-20"),
            candidate("b", "1.0.0-nightly", "2019-02-24"),
            candidate("c", "1.0.0-nightly", "2019-01-10"),
        ]

        assert select_best(candidates) == Path("/toolchains/b/bin/rustfmt")

    def test_release_beats_prerelease(self):
        """Test a release outranks its own pre-release built later."""
        candidates = [
            candidate("stable", "1.36.0", "2019-07-03"),
            candidate("nightly", "1.36.0-nightly", "2019-07-20"),
        ]

        assert select_best(candidates) == Path("/toolchains/stable/bin/rustfmt")

    def test_unprobed_loses(self):
        """Test a candidate without a version key loses to any versioned one."""
        candidates = [
            candidate("old", "0.1.0"),
            candidate("broken", probed=False),
        ]

        assert select_best(candidates) == Path("/toolchains/old/bin/rustfmt")

    def test_unparseable_version_loses(self):
        """Test a candidate with an unparseable version loses to a parsed one."""
        candidates = [
            candidate("custom", None, "2099-01-01"),
            candidate("stable", "1.0.0", ""),
        ]

        assert select_best(candidates) == Path("/toolchains/stable/bin/rustfmt")

    def test_tie_last_encountered_wins(self):
        """Test identical keys resolve to the last candidate seen."""
        first = candidate("first", "1.32.0", "2019-01-16")
        second = candidate("second", "1.32.0", "2019-01-16")

        assert select_best([first, second]) == second.path
        assert select_best([second, first]) == first.path

    def test_accepts_iterator(self):
        """Test any iterable is accepted."""
        candidates = iter([candidate("a", "1.0.0"), candidate("b", "2.0.0")])

        assert select_best(candidates) == Path("/toolchains/b/bin/rustfmt")


class TestRankCandidates:
    """Tests for rank_candidates."""

    def test_ascending_order(self):
        """Test candidates are ranked worst to best."""
        unprobed = candidate("unprobed", probed=False)
        unparsed = candidate("unparsed", None, "2019-01-01")
        nightly = candidate("nightly", "1.0.0-nightly", "2019-01-01")
        stable = candidate("stable", "1.0.0")

        ranked = rank_candidates([stable, nightly, unparsed, unprobed])

        assert ranked == [unprobed, unparsed, nightly, stable]

    def test_stable_for_equal_keys(self):
        """Test equal candidates keep their input order."""
        a = candidate("a", probed=False)
        b = candidate("b", probed=False)
        c = candidate("c", probed=False)

        assert rank_candidates([b, c, a]) == [b, c, a]

    def test_does_not_modify_input(self):
        """Test the input list is left untouched."""
        candidates = [candidate("b", "2.0.0"), candidate("a", "1.0.0")]
        original = list(candidates)

        rank_candidates(candidates)

        assert candidates == original
