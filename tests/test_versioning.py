"""Tests for package identity, version parsing and comparison."""

import pytest

from aurgate.versioning.models import (
    Demand,
    Dep,
    PkgName,
    SimplePkg,
    Version,
    VersionDemand,
)
from aurgate.versioning.parser import (
    parse_dep,
    parse_name,
    parse_simple_pkg,
    parse_version,
)
from aurgate.versioning.vercmp import fragment_key, rpmvercmp, split_evr, vercmp


class TestPkgName:
    """PkgName validation and ordering."""

    def test_valid_name(self):
        assert str(PkgName("firefox")) == "firefox"

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError):
            PkgName("")

    def test_repository_prefix_rejected(self):
        with pytest.raises(ValueError):
            PkgName("extra/firefox")

    def test_whitespace_rejected(self):
        with pytest.raises(ValueError):
            PkgName("fire fox")

    @pytest.mark.parametrize("raw", ["x>=1", "x<2", "x=1.0", "x>1"])
    def test_comparison_characters_rejected(self, raw):
        with pytest.raises(ValueError):
            PkgName(raw)

    def test_ordering_by_text(self):
        assert sorted([PkgName("b"), PkgName("a")]) == [PkgName("a"), PkgName("b")]

    def test_parse_name_returns_none_on_invalid(self):
        assert parse_name("core/bash") is None
        assert parse_name("  bash ") == PkgName("bash")


class TestParseVersion:
    """Parsing of [epoch:]pkgver[-pkgrel]."""

    def test_plain(self):
        v = parse_version("1.2")
        assert v == Version("1.2")
        assert str(v) == "1.2"

    def test_with_release_and_epoch(self):
        v = parse_version("2:1.0.3-4")
        assert v == Version(pkgver="1.0.3", pkgrel="4", epoch=2)
        assert str(v) == "2:1.0.3-4"

    def test_vcs_version(self):
        assert str(parse_version("r123.abc1234-1")) == "r123.abc1234-1"

    @pytest.mark.parametrize("raw", ["", "1 2", "1.0-1-2", "a:b", None])
    def test_unparsable(self, raw):
        assert parse_version(raw) is None


class TestParseDep:
    """Parsing dependency strings into Dep."""

    def test_bare_name_is_anything(self):
        assert parse_dep("bash") == Dep(PkgName("bash"), VersionDemand.anything())

    @pytest.mark.parametrize("raw,kind", [
        ("glibc<2.0", Demand.LESS_THAN),
        ("glibc>=2.0", Demand.AT_LEAST),
        ("glibc>2.0", Demand.MORE_THAN),
        ("glibc=2.0", Demand.MUST_BE),
    ])
    def test_operators(self, raw, kind):
        dep = parse_dep(raw)
        assert dep.name == PkgName("glibc")
        assert dep.demand.kind is kind
        assert dep.demand.version == Version("2.0")

    def test_less_or_equal_is_not_understood(self):
        assert parse_dep("glibc<=2.0") is None

    def test_bad_version_fails(self):
        assert parse_dep("glibc>=") is None
        assert parse_dep("glibc>=two words") is None


class TestParseSimplePkg:
    """Lines from pacman -Qm."""

    def test_valid_line(self):
        assert parse_simple_pkg("aura-bin 2.0.0-1") == SimplePkg(
            PkgName("aura-bin"), Version("2.0.0", "1")
        )

    @pytest.mark.parametrize("line", ["", "lonely", "a b c", "x 1 2"])
    def test_invalid_lines(self, line):
        assert parse_simple_pkg(line) is None


class TestVersionDemand:
    """Rendering and in-process checks."""

    def test_render_at_least(self):
        dep = Dep(PkgName("x"), VersionDemand.at_least(Version("1.2")))
        assert dep.render() == "x>=1.2"

    def test_render_anything(self):
        dep = Dep(PkgName("x"), VersionDemand.anything())
        assert dep.render() == "x"

    @pytest.mark.parametrize("demand,expected", [
        (VersionDemand.less_than(Version("1.0")), "<1.0"),
        (VersionDemand.more_than(Version("1.0")), ">1.0"),
        (VersionDemand.must_be(Version("1.0", "2")), "=1.0-2"),
    ])
    def test_render_operators(self, demand, expected):
        assert demand.render() == expected

    def test_version_required(self):
        with pytest.raises(ValueError):
            VersionDemand(Demand.AT_LEAST)
        with pytest.raises(ValueError):
            VersionDemand(Demand.ANYTHING, Version("1"))

    def test_accepts(self):
        assert VersionDemand.at_least(Version("1.2")).accepts(Version("1.10"))
        assert not VersionDemand.less_than(Version("1.2")).accepts(Version("1.2"))
        assert VersionDemand.must_be(Version("1.2")).accepts(Version("1.2"))
        assert VersionDemand.more_than(Version("1.2")).accepts(Version("1.2.1"))
        assert VersionDemand.anything().accepts(Version("0"))


class TestVercmp:
    """pacman vercmp ordering."""

    @pytest.mark.parametrize("a,b,expected", [
        ("1.0", "1.0", 0),
        ("1.0", "1.1", -1),
        ("1.10", "1.9", 1),
        ("1.0a", "1.0", -1),
        ("1.0", "1.0.1", -1),
        ("1.001", "1.1", 0),
        ("1.0alpha", "1.0beta", -1),
        ("1.0.a", "1.0.1", -1),
    ])
    def test_rpmvercmp(self, a, b, expected):
        assert rpmvercmp(a, b) == expected

    def test_epoch_wins(self):
        assert vercmp("1:1.0", "2.0") == 1

    def test_release_only_compared_when_both_present(self):
        assert vercmp("1.0-2", "1.0-1") == 1
        assert vercmp("1.0", "1.0-5") == 0

    def test_split_evr(self):
        assert split_evr("3:1.2-4") == ("3", "1.2", "4")
        assert split_evr("1.2") == ("0", "1.2", None)

    def test_version_ordering(self):
        versions = [Version("1.10"), Version("1.2"), Version("1.2", epoch=1)]
        assert sorted(versions) == [Version("1.2"), Version("1.10"), Version("1.2", epoch=1)]


class TestVersionEquality:
    """Version equality agrees with vercmp ordering."""

    def test_leading_zeros_are_equal(self):
        a, b = Version("1.0"), Version("1.00")
        assert a == b
        assert hash(a) == hash(b)
        assert not a > b
        assert not b > a
        assert a <= b <= a

    def test_epoch_leading_zeros(self):
        a, b = parse_version("1:1"), parse_version("01:1")
        assert a == b
        assert hash(a) == hash(b)
        assert not a < b
        assert not b < a

    def test_separator_kind_is_irrelevant(self):
        assert Version("1.0") == Version("1_0")
        assert hash(Version("1.0")) == hash(Version("1_0"))

    def test_trailing_separator_differs(self):
        assert Version("1.0") < Version("1.0.")

    def test_missing_release_sorts_first(self):
        assert Version("1.0") < Version("1.0", "1") < Version("1.0", "2")
        assert Version("1.0") != Version("1.0", "1")

    def test_usable_as_set_members(self):
        assert len({Version("2.01"), Version("2.1"), Version("2.10")}) == 2

    def test_simple_pkg_ordering(self):
        a = SimplePkg(PkgName("x"), Version("1.0"))
        b = SimplePkg(PkgName("x"), Version("1.00"))
        assert a == b
        assert not a < b
        assert not b < a

    def test_fragment_key(self):
        assert fragment_key("1.001") == fragment_key("1.1")
        assert fragment_key("1.0a") != fragment_key("1.0")
