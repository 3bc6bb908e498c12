"""
Tests for shapeguard leaf constraints.
"""

import pytest

from shapeguard import (
    MISSING,
    Eq,
    EqError,
    ErrorKind,
    Gt,
    Gte,
    InSet,
    IsType,
    Length,
    LengthError,
    Lt,
    Lte,
    MaxLength,
    MinLength,
    PathResult,
    Required,
    RequiredError,
    TypeMismatchError,
    error,
    ok,
)


def only_error(result):
    assert not result.ok
    assert len(result.errors) == 1
    assert len(result.errors[0].errors) == 1
    return result.errors[0].errors[0]


class TestComparisons:
    def test_gt(self):
        assert Gt(5)(6).ok
        err = only_error(Gt(5)(5))
        assert err == Gt.Error(min=5, value=5)
        assert err.kind is ErrorKind.GT

    def test_gte(self):
        assert Gte(5)(5).ok
        assert Gte(5)(6).ok
        assert only_error(Gte(5)(4)) == Gte.Error(min=5, value=4)

    def test_lt(self):
        assert Lt(5)(4).ok
        assert only_error(Lt(5)(5)) == Lt.Error(max=5, value=5)

    def test_lte(self):
        assert Lte(5)(5).ok
        assert only_error(Lte(5)(6)) == Lte.Error(max=5, value=6)

    def test_strings_use_native_ordering(self):
        assert Gt("a")("b").ok
        assert not Lt("a")("b").ok

    def test_path_defaults_to_root(self):
        assert Gt(5)(1).errors[0].path == ()

    def test_path_is_kept(self):
        result = Lt(10)(20, ["owner", "age"])
        assert result == error(PathResult.error(["owner", "age"], Lt.Error(max=10, value=20)))


class TestEquality:
    def test_eq(self):
        assert Eq("Dude")("Dude").ok
        assert only_error(Eq("Dude")("Walter")) == EqError(expected="Dude", value="Walter")

    def test_eq_is_type_strict(self):
        assert not Eq(1)(True).ok
        assert not Eq(1)(1.0).ok

    def test_eq_identity(self):
        marker = object()
        assert Eq(marker)(marker).ok
        assert not Eq(marker)(object()).ok

    def test_in_set(self):
        v = InSet("active", "inactive")
        assert v("active").ok
        err = only_error(v("deleted"))
        assert err.kind is ErrorKind.IN_SET
        assert err.options == ("active", "inactive")
        assert err.value == "deleted"

    def test_in_set_is_type_strict(self):
        assert not InSet(0, 1)(False).ok
        assert InSet(0, 1)(1).ok

    def test_in_set_empty(self):
        assert not InSet()("anything").ok

    def test_eq_containers_by_identity(self):
        pair = [1, 2]
        assert Eq(pair)(pair).ok
        assert not Eq([1, 2])([1, 2]).ok
        assert not Eq((1, 2))(tuple([1, 2])).ok
        assert not Eq({"k": 1})({"k": 1}).ok

    def test_in_set_containers_by_identity(self):
        option = {"k": 1}
        assert InSet(option)(option).ok
        assert not InSet({"k": 1})({"k": 1}).ok

    def test_scalars_by_value(self):
        assert Eq(2.5)(2.5).ok
        assert Eq(b"ab")(b"ab").ok
        assert Eq(ErrorKind.GT)(ErrorKind.GT).ok
        assert InSet("ab")("".join(["a", "b"])).ok


class TestLengths:
    def test_max_length(self):
        assert MaxLength(7)("Walter").ok
        err = only_error(MaxLength(7)("El Duderino"))
        assert err == MaxLength.Error(max_len=7, value="El Duderino", value_length=11)

    def test_min_length(self):
        assert MinLength(5)("Walter").ok
        err = only_error(MinLength(5)("Dude"))
        assert err.min_len == 5
        assert err.value_length == 4

    def test_length(self):
        assert Length(5)("Donny").ok
        assert only_error(Length(5)("Dude")) == LengthError(len=5, value="Dude", value_length=4)

    def test_lists(self):
        assert MinLength(1)([1]).ok
        assert only_error(MinLength(1)([])) == MinLength.Error(min_len=1, value=[], value_length=0)

    def test_no_len_raises(self):
        with pytest.raises(TypeError):
            MaxLength(1)(42)


class TestAbsentValues:
    @pytest.mark.parametrize(
        "constraint",
        [Gt(5), Gte(5), Lt(5), Lte(5), Eq("x"), InSet("a"), MaxLength(1), MinLength(1), Length(1)],
    )
    @pytest.mark.parametrize("value", [None, MISSING])
    def test_absent_passes(self, constraint, value):
        assert constraint(value) == ok()


class TestRequired:
    def test_bare(self):
        assert Required()("I am here").ok
        assert only_error(Required()(None)) == RequiredError()

    def test_missing(self):
        result = Required()(MISSING, ["name"])
        assert result == error(PathResult.error(["name"], RequiredError()))

    def test_falsy_values_are_present(self):
        for value in (0, "", [], False):
            assert Required()(value).ok

    def test_delegates_to_child(self):
        v = Required(IsType(str))
        assert v("Dude").ok
        err = only_error(v(400))
        assert err == TypeMismatchError(expected_type=str, actual_type=int)

    @pytest.mark.parametrize("child", [Gt(5), IsType(str), Required()])
    def test_absent_ignores_child(self, child):
        for value in (None, MISSING):
            result = Required(child)(value, ["p"])
            assert result == error(PathResult.error(["p"], RequiredError()))

    def test_metadata(self):
        v = Required(IsType(str))
        assert v.required is True
        assert v.type_hint is str


class TestFactoryAttributes:
    @pytest.mark.parametrize(
        "factory, kind",
        [
            (InSet, ErrorKind.IN_SET),
            (Gt, ErrorKind.GT),
            (Gte, ErrorKind.GTE),
            (Lt, ErrorKind.LT),
            (Lte, ErrorKind.LTE),
            (Eq, ErrorKind.EQ),
            (MaxLength, ErrorKind.MAX_LENGTH),
            (MinLength, ErrorKind.MIN_LENGTH),
            (Length, ErrorKind.LENGTH),
            (Required, ErrorKind.REQUIRED),
            (IsType, ErrorKind.TYPE_MISMATCH),
        ],
    )
    def test_kind_matches_error(self, factory, kind):
        assert factory.kind is kind
        assert factory.Error.model_fields["kind"].default is kind
