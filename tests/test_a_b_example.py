"""
End-to-end usage examples: a company record with an owner and branches.
"""

import pytest

from shapeguard import (
    AllOf,
    AnyOf,
    ArrayShape,
    Eq,
    IsType,
    Length,
    MaxLength,
    MinLength,
    ObjectShape,
    PathResult,
    Required,
    TypeMismatchError,
    error,
    ok,
    validate,
)

COMPANY = ObjectShape(
    {
        "title": Required(AllOf(IsType(str), MinLength(1), MaxLength(20))),
        "owner": Required(
            ObjectShape(
                {
                    "name": Required(AllOf(IsType(str), MinLength(1))),
                    "email": Required(IsType(str)),
                    "phone": IsType(str),
                }
            )
        ),
        "branches": Required(
            AllOf(
                ArrayShape(
                    [
                        ObjectShape(
                            {
                                "address": Required(IsType(str)),
                                "is_active": Required(IsType(bool)),
                            }
                        )
                    ]
                ),
                MinLength(1),
            )
        ),
    }
)


SAMPLES = [
    ("string type", IsType(str), "foo", []),
    (
        "number type fails on string",
        IsType(int),
        "foo",
        [PathResult.error([], TypeMismatchError(expected_type=int, actual_type=str))],
    ),
    ("required present", Required(), "I am here", []),
    ("required absent", Required(), None, [PathResult.error([], Required.Error())]),
    (
        "required field within a shape",
        ObjectShape({"name": Required(), "age": IsType(int)}),
        {"age": 42},
        [PathResult.error(["name"], Required.Error())],
    ),
    (
        "length of 5 or 6 for Dude",
        AnyOf(Length(5), Length(6)),
        "Dude",
        [
            PathResult.error([], Length.Error(len=5, value="Dude", value_length=4)),
            PathResult.error([], Length.Error(len=6, value="Dude", value_length=4)),
        ],
    ),
    ("min and max length", AllOf(MinLength(5), MaxLength(7)), "Walter", []),
    (
        "max length exceeded",
        AllOf(MinLength(5), MaxLength(7)),
        "El Duderino",
        [
            PathResult.error(
                [], MaxLength.Error(max_len=7, value="El Duderino", value_length=11)
            )
        ],
    ),
    ("equality", Eq("Dude"), "Dude", []),
    (
        "equality fails",
        Eq("Dude"),
        "Walter",
        [PathResult.error([], Eq.Error(expected="Dude", value="Walter"))],
    ),
    (
        "complex case passes",
        COMPANY,
        {
            "title": "Bowling inc.",
            "owner": {"name": "Dude", "email": "dude@bowling.com", "phone": "123123123"},
            "branches": [{"address": "Elm Street 13", "is_active": True}],
        },
        [],
    ),
    (
        "complex case without some data",
        COMPANY,
        {"owner": {"name": ""}, "branches": []},
        [
            PathResult.error(["title"], Required.Error()),
            PathResult.error(
                ["owner", "name"], MinLength.Error(min_len=1, value="", value_length=0)
            ),
            PathResult.error(["owner", "email"], Required.Error()),
            PathResult.error(
                ["branches"], MinLength.Error(min_len=1, value=[], value_length=0)
            ),
        ],
    ),
    (
        "complex case with bad branch",
        COMPANY,
        {
            "title": "Bowling inc.",
            "owner": {"name": "Dude", "email": "dude@bowling.com"},
            "branches": [
                {"address": "Elm Street 13", "is_active": True},
                {"address": 13, "is_active": "yes"},
            ],
        },
        [
            PathResult.error(
                ["branches", 1, "address"],
                TypeMismatchError(expected_type=str, actual_type=int),
            ),
            PathResult.error(
                ["branches", 1, "is_active"],
                TypeMismatchError(expected_type=bool, actual_type=str),
            ),
        ],
    ),
]


@pytest.mark.parametrize(
    "constraint, value, expected_errors",
    [sample[1:] for sample in SAMPLES],
    ids=[sample[0] for sample in SAMPLES],
)
def test_usage_examples(constraint, value, expected_errors):
    expected = error(*expected_errors) if expected_errors else ok()
    assert validate(value, constraint) == expected


def test_title_required_on_empty_object():
    shape = ObjectShape(
        {"title": Required(AllOf(IsType(str), MinLength(1), MaxLength(20)))}
    )
    result = validate({}, shape)
    assert len(result.errors) == 1
    assert result.errors[0].path == ("title",)
    assert result.errors[0].errors[0].kind is Required.kind
