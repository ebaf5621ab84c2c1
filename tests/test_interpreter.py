import pytest

from thinkbox.interpreter import AgeExpression, RuleError, User, UserFilter


def _users():
    return [
        User(1, "静静", 20),
        User(2, "琳琳", 25),
        User(3, "佳佳", 26),
        User(4, "露露", 27),
    ]


def test_filter_age_greater():
    assert UserFilter("age > 25").filter(_users()) == [
        User(3, "佳佳", 26),
        User(4, "露露", 27),
    ]


@pytest.mark.parametrize(
    "rule, ids",
    [
        ("age >= 25", [2, 3, 4]),
        ("age < 25", [1]),
        ("age <= 25", [1, 2]),
        ("age = 26", [3]),
        ("age   ==   27", [4]),
    ],
)
def test_filter_operators(rule, ids):
    assert [u.id for u in UserFilter(rule).filter(_users())] == ids


def test_expression_interpret():
    assert AgeExpression(">", 10).interpret(User(1, "a", 11)) is True
    assert AgeExpression(">", 10).interpret(User(1, "a", 10)) is False


def test_wrong_part_count():
    with pytest.raises(RuleError, match="error rule"):
        UserFilter("age >")


def test_bad_value():
    with pytest.raises(RuleError, match="error rule value"):
        UserFilter("age > old")


def test_unknown_field():
    with pytest.raises(RuleError, match="found no expression"):
        UserFilter("name = bob")