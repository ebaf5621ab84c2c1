import pytest

from thinkbox.validation import (
    ValidationError,
    check_rules,
    raise_if_validation_error,
    register_validation,
    validate,
)


def test_rules_pass():
    assert check_rules("abc", "required,min=2,max=10") is None


def test_first_failing_rule_is_reported():
    assert check_rules("a", "required,min=2,max=10") == "min"
    assert check_rules("", "required,min=2") == "required"
    assert check_rules("x" * 11, "required,min=2,max=10") == "max"


def test_numeric_rules():
    assert check_rules(5, "gt=3") is None
    assert check_rules(3, "gt=3") == "gt"
    assert check_rules(0, "required") == "required"


def test_unknown_rule_raises():
    with pytest.raises(ValueError):
        check_rules("abc", "bogus=1")


def test_user_name_validation():
    assert validate("UserName", "bob") == "bob"
    with pytest.raises(ValidationError) as info:
        validate("UserName", "b")
    assert info.value.tags == ["UserName"]


def test_user_name_rejects_non_strings():
    with pytest.raises(ValidationError):
        validate("UserName", 12345)


def test_undefined_validation_raises():
    with pytest.raises(ValueError):
        validate("NoSuchTag", "x")


def test_empty_tag_cannot_be_registered():
    with pytest.raises(ValueError):
        register_validation("", lambda value: True)


def test_registered_tip_is_raised():
    tip = "must be even"
    register_validation("Even", lambda value: value % 2 == 0, tip)
    assert validate("Even", 4) == 4
    with pytest.raises(ValidationError) as failed:
        validate("Even", 3)
    with pytest.raises(ValidationError) as info:
        raise_if_validation_error(failed.value)
    assert info.value.message == tip
    assert str(info.value) == tip


def test_user_name_tip():
    with pytest.raises(ValidationError) as info:
        raise_if_validation_error(ValidationError(["UserName"]))
    assert info.value.message == "用户名必须在2-10位之间"


def test_other_errors_pass_through():
    assert raise_if_validation_error(ValueError("x")) is None
    assert raise_if_validation_error(ValidationError(["Untipped"])) is None