import pytest

from thinkbox.result import ErrorResult, ResultError, result
from thinkbox.validation import ValidationError


def test_data_without_error():
    assert result(5, None).unwrap() == 5


def test_single_none_is_empty_success():
    assert result(None).unwrap() is None


def test_error_is_raised_on_unwrap():
    res = result(5, ValueError("boom"))
    with pytest.raises(ResultError, match="boom"):
        res.unwrap()


def test_unwrap_or_and_fun_on_error():
    res = result(5, ValueError("boom"))
    assert res.unwrap_or(7) == 7
    assert res.unwrap_fun(lambda: 9) == 9


def test_unwrap_or_and_fun_on_success():
    res = result("data", None)
    assert res.unwrap_or(7) == "data"
    assert res.unwrap_fun(lambda: 9) == "data"


def test_single_error_argument():
    err = KeyError("k")
    res = result(err)
    assert res == ErrorResult(None, err)


def test_bad_shapes_give_error_result():
    for res in (result(), result("not an error"), result(1, "x"), result(1, 2, 3)):
        with pytest.raises(ResultError, match="error result"):
            res.unwrap()


def test_validation_tip_is_raised():
    res = result(ValidationError(["UserName"]))
    with pytest.raises(ValidationError) as info:
        res.unwrap()
    assert info.value.message == "用户名必须在2-10位之间"