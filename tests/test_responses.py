from thinkbox.responses import (
    JSONResult,
    error,
    handle,
    make_result,
    ok,
    ok_text,
    with_code,
    with_data,
    with_message,
)


def test_default_result():
    assert make_result().to_dict() == {"code": 0, "message": "", "data": None}


def test_options_set_fields():
    res = make_result(with_code(2), with_message("done"), with_data([1]))
    assert res == JSONResult(2, "done", [1])


def test_ok_wraps_result():
    assert ok(make_result(with_data(5))) == ({"code": 0, "message": "", "data": 5}, 200)


def test_ok_passes_plain_payload():
    payload = {"k": "v"}
    assert ok(payload) == (payload, 200)


def test_error_status():
    body, status = error(make_result(with_message("bad")))
    assert status == 400
    assert body["message"] == "bad"


def test_ok_text():
    assert ok_text(5) == ("5", 200)


def test_handle_builds_uniform_body():
    def example(x):
        return 1, "ok", [x]

    wrapped = handle(example)
    assert wrapped(2) == ({"code": 1, "message": "ok", "data": [2]}, 200)
    assert wrapped.__name__ == "example"