import io

import pytest

from gremlins import log


@pytest.fixture(autouse=True)
def clean_logger():
    log.reset()
    log.set_silent(False)
    yield
    log.reset()
    log.set_silent(False)


def test_uninitialised_writes_nothing():
    out = io.StringIO()
    e_out = io.StringIO()
    log.init(out, e_out)
    log.reset()

    log.infof("%s", "test")
    log.infoln("test")
    log.errorf("%s", "test")
    log.errorln("test")

    assert out.getvalue() == ""
    assert e_out.getvalue() == ""


def test_init_without_error_stream_is_noop():
    out = io.StringIO()
    log.init(out, None)
    log.infoln("test")
    assert out.getvalue() == ""


def test_init_is_a_singleton():
    first = io.StringIO()
    second = io.StringIO()
    log.init(first, io.StringIO())
    log.init(second, io.StringIO())
    log.infoln("test")
    assert first.getvalue() == "test\n"
    assert second.getvalue() == ""


def test_infof():
    out = io.StringIO()
    log.init(out, io.StringIO())
    log.infof("test %d", 1)
    assert out.getvalue() == "test 1"


def test_infoln():
    out = io.StringIO()
    log.init(out, io.StringIO())
    log.infoln("test test")
    assert out.getvalue() == "test test\n"


def test_errorf():
    out = io.StringIO()
    e_out = io.StringIO()
    log.init(out, e_out)
    log.errorf("test %d", 1)
    assert e_out.getvalue() == "ERROR: test 1"
    assert out.getvalue() == ""


def test_errorln():
    out = io.StringIO()
    e_out = io.StringIO()
    log.init(out, e_out)
    log.errorln("test test")
    assert e_out.getvalue() == "ERROR: test test\n"
    assert out.getvalue() == ""


def test_silent_mode():
    log.set_silent(True)
    s_out = io.StringIO()
    e_out = io.StringIO()
    log.init(s_out, e_out)

    log.infof("%s", "test")
    log.infoln("test")
    log.errorf("%s\n", "test")
    log.errorln("test")

    assert s_out.getvalue() == ""
    assert e_out.getvalue() == "ERROR: test\nERROR: test\n"