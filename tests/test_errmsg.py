import pytest

from pcskit.errmsg import (
    buy_errmsg,
    download_errmsg,
    errmsg_by_errno,
    login_errmsg,
    record_errmsg,
    share_errmsg,
)


def test_login_known_codes():
    assert login_errmsg(0) == "Success"
    assert login_errmsg(4) == "Wrong password"
    assert login_errmsg(-1) == "System error, try again later"
    assert login_errmsg(500010) == "Login too frequently, please try again after 24 hours."


def test_login_shared_messages():
    assert login_errmsg(120019) == login_errmsg(400031) == "See popped out window."
    assert login_errmsg(6) == login_errmsg(257) == "Wrong captcha."


@pytest.mark.parametrize("code", [18, 400032, 400034, 400037, 400401])
def test_login_silent_codes(code):
    assert login_errmsg(code) == ""


def test_login_unknown():
    assert login_errmsg(999999) == "Unknown error."


def test_errno_known_codes():
    assert errmsg_by_errno(0) == "Success."
    assert errmsg_by_errno(31116) == "You have been reach the quota. Buy more!"
    assert errmsg_by_errno(-6) == "BDUSS invalid"


@pytest.mark.parametrize("code", [14, 201, 202, 203, 204, 205])
def test_errno_system_error_group(code):
    assert errmsg_by_errno(code) == "System error"


def test_errno_unknown():
    assert errmsg_by_errno(12345) == "Unknown error"


def test_share_codes():
    assert share_errmsg(0) == "Success"
    assert share_errmsg(-9) == "Access password error"
    assert share_errmsg(-7) == share_errmsg(-8)
    assert share_errmsg(1) == "Unknow error"


def test_download_codes():
    assert download_errmsg(36010) == "File does not exist"
    assert download_errmsg(-19) == "Please enter the verification code"
    assert download_errmsg(36013) == download_errmsg(36022)
    assert download_errmsg(36011) == "Unknow error"


def test_buy_codes():
    assert buy_errmsg(36013) == "The order can not be re-paid"
    assert buy_errmsg(3002) == buy_errmsg(36014)
    assert buy_errmsg(1000) == buy_errmsg(1001)
    assert buy_errmsg(36004) == "Unknow error"


def test_record_codes():
    assert record_errmsg(36034) == "Database Error"
    assert record_errmsg(36039) == "Price does not exist"
    assert record_errmsg(36004) == "Unknow error"


@pytest.mark.parametrize(
    ("func", "fallback"),
    [
        (login_errmsg, "Unknown error."),
        (errmsg_by_errno, "Unknown error"),
        (share_errmsg, "Unknow error"),
        (download_errmsg, "Unknow error"),
        (buy_errmsg, "Unknow error"),
        (record_errmsg, "Unknow error"),
    ],
)
def test_every_lookup_has_fallback(func, fallback):
    assert func(10**9) == fallback
    assert func(-(10**9)) == fallback


def test_same_code_differs_between_tables():
    assert download_errmsg(36000) != record_errmsg(36000)
    assert record_errmsg(36000) == "Internal error"