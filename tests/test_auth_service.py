import pytest

from services.auth_service import AuthService


def test_login_accepts_builtin_pair():
    auth = AuthService()
    assert auth.login("nagesh", "nagesh") is True
    assert auth.is_logged_in


@pytest.mark.parametrize("username,password", [
    ("nagesh", "wrong"),
    ("wrong", "nagesh"),
    ("Nagesh", "nagesh"),
    ("nagesh", "Nagesh"),
    (" nagesh", "nagesh"),
    ("nagesh", "nagesh "),
    ("", ""),
])
def test_login_rejects_every_other_pair(username, password):
    auth = AuthService()
    assert auth.login(username, password) is False
    assert not auth.is_logged_in


def test_logout_is_unconditional():
    auth = AuthService()
    auth.logout()
    assert not auth.is_logged_in
    auth.login("nagesh", "nagesh")
    auth.logout()
    assert not auth.is_logged_in


def test_custom_credentials():
    auth = AuthService(username="admin", password="s3cret")
    assert not auth.check_credentials("nagesh", "nagesh")
    assert auth.check_credentials("admin", "s3cret")
