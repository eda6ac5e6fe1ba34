from unittest.mock import patch

import pytest

from ostoolkit.intro import check_login, main, render_splash


def test_check_login_accepts_matching_credentials():
    password = "password"
    assert check_login("user", password, 42, 42) is True


@pytest.mark.parametrize(
    "user, secret_value, captcha, entered",
    [
        ("someone", "password", 5, 5),
        ("user", "secret", 5, 5),
        ("user", "password", 5, 6),
    ],
)
def test_check_login_rejects_any_mismatch(user, secret_value, captcha, entered):
    assert check_login(user, secret_value, captcha, entered) is False


def test_splash_contains_welcome_and_letters():
    text = render_splash()
    assert "Welcome to" in text
    assert "       OOOOOOOO00O SSSSSSSSSS" in text
    assert "       OOOOOOOOOOO SSSSSSSSS" in text


def test_splash_letter_rows_are_indented():
    rows = [line for line in render_splash().splitlines() if line.startswith("\t\t   ")]
    assert len(rows) == 9
    assert all(row.endswith("  ") for row in rows)


def _feeder(answers):
    items = iter(answers)

    def fake_input(prompt=""):
        print(prompt, end="")
        try:
            return next(items)
        except StopIteration:
            raise EOFError from None

    return fake_input


def test_main_stops_quietly_when_input_ends(capsys):
    with patch("builtins.input", _feeder([])), patch("time.sleep"):
        assert main([]) == 0
    out = capsys.readouterr().out
    assert "Welcome to" in out
    assert "Press enter to continue..." in out


def test_main_verifies_user_with_correct_captcha(capsys):
    answers = ["", "user", "password", "7"]
    with patch("builtins.input", _feeder(answers)), patch("time.sleep"), \
            patch("random.randrange", return_value=7):
        assert main([]) == 0
    out = capsys.readouterr().out
    assert "Enter this number below : 7" in out
    assert "User Verified... ;)" in out
    assert "Access Denied" not in out


def test_main_denies_wrong_captcha_then_retries(capsys):
    answers = ["", "user", "password", "8", "user", "password", "7"]
    with patch("builtins.input", _feeder(answers)), patch("time.sleep"), \
            patch("random.randrange", return_value=7):
        assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("Access Denied... :(") == 1
    assert out.count("User Verified... ;)") == 1