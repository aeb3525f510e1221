"""Tests for the login step."""

from unittest.mock import MagicMock, call, patch

import pytest
from selenium.common.exceptions import (
    ElementClickInterceptedException, NoSuchElementException, TimeoutException,
)
from selenium.webdriver.common.by import By

from utils import (
    AuthenticationError, AuthenticationTimeoutError, FailureKind, LoginHandler,
)
from utils.config import LOGIN_SUCCESS_XPATH, LOGIN_URL, PASSWORD_FIELD, USERNAME_FIELD


@pytest.fixture
def wait():
    with patch("utils.login_handler.WebDriverWait") as mock_wait:
        yield mock_wait


@pytest.fixture
def submit_button():
    return MagicMock(name="submit")


def test_login_fills_form_and_waits_for_marker(driver, wait, submit_button):
    cookie_button = MagicMock(name="cookie")
    username_field, password_field = MagicMock(), MagicMock()
    driver.find_element.side_effect = [username_field, password_field]
    wait.return_value.until.side_effect = [submit_button, cookie_button, MagicMock()]

    LoginHandler(driver).login("mario", "secret")

    driver.get.assert_called_once_with(LOGIN_URL)
    assert driver.find_element.call_args_list == [
        call(By.CSS_SELECTOR, USERNAME_FIELD),
        call(By.CSS_SELECTOR, PASSWORD_FIELD),
    ]
    username_field.send_keys.assert_called_once_with("mario")
    password_field.send_keys.assert_called_once_with("secret")
    cookie_button.click.assert_called_once()
    submit_button.click.assert_called_once()
    assert "scrollIntoView" in driver.execute_script.call_args[0][0]
    assert driver.execute_script.call_args[0][1] is submit_button
    assert wait.call_args_list == [call(driver, 30), call(driver, 3), call(driver, 30)]


def test_missing_cookie_banner_is_not_an_error(driver, wait, submit_button):
    wait.return_value.until.side_effect = [submit_button, TimeoutException(), MagicMock()]

    LoginHandler(driver).login("mario", "secret")

    submit_button.click.assert_called_once()


def test_marker_timeout_raises_timeout_error(driver, wait, submit_button):
    wait.return_value.until.side_effect = [submit_button, MagicMock(), TimeoutException()]

    with pytest.raises(AuthenticationTimeoutError) as exc_info:
        LoginHandler(driver, login_timeout=30).login("mario", "secret")

    assert exc_info.value.kind is FailureKind.TIMEOUT
    assert exc_info.value.timeout == 30
    assert "Seleziona la fornitura" in str(exc_info.value)


def test_missing_login_form_raises_authentication_error(driver, wait):
    driver.find_element.side_effect = NoSuchElementException("no #username")

    with pytest.raises(AuthenticationError) as exc_info:
        LoginHandler(driver).login("mario", "secret")

    assert exc_info.value.kind is FailureKind.AUTHENTICATION
    wait.assert_not_called()


def test_missing_submit_button_raises_authentication_error(driver, wait):
    wait.return_value.until.side_effect = TimeoutException()

    with pytest.raises(AuthenticationError) as exc_info:
        LoginHandler(driver).login("mario", "secret")

    assert not isinstance(exc_info.value, AuthenticationTimeoutError)


def test_dismiss_cookie_banner_reports_result(driver, wait):
    wait.return_value.until.side_effect = TimeoutException()
    assert LoginHandler(driver).dismiss_cookie_banner() is False

    wait.return_value.until.side_effect = None
    wait.return_value.until.return_value = MagicMock()
    assert LoginHandler(driver).dismiss_cookie_banner() is True


def test_blocked_cookie_banner_is_not_an_error(driver, wait, submit_button):
    cookie_button = MagicMock(name="cookie")
    cookie_button.click.side_effect = ElementClickInterceptedException("overlay")
    wait.return_value.until.side_effect = [submit_button, cookie_button, MagicMock()]

    LoginHandler(driver).login("mario", "secret")

    submit_button.click.assert_called_once()


def test_dismiss_cookie_banner_click_failure(driver, wait):
    cookie_button = MagicMock(name="cookie")
    cookie_button.click.side_effect = ElementClickInterceptedException("overlay")
    wait.return_value.until.return_value = cookie_button

    assert LoginHandler(driver).dismiss_cookie_banner() is False


def test_waits_for_innermost_marker_element(driver, wait, submit_button):
    wait.return_value.until.side_effect = [submit_button, MagicMock(), MagicMock()]

    with patch("utils.login_handler.EC") as conditions:
        LoginHandler(driver).login("mario", "secret")

    conditions.presence_of_element_located.assert_called_with((By.XPATH, LOGIN_SUCCESS_XPATH))
    assert "normalize-space(.)" in LOGIN_SUCCESS_XPATH
    assert "not(*[" in LOGIN_SUCCESS_XPATH
