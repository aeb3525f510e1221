#!/usr/bin/env python3
"""
Login handling for A2A Billing
Fills the portal login form and waits for the supply selection page
"""

import logging

from selenium.common.exceptions import NoSuchElementException, TimeoutException, WebDriverException
from selenium.webdriver.common.by import By
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from .config import (
    COOKIE_ACCEPT_BUTTON, COOKIE_BANNER_TIMEOUT, DEFAULT_TIMEOUT, LOGIN_SUCCESS_TEXT,
    LOGIN_SUCCESS_XPATH, LOGIN_TIMEOUT, LOGIN_URL, PASSWORD_FIELD, SUBMIT_BUTTON_XPATH,
    USERNAME_FIELD,
)
from .errors import AuthenticationError, AuthenticationTimeoutError

logger = logging.getLogger(__name__)


class LoginHandler:
    """Handles the A2A login form"""

    def __init__(self, driver, login_timeout: float = LOGIN_TIMEOUT,
                 cookie_timeout: float = COOKIE_BANNER_TIMEOUT,
                 default_timeout: float = DEFAULT_TIMEOUT):
        self.driver = driver
        self.login_timeout = login_timeout
        self.cookie_timeout = cookie_timeout
        self.default_timeout = default_timeout

    def login(self, username: str, password: str) -> None:
        """Log in and wait until the portal confirms the session.

        Raises:
            AuthenticationError: If the form fields or submit control are missing.
            AuthenticationTimeoutError: If the post-login page never shows up.
        """
        logger.debug("Logging in")
        self.driver.get(LOGIN_URL)

        try:
            self.driver.find_element(By.CSS_SELECTOR, USERNAME_FIELD).send_keys(username)
            self.driver.find_element(By.CSS_SELECTOR, PASSWORD_FIELD).send_keys(password)
        except NoSuchElementException as e:
            raise AuthenticationError(f"Login form not found on {LOGIN_URL}") from e
        logger.debug("Filled login form")

        try:
            submit_button = WebDriverWait(self.driver, self.default_timeout).until(
                EC.presence_of_element_located((By.XPATH, SUBMIT_BUTTON_XPATH))
            )
        except TimeoutException as e:
            raise AuthenticationError("Could not find login submit button") from e

        self.driver.execute_script(
            "arguments[0].scrollIntoView({behavior: 'smooth', block: 'center', inline: 'center'});",
            submit_button,
        )

        self.dismiss_cookie_banner()

        submit_button.click()
        logger.debug("Submitted login form")

        try:
            WebDriverWait(self.driver, self.login_timeout).until(
                EC.presence_of_element_located((By.XPATH, LOGIN_SUCCESS_XPATH))
            )
        except TimeoutException as e:
            raise AuthenticationTimeoutError(LOGIN_SUCCESS_TEXT, self.login_timeout) from e

        logger.debug("Logged in")

    def dismiss_cookie_banner(self) -> bool:
        """Accept the iubenda cookie banner if it shows up; returns whether it did"""
        try:
            cookie_button = WebDriverWait(self.driver, self.cookie_timeout).until(
                EC.element_to_be_clickable((By.CSS_SELECTOR, COOKIE_ACCEPT_BUTTON))
            )
            cookie_button.click()
        except TimeoutException:
            logger.info("No cookie banner")
            return False
        except WebDriverException as e:
            logger.info(f"Could not dismiss cookie banner: {e.msg or e}")
            return False

        logger.debug("Dismissed cookie banner")
        return True
