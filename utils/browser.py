#!/usr/bin/env python3
"""
Browser session for A2A Billing
Owns the single Chrome WebDriver used by a run
"""

import logging
from pathlib import Path
from typing import Optional, Union

from selenium import webdriver
from selenium.common.exceptions import WebDriverException

from .config import CHROME_OPTIONS, EXTRA_HTTP_HEADERS, VIEWPORT_HEIGHT, VIEWPORT_WIDTH
from .errors import BrowserLaunchError, SessionNotStartedError

logger = logging.getLogger(__name__)


class BrowserSession:
    """Creates, exposes and closes one Chrome instance"""

    def __init__(self, headless: bool = True, executable_path: Optional[str] = None):
        self.headless = headless
        self.executable_path = executable_path
        self._driver = None

    @property
    def driver(self):
        if self._driver is None:
            raise SessionNotStartedError()
        return self._driver

    @property
    def is_active(self) -> bool:
        return self._driver is not None

    def _build_options(self) -> webdriver.ChromeOptions:
        options = webdriver.ChromeOptions()
        if self.headless:
            options.add_argument("--headless=new")
        else:
            options.add_argument("--auto-open-devtools-for-tabs")

        for option in CHROME_OPTIONS:
            options.add_argument(option)

        if self.executable_path:
            options.binary_location = self.executable_path
        return options

    def start(self):
        """Launch Chrome and return the ready driver.

        Raises:
            BrowserLaunchError: If a session is already running or Chrome
                fails to start.
        """
        if self._driver is not None:
            raise BrowserLaunchError("Browser session already started")

        logger.debug(f"Setting up browser (headless={self.headless})")
        options = self._build_options()
        try:
            # Selenium Manager resolves chromedriver
            driver = webdriver.Chrome(options=options)
        except WebDriverException as e:
            raise BrowserLaunchError(f"Could not launch browser: {e.msg or e}") from e

        self._driver = driver
        try:
            driver.execute_cdp_cmd("Network.enable", {})
            driver.execute_cdp_cmd("Network.setExtraHTTPHeaders", {"headers": EXTRA_HTTP_HEADERS})
            driver.execute_cdp_cmd("Emulation.setDeviceMetricsOverride", {
                "width": VIEWPORT_WIDTH,
                "height": VIEWPORT_HEIGHT,
                "deviceScaleFactor": 1,
                "mobile": False,
            })
        except WebDriverException as e:
            self.close()
            raise BrowserLaunchError(f"Could not configure browser: {e.msg or e}") from e

        logger.debug("Browser setup complete")
        return driver

    def screenshot(self, path: Union[str, Path]) -> bool:
        """Save a screenshot of the current page, best effort"""
        if self._driver is None:
            logger.warning("No browser session, skipping screenshot")
            return False
        try:
            saved = self._driver.save_screenshot(str(path))
        except Exception as e:
            # a dead chromedriver surfaces as urllib3 errors, not WebDriverException
            logger.warning(f"Could not save screenshot: {e}")
            return False
        if saved:
            logger.info(f"Saved screenshot to {path}")
        return bool(saved)

    def save_page_source(self, path: Union[str, Path]) -> bool:
        """Dump the current page HTML, best effort"""
        if self._driver is None:
            return False
        try:
            html = self._driver.page_source
        except Exception as e:
            logger.warning(f"Could not read page source: {e}")
            return False
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(html)
        except OSError as e:
            logger.warning(f"Could not write page source: {e}")
            return False
        logger.info(f"Saved page source to {path}")
        return True

    def close(self):
        """Quit the browser if one is running; safe to call repeatedly"""
        if self._driver is None:
            return
        logger.debug("Tearing down browser")
        driver, self._driver = self._driver, None
        driver.quit()
        logger.debug("Browser torn down")

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
