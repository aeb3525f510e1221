#!/usr/bin/env python3
"""
A2A Billing - Automated Utility Billing Averages
Logs into the A2A customer portal, averages the gas and electricity bills
and publishes the monthly figures to Firebase.
"""

import logging
import os
from enum import Enum
from typing import List, Optional

from selenium.common.exceptions import TimeoutException, WebDriverException
from selenium.webdriver.common.by import By
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from config import Settings
from utils import (
    ELECTRICITY, GAS, BrowserSession, Commodity, CommodityAverage, ExtractionStrategy,
    FirebaseDatabase, LoginHandler, MonthlyReport, PageLoadTimeoutError, StepOutcome,
    XPathExtractionStrategy, format_euro, format_store_value, monthly_average, parse_amounts,
)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(debug: bool = False, log_file: Optional[str] = None):
    """Sets up logging for the application."""
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
        handlers=handlers,
    )
    # selenium and urllib3 are chatty at DEBUG
    for noisy in ("selenium", "urllib3"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


class RunState(str, Enum):
    IDLE = "idle"
    SET_UP = "set_up"
    AUTHENTICATED = "authenticated"
    GAS_SCRAPED = "gas_scraped"
    ELECTRICITY_SCRAPED = "electricity_scraped"
    REPORTED = "reported"
    FAILED = "failed"
    TORN_DOWN = "torn_down"


class A2ABilling:
    """Main class for the A2A billing averages scraper."""

    def __init__(self, settings: Settings, database=None,
                 session: Optional[BrowserSession] = None,
                 extractor: Optional[ExtractionStrategy] = None):
        """Initialize the scraper and clear diagnostics left by a previous run."""
        self.settings = settings
        self.logger = logging.getLogger(__name__)
        self._remove_stale_diagnostics()

        self.database = database if database is not None else FirebaseDatabase(settings.firebase_config)
        self.session = session or BrowserSession(
            headless=settings.headless,
            executable_path=settings.executable_path,
        )
        self.extractor = extractor or XPathExtractionStrategy()
        self.state = RunState.IDLE
        self.history: List[RunState] = [RunState.IDLE]

    @property
    def driver(self):
        return self.session.driver

    def _remove_stale_diagnostics(self):
        for path in (self.settings.screenshot_path, self.settings.page_source_path):
            if os.path.exists(path):
                os.remove(path)

    def _transition(self, state: RunState):
        self.state = state
        self.history.append(state)
        self.logger.debug(f"State: {state.value}")

    def _run_step(self, step: str, func, *args) -> StepOutcome:
        """Run one step and capture its result or failure."""
        try:
            return StepOutcome.success(step, func(*args))
        except Exception as e:
            return StepOutcome.failure(step, e)

    def _execute(self, step: str, next_state: Optional[RunState], func, *args):
        outcome = self._run_step(step, func, *args)
        if not outcome.ok:
            self._handle_failure(outcome)
        if next_state is not None:
            self._transition(next_state)
        return outcome.value

    def _handle_failure(self, outcome: StepOutcome):
        """Save diagnostics for a failed step, then re-raise its error."""
        self._transition(RunState.FAILED)
        try:
            self.session.screenshot(self.settings.screenshot_path)
            self.session.save_page_source(self.settings.page_source_path)
        except Exception as e:
            self.logger.warning(f"Could not save diagnostics: {e}")
        self.logger.error(
            f"Step '{outcome.step}' failed ({outcome.kind.value}): {outcome.detail}",
            exc_info=outcome.error,
        )
        raise outcome.error

    def setup(self):
        self.session.start()

    def teardown(self):
        try:
            self.session.close()
        except WebDriverException as e:
            self.logger.warning(f"Browser did not close cleanly: {e}")
        self._transition(RunState.TORN_DOWN)

    def login(self):
        """Logs into the A2A portal with the configured credentials."""
        handler = LoginHandler(
            self.driver,
            login_timeout=self.settings.login_timeout,
            cookie_timeout=self.settings.cookie_timeout,
            default_timeout=self.settings.default_timeout,
        )
        handler.login(self.settings.username, self.settings.password)

    def get_commodity_average(self, commodity: Commodity) -> CommodityAverage:
        """Opens a commodity's bill page and averages the amounts listed there."""
        self.logger.debug(f"Getting {commodity.name} values")
        self.driver.get(commodity.url)

        timeout = self.settings.default_timeout
        try:
            WebDriverWait(self.driver, timeout).until(
                EC.presence_of_element_located((By.XPATH, commodity.ready_marker_xpath))
            )
        except TimeoutException as e:
            raise PageLoadTimeoutError(commodity.url, timeout) from e

        values = self.extractor.extract(driver=self.driver)
        monthly = monthly_average(values, commodity.name)
        self.logger.debug(f"Got {commodity.name} values: {values}")
        return CommodityAverage(commodity=commodity.name, amounts=parse_amounts(values), monthly=monthly)

    def get_gas_bill(self) -> CommodityAverage:
        return self.get_commodity_average(GAS)

    def get_electricity_bill(self) -> CommodityAverage:
        return self.get_commodity_average(ELECTRICITY)

    def report(self, commodity: Commodity, average: CommodityAverage):
        """Publishes a monthly average to the commodity's store path."""
        self.database.set(commodity.store_path, format_store_value(average.monthly))

    def run(self) -> MonthlyReport:
        """Main execution flow: setup, login, scrape both bills, publish, teardown."""
        self.logger.debug("Running script")
        try:
            self._execute("setup", RunState.SET_UP, self.setup)
            self._execute("login", RunState.AUTHENTICATED, self.login)

            gas = self._execute("scrape gas", RunState.GAS_SCRAPED, self.get_gas_bill)
            self.logger.info(f"Media mensile {GAS.label}: {format_euro(gas.monthly)}")
            self._execute("write gas", None, self.report, GAS, gas)

            electricity = self._execute(
                "scrape electricity", RunState.ELECTRICITY_SCRAPED, self.get_electricity_bill
            )
            self._execute("write electricity", None, self.report, ELECTRICITY, electricity)
            self.logger.info(f"Media mensile {ELECTRICITY.label}: {format_euro(electricity.monthly)}")

            report = MonthlyReport(gas=gas, electricity=electricity)
            self.logger.info(f"Media mensile: {format_euro(report.total)}")
            self._transition(RunState.REPORTED)
            return report
        finally:
            self.teardown()
