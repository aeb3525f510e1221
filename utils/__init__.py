#!/usr/bin/env python3
"""
A2A Billing Utils Package
Browser, login, extraction and storage helpers used by the scraper
"""

from .config import *
from .errors import (
    A2ABillingError, AmountParseError, AuthenticationError, AuthenticationTimeoutError,
    BrowserLaunchError, ConfigurationError, EmptyBillListError, ExtractionError,
    FailureKind, PageLoadTimeoutError, SessionNotStartedError, StepOutcome,
    StoreWriteError, classify,
)
from .utils import (
    CommodityAverage, MonthlyReport, format_euro, format_store_value, monthly_average,
    parse_amount, parse_amounts,
)
from .browser import BrowserSession
from .login_handler import LoginHandler
from .extraction_strategies import ExtractionStrategy, HTMLExtractionStrategy, XPathExtractionStrategy
from .database import FirebaseDatabase

__all__ = [
    'CommodityAverage',
    'MonthlyReport',
    'parse_amount',
    'parse_amounts',
    'monthly_average',
    'format_store_value',
    'format_euro',
    'BrowserSession',
    'LoginHandler',
    'ExtractionStrategy',
    'XPathExtractionStrategy',
    'HTMLExtractionStrategy',
    'FirebaseDatabase',
    # Errors
    'A2ABillingError',
    'AmountParseError',
    'AuthenticationError',
    'AuthenticationTimeoutError',
    'BrowserLaunchError',
    'ConfigurationError',
    'EmptyBillListError',
    'ExtractionError',
    'FailureKind',
    'PageLoadTimeoutError',
    'SessionNotStartedError',
    'StepOutcome',
    'StoreWriteError',
    'classify',
    # Config constants
    'Commodity',
    'GAS',
    'ELECTRICITY',
    'LOGIN_TIMEOUT',
    'COOKIE_BANNER_TIMEOUT',
    'DEFAULT_TIMEOUT',
    'SCREENSHOT_PATH',
    'PAGE_SOURCE_PATH',
    'MONTHLY_DIVISOR',
]
