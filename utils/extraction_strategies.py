#!/usr/bin/env python3
"""
Data extraction strategies for A2A Billing
Different approaches to read bill amounts from a bill page
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from bs4 import BeautifulSoup
from selenium.webdriver.common.by import By

from .config import BILL_AMOUNT_CSS, BILL_AMOUNT_XPATH

logger = logging.getLogger(__name__)


class ExtractionStrategy(ABC):
    """Abstract base class for extraction strategies"""

    @abstractmethod
    def extract(self, page_source: Optional[str] = None, driver=None) -> List[str]:
        """Return the raw text of every bill amount on the page, in page order"""
        pass


class XPathExtractionStrategy(ExtractionStrategy):
    """Read bill amounts from the live page through the WebDriver"""

    def __init__(self, xpath: str = BILL_AMOUNT_XPATH):
        self.xpath = xpath

    def extract(self, page_source: Optional[str] = None, driver=None) -> List[str]:
        if driver is None:
            raise ValueError("XPath extraction needs a driver")

        elements = driver.find_elements(By.XPATH, self.xpath)
        # textContent includes text hidden by CSS, unlike element.text
        values = [element.get_attribute("textContent") for element in elements]
        values = [value for value in values if value is not None]
        logger.debug(f"Found {len(values)} bill amounts with {self.xpath}")
        return values


class HTMLExtractionStrategy(ExtractionStrategy):
    """Read bill amounts from saved HTML"""

    def __init__(self, selector: str = BILL_AMOUNT_CSS):
        self.selector = selector

    def extract(self, page_source: Optional[str] = None, driver=None) -> List[str]:
        if page_source is None:
            if driver is None:
                raise ValueError("HTML extraction needs page source or a driver")
            page_source = driver.page_source

        soup = BeautifulSoup(page_source, "html.parser")
        values = [element.get_text() for element in soup.select(self.selector)]
        logger.debug(f"Found {len(values)} bill amounts with {self.selector}")
        return values
