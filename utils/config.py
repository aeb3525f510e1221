#!/usr/bin/env python3
"""
Configuration module for A2A Billing
All portal constants and settings in one place

The portal markup changes without notice. When a scrape breaks, the
selectors below are usually the only thing that needs updating.
"""

from dataclasses import dataclass

# Browser Configuration
VIEWPORT_WIDTH = 1280
VIEWPORT_HEIGHT = 720
BROWSER_WINDOW_SIZE = f"{VIEWPORT_WIDTH},{VIEWPORT_HEIGHT}"
USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; WOW64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/108.0.0.0 Safari/537.36"

EXTRA_HTTP_HEADERS = {
    "user-agent": USER_AGENT,
    "accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,image/apng,*/*;q=0.8",
    "accept-encoding": "gzip, deflate, br",
    "accept-language": "en-US,en;q=0.9,en;q=0.8",
}

CHROME_OPTIONS = [
    "--no-sandbox",
    f"--window-size={BROWSER_WINDOW_SIZE}",
    f"--user-agent={USER_AGENT}",
]

# Timing Configuration (seconds)
LOGIN_TIMEOUT = 30
COOKIE_BANNER_TIMEOUT = 3
DEFAULT_TIMEOUT = 30

# Login page
LOGIN_URL = "https://login.a2a.it/"
USERNAME_FIELD = "#username"
PASSWORD_FIELD = "#password"
SUBMIT_BUTTON_XPATH = "//*[@id='form-login']//div[contains(text(), 'Accedi')]"
COOKIE_ACCEPT_BUTTON = ".iubenda-cs-accept-btn"
LOGIN_SUCCESS_TEXT = "Seleziona la fornitura da gestire:"
# innermost element whose normalized text holds the marker
LOGIN_SUCCESS_XPATH = (
    f"//*[contains(normalize-space(.), '{LOGIN_SUCCESS_TEXT}')"
    f" and not(*[contains(normalize-space(.), '{LOGIN_SUCCESS_TEXT}')])]"
)

# Bill pages
BILL_AMOUNT_CLASS = "BillCard_billSummary__status__amount"
BILL_AMOUNT_XPATH = f'//*[contains(@class,"{BILL_AMOUNT_CLASS}")]'
BILL_AMOUNT_CSS = f'[class*="{BILL_AMOUNT_CLASS}"]'
BILL_ICON_XPATH = '//*[contains(@class,"BillCard_icon")]//img[@alt="{alt}"]'

# Bills are issued every two months; the averages are reported per month.
MONTHLY_DIVISOR = 2

# Failure diagnostics
SCREENSHOT_PATH = "./error.png"
PAGE_SOURCE_PATH = "./error.html"


@dataclass(frozen=True)
class Commodity:
    """A billed utility and where to find its bills"""
    name: str
    label: str
    url: str
    icon_alt: str
    store_path: str

    @property
    def ready_marker_xpath(self) -> str:
        return BILL_ICON_XPATH.format(alt=self.icon_alt)


GAS = Commodity(
    name="gas",
    label="gas",
    url="https://myareaclienti-energia.a2a.it/bollette",
    icon_alt="Icona gas",
    store_path="a2a/gas",
)

ELECTRICITY = Commodity(
    name="electricity",
    label="elettricità",
    url="https://myareaclienti-maggiortutela.a2a.it/bollette",
    icon_alt="Icona ele",
    store_path="a2a/electricity",
)
