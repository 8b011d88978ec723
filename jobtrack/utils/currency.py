"""Currency helpers for displaying salaries next to job locations."""

import unicodedata
from typing import NamedTuple, Optional, Union

DEFAULT_SYMBOL = "$"

# Lowercase substrings, matched anywhere in the location text
UK_LOCATIONS = (
    "uk",
    "united kingdom",
    "england",
    "scotland",
    "wales",
    "london",
    "manchester",
    "birmingham",
    "shrewsbury",
    "shropshire",
    "oswestry",
    "oxford",
    "cambridge",
    "leeds",
    "bristol",
    "liverpool",
    "milton keynes",
    "peterborough",
)

US_LOCATIONS = (
    "usa",
    "united states",
    "us",
    "america",
    "california",
    "new york",
    "ny",
    "seattle",
    "chicago",
    "boston",
    "austin",
    "san francisco",
    "los angeles",
    "atlanta",
    "miami",
    "dallas",
    "houston",
    "tampa",
    "orlando",
    "pittsburgh",
    "cincinnati",
)

ICON_POUND = "pound-sterling"
ICON_EURO = "euro"
ICON_DOLLAR = "dollar-sign"


class CurrencyInfo(NamedTuple):
    code: str
    symbol: str


USD = CurrencyInfo("USD", "$")
GBP = CurrencyInfo("GBP", "£")
EUR = CurrencyInfo("EUR", "€")

LOCALE_CURRENCY_MAP = {
    "US": USD,
    "GB": GBP,
    "UK": GBP,
    "FR": EUR,
    "IE": EUR,
    "DE": EUR,
    "ES": EUR,
    "IT": EUR,
    "NL": EUR,
    "BE": EUR,
    "PT": EUR,
}


def resolve_currency_symbol(location: Optional[str] = None) -> str:
    """
    Guess the currency symbol for a job location.

    Args:
        location: Free-text location such as "London, UK" or "Remote"

    Returns:
        str: "£" for UK locations, "$" for everything else
    """
    if not location or not isinstance(location, str):
        return DEFAULT_SYMBOL

    location_lower = location.lower()

    # "New York" / "NY," always means dollars
    if "new york" in location_lower or "ny," in location_lower:
        return DEFAULT_SYMBOL

    is_us_location = any(us in location_lower for us in US_LOCATIONS)
    is_uk_location = any(uk in location_lower for uk in UK_LOCATIONS) and not is_us_location

    if is_uk_location and not is_us_location:
        return "£"

    if is_us_location:
        return "$"

    return DEFAULT_SYMBOL


def icon_for_symbol(symbol: str) -> str:
    """Map a currency symbol to its icon name."""
    if symbol == "£":
        return ICON_POUND
    if symbol == "€":
        return ICON_EURO
    return ICON_DOLLAR


def resolve_currency_icon(location: Optional[str] = None) -> str:
    """Icon name for the currency shown next to a job location."""
    return icon_for_symbol(resolve_currency_symbol(location))


def locale_from_accept_language(header: Optional[str]) -> Optional[str]:
    """Return the first language tag of an Accept-Language header."""
    if not header:
        return None
    first = header.split(",")[0].split(";")[0].strip()
    return first or None


def currency_from_locale(locale: Optional[str] = None, timezone: Optional[str] = None) -> CurrencyInfo:
    """
    Derive the user's currency from a locale tag, falling back to a time zone.

    Args:
        locale: BCP 47 style tag, e.g. "en-GB" or "fr_FR"
        timezone: IANA time zone, e.g. "Europe/London"

    Returns:
        CurrencyInfo: USD unless the locale or time zone says otherwise
    """
    if locale:
        parts = locale.replace("_", "-").split("-")
        region = parts[1].upper() if len(parts) > 1 else None
        if region and region in LOCALE_CURRENCY_MAP:
            return LOCALE_CURRENCY_MAP[region]

    if timezone:
        if timezone.startswith("Europe/London"):
            return GBP
        if timezone.startswith("Europe/"):
            return EUR
        if timezone.startswith("America/"):
            return USD

    return USD


def _starts_with_currency_symbol(text: str) -> bool:
    return bool(text) and unicodedata.category(text[0]) == "Sc"


def format_salary_for_display(salary: Union[str, int, float, None], location: Optional[str] = None) -> str:
    """
    Format a salary value with the currency symbol for its location.

    Ranges such as "70,000 - 90,000" only get the symbol prefixed; values
    that already carry a currency sign are left as they are.
    """
    if salary is None or salary == "":
        return "Not specified"

    symbol = resolve_currency_symbol(location)

    if isinstance(salary, (int, float)) and not isinstance(salary, bool):
        return f"{symbol}{salary:,.0f}"

    salary_string = str(salary).strip()
    if _starts_with_currency_symbol(salary_string):
        return salary_string

    return f"{symbol}{salary_string}"


__all__ = [
    "CurrencyInfo",
    "DEFAULT_SYMBOL",
    "UK_LOCATIONS",
    "US_LOCATIONS",
    "ICON_POUND",
    "ICON_EURO",
    "ICON_DOLLAR",
    "resolve_currency_symbol",
    "resolve_currency_icon",
    "icon_for_symbol",
    "locale_from_accept_language",
    "currency_from_locale",
    "format_salary_for_display",
]
