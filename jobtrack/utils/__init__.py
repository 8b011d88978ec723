"""
Shared utilities package.
"""

from .currency import (
    resolve_currency_symbol,
    resolve_currency_icon,
    currency_from_locale,
    format_salary_for_display,
)
from .error import IntegrationError, SessionError

__all__ = [
    'resolve_currency_symbol',
    'resolve_currency_icon',
    'currency_from_locale',
    'format_salary_for_display',
    'IntegrationError',
    'SessionError'
]
