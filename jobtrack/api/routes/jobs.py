from fastapi import APIRouter, Depends, Header, HTTPException, Query
from typing import Optional
from jobtrack.db.supabase import supabase_manager
from jobtrack.schemas.job import (
    BoardResponse,
    CurrencyResponse,
    LocaleCurrencyResponse,
    SalaryDisplayResponse,
    StatusCountsResponse,
)
from jobtrack.services.kanban import build_board, count_by_status
from jobtrack.utils.currency import (
    currency_from_locale,
    format_salary_for_display,
    icon_for_symbol,
    locale_from_accept_language,
    resolve_currency_icon,
    resolve_currency_symbol,
)
from ..dependencies import get_user_id
import logging

router = APIRouter()
logger = logging.getLogger(__name__)


def load_user_jobs(user_id: str):
    """Load a user's job applications, mapping storage failures to a 500"""
    try:
        return supabase_manager.get_user_jobs(user_id)
    except Exception as e:
        logger.error("Error loading job applications for user %s: %s", user_id, e)
        raise HTTPException(status_code=500, detail="Failed to load job applications")


@router.get("/currency", response_model=CurrencyResponse)
async def get_currency(
    location: Optional[str] = Query(None, description="Job location, e.g. 'London, UK'")
):
    """
    Currency symbol and icon to show next to a job's salary
    """
    return CurrencyResponse(
        location=location,
        symbol=resolve_currency_symbol(location),
        icon=resolve_currency_icon(location),
    )


@router.get("/currency/locale", response_model=LocaleCurrencyResponse)
async def get_locale_currency(
    tz: Optional[str] = Query(None, description="IANA time zone, e.g. 'Europe/London'"),
    locale: Optional[str] = Query(None, description="Locale tag; defaults to the Accept-Language header"),
    accept_language: Optional[str] = Header(None),
):
    """
    The user's own currency, from their locale or time zone
    """
    locale = locale or locale_from_accept_language(accept_language)
    currency = currency_from_locale(locale, tz)
    return LocaleCurrencyResponse(
        locale=locale,
        timezone=tz,
        code=currency.code,
        symbol=currency.symbol,
        icon=icon_for_symbol(currency.symbol),
    )


@router.get("/salary", response_model=SalaryDisplayResponse)
async def get_salary_display(
    salary: Optional[str] = Query(None, description="Salary or salary range"),
    location: Optional[str] = Query(None, description="Job location")
):
    """
    Salary formatted with the currency of the job's location
    """
    return SalaryDisplayResponse(display=format_salary_for_display(salary, location))


@router.get("/board", response_model=BoardResponse)
async def get_board(user_id: str = Depends(get_user_id)):
    """
    Kanban board of the user's job applications
    """
    jobs = load_user_jobs(user_id)
    columns = build_board(jobs)
    logger.info("Built board with %d job(s) for user %s", len(jobs), user_id)
    return BoardResponse(columns=columns, total=sum(len(column.jobs) for column in columns))


@router.get("/status-counts", response_model=StatusCountsResponse)
async def get_status_counts(user_id: str = Depends(get_user_id)):
    """
    Number of the user's job applications in each status
    """
    counts = count_by_status(load_user_jobs(user_id))
    return StatusCountsResponse(counts=counts, total=sum(counts.values()))
