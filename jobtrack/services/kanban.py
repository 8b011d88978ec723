"""Kanban board grouping of job applications by pipeline stage."""

import logging
from typing import Any, Dict, Iterable, List, Union

from jobtrack.schemas.job import (
    BoardCard,
    BoardColumn,
    JobApplication,
    JobStatus,
    STATUS_COLORS,
    STATUS_LABELS,
)
from jobtrack.utils.currency import format_salary_for_display

logger = logging.getLogger(__name__)

BOARD_STATUSES: List[JobStatus] = list(JobStatus)

JobLike = Union[JobApplication, Dict[str, Any]]


def _to_application(job: JobLike) -> JobApplication:
    if isinstance(job, JobApplication):
        return job
    return JobApplication(**job)


def to_board_card(job: JobLike) -> BoardCard:
    """Attach the display salary to a job application"""
    application = _to_application(job)
    return BoardCard(
        **application.model_dump(),
        salary_display=format_salary_for_display(application.salary, application.location),
    )


def build_board(jobs: Iterable[JobLike]) -> List[BoardColumn]:
    """
    Group job applications into one column per status.

    Columns always come back in board order, empty or not. Jobs keep their
    input order inside a column; a job whose status is not on the board is
    left out.
    """
    cards = [to_board_card(job) for job in jobs]

    columns = []
    for status in BOARD_STATUSES:
        status_cards = [card for card in cards if card.status == status.value]
        columns.append(BoardColumn(
            status=status,
            label=STATUS_LABELS[status],
            color=STATUS_COLORS[status],
            jobs=status_cards,
        ))

    placed = sum(len(column.jobs) for column in columns)
    if placed != len(cards):
        logger.warning("Dropped %d job(s) with a status not on the board", len(cards) - placed)

    return columns


def count_by_status(jobs: Iterable[JobLike]) -> Dict[JobStatus, int]:
    """Number of job applications in every status, zeros included"""
    counts = {status: 0 for status in BOARD_STATUSES}
    for job in jobs:
        status = _to_application(job).status
        try:
            counts[JobStatus(status)] += 1
        except ValueError:
            logger.debug("Ignoring unknown status %r", status)
    return counts
