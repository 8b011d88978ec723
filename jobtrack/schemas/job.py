from pydantic import BaseModel, Field
from typing import Optional, List, Dict
from datetime import datetime
from enum import Enum


class JobStatus(str, Enum):
    """Pipeline stage of a job application, in kanban column order"""
    SAVED = "saved"
    APPLIED = "applied"
    INTERVIEW = "interview"
    OFFER = "offer"
    REJECTED = "rejected"


STATUS_LABELS: Dict[JobStatus, str] = {
    JobStatus.SAVED: "Saved",
    JobStatus.APPLIED: "Applied",
    JobStatus.INTERVIEW: "Interview",
    JobStatus.OFFER: "Offer",
    JobStatus.REJECTED: "Rejected",
}

STATUS_COLORS: Dict[JobStatus, str] = {
    JobStatus.SAVED: "bg-gray-500",
    JobStatus.APPLIED: "bg-blue-500",
    JobStatus.INTERVIEW: "bg-yellow-500",
    JobStatus.OFFER: "bg-green-500",
    JobStatus.REJECTED: "bg-red-500",
}


class Contact(BaseModel):
    name: str
    email: str
    phone: Optional[str] = None
    position: Optional[str] = None


class JobEvent(BaseModel):
    date: str
    title: str
    description: Optional[str] = None


class JobApplication(BaseModel):
    """Job application as stored in the job_applications table"""
    id: str
    company: str
    position: str
    location: Optional[str] = None
    status: str
    applied_date: Optional[datetime] = None
    last_updated: Optional[datetime] = None
    logo: Optional[str] = None
    company_website: Optional[str] = None
    salary: Optional[str] = None
    job_description: Optional[str] = None
    notes: List[str] = Field(default_factory=list)
    contacts: List[Contact] = Field(default_factory=list)
    events: List[JobEvent] = Field(default_factory=list)
    external_id: Optional[str] = None
    external_url: Optional[str] = None
    external_platform: Optional[str] = None

    model_config = {"extra": "ignore"}


class BoardCard(JobApplication):
    """Job application rendered on the kanban board"""
    salary_display: str


class BoardColumn(BaseModel):
    status: JobStatus
    label: str
    color: str
    jobs: List[BoardCard] = Field(default_factory=list)


class BoardResponse(BaseModel):
    columns: List[BoardColumn]
    total: int


class StatusCountsResponse(BaseModel):
    counts: Dict[JobStatus, int]
    total: int


class CurrencyResponse(BaseModel):
    """Currency shown next to a job's salary"""
    location: Optional[str] = None
    symbol: str
    icon: str


class LocaleCurrencyResponse(BaseModel):
    locale: Optional[str] = None
    timezone: Optional[str] = None
    code: str
    symbol: str
    icon: str


class SalaryDisplayResponse(BaseModel):
    display: str
