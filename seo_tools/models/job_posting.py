from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict

from seo_tools.models.page import DateLike


class EmploymentType(str, Enum):
    FULL_TIME = "full_time"
    PART_TIME = "part_time"
    CONTRACT = "contract"
    TEMPORARY = "temporary"
    INTERN = "intern"
    VOLUNTEER = "volunteer"
    PER_DIEM = "per_diem"
    OTHER = "other"


class JobPostingOptions(BaseModel):
    """Input to :func:`~seo_tools.services.jobs.job_posting`.

    ``title``, ``description``, ``company_name``, ``location`` and ``url`` are
    required, but they are declared optional here: the builder checks them
    itself, in that order, so the error always names the first missing field.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    title: Optional[str] = None
    description: Optional[str] = None
    company_name: Optional[str] = None
    location: Optional[str] = None
    url: Optional[str] = None

    country: str = "SE"
    company_logo: Optional[str] = None
    company_url: Optional[str] = None
    posted_date: Optional[DateLike] = None
    expiry_date: Optional[DateLike] = None
    # Unrecognised values fall back to FULL_TIME instead of failing
    employment_type: Optional[Union[EmploymentType, str]] = None
    remote_allowed: bool = False

    salary_min: Optional[Union[int, float]] = None
    salary_max: Optional[Union[int, float]] = None
    salary_currency: str = "USD"

    application_url: Optional[str] = None
    application_email: Optional[str] = None
