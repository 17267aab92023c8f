"""JobPosting and job-listing JSON-LD builders."""

import logging
import re
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from seo_tools.errors import ValidationError
from seo_tools.models.job_posting import EmploymentType, JobPostingOptions
from seo_tools.services.normalizer import format_iso8601
from seo_tools.services.options import parse_options
from seo_tools.services.sanitizer import strip_html_tags

logger = logging.getLogger(__name__)

_CONTEXT = "https://schema.org"

# Checked in this order; the first missing one is reported
_REQUIRED_FIELDS = ("title", "description", "company_name", "location", "url")

_EMPLOYMENT_TYPES = {
    EmploymentType.FULL_TIME: "FULL_TIME",
    EmploymentType.PART_TIME: "PART_TIME",
    EmploymentType.CONTRACT: "CONTRACT",
    EmploymentType.TEMPORARY: "TEMPORARY",
    EmploymentType.INTERN: "INTERN",
    EmploymentType.VOLUNTEER: "VOLUNTEER",
    EmploymentType.PER_DIEM: "PER_DIEM",
    EmploymentType.OTHER: "OTHER",
}
_DEFAULT_EMPLOYMENT_TYPE = "FULL_TIME"

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")

JobPostingInput = Union[JobPostingOptions, Mapping[str, Any]]


def employment_type_token(value: Union[EmploymentType, str, None]) -> str:
    """Map an employment type to its schema.org token.

    Accepts :class:`EmploymentType` members and their string values in
    snake_case (``"part_time"``) or camelCase (``"partTime"``).  Anything
    else, including ``None``, maps to ``"FULL_TIME"``.
    """
    if value is None:
        return _DEFAULT_EMPLOYMENT_TYPE
    raw = value.value if isinstance(value, EmploymentType) else str(value)
    key = _CAMEL_BOUNDARY_RE.sub("_", raw).lower()
    try:
        return _EMPLOYMENT_TYPES[EmploymentType(key)]
    except ValueError:
        logger.debug("Unknown employment type %r, using %s", value, _DEFAULT_EMPLOYMENT_TYPE)
        return _DEFAULT_EMPLOYMENT_TYPE


def _require_fields(opts: JobPostingOptions) -> None:
    for field in _REQUIRED_FIELDS:
        if getattr(opts, field) in (None, ""):
            raise ValidationError(f"{field} is required for job_posting")


def _hiring_organization(opts: JobPostingOptions) -> Dict[str, Any]:
    org: Dict[str, Any] = {"@type": "Organization", "name": opts.company_name}
    if opts.company_logo:
        org["logo"] = opts.company_logo
    if opts.company_url:
        org["sameAs"] = opts.company_url
    return org


def _base_salary(opts: JobPostingOptions) -> Optional[Dict[str, Any]]:
    if opts.salary_min is None and opts.salary_max is None:
        return None

    if opts.salary_min is not None and opts.salary_max is not None:
        value: Any = {
            "@type": "QuantitativeValue",
            "minValue": opts.salary_min,
            "maxValue": opts.salary_max,
            "unitText": "MONTH",
        }
    else:
        # A single bound is emitted bare, not wrapped in a QuantitativeValue
        value = opts.salary_min if opts.salary_min is not None else opts.salary_max

    return {
        "@type": "MonetaryAmount",
        "currency": opts.salary_currency,
        "value": value,
    }


def _application_contact(opts: JobPostingOptions) -> Optional[Dict[str, Any]]:
    if opts.application_url:
        return {"@type": "ContactPoint", "url": opts.application_url}
    if opts.application_email:
        return {"@type": "ContactPoint", "email": opts.application_email}
    return None


def job_posting(opts: JobPostingInput) -> Dict[str, Any]:
    """Build a schema.org ``JobPosting`` object.

    The description is stripped of HTML tags but never truncated.  Optional
    fields are only emitted when set.

    Raises:
        ValidationError: naming the first missing required field
            (title, description, company_name, location, url).
        ConfigurationError: when a mapping carries unknown keys.
    """
    opts = parse_options(JobPostingOptions, opts, "job_posting")
    _require_fields(opts)

    schema: Dict[str, Any] = {
        "@context": _CONTEXT,
        "@type": "JobPosting",
        "title": opts.title,
        "description": strip_html_tags(opts.description),
        "url": opts.url,
        "employmentType": employment_type_token(opts.employment_type),
        "hiringOrganization": _hiring_organization(opts),
        "jobLocation": {
            "@type": "Place",
            "address": {
                "@type": "PostalAddress",
                "addressLocality": opts.location,
                "addressCountry": opts.country,
            },
        },
    }

    if opts.posted_date is not None:
        schema["datePosted"] = format_iso8601(opts.posted_date)
    if opts.expiry_date is not None:
        schema["validThrough"] = format_iso8601(opts.expiry_date)
    if opts.remote_allowed:
        schema["jobLocationType"] = "TELECOMMUTE"

    salary = _base_salary(opts)
    if salary is not None:
        schema["baseSalary"] = salary

    contact = _application_contact(opts)
    if contact is not None:
        schema["applicationContact"] = contact

    return schema


def job_postings_list(entries: Iterable[JobPostingInput]) -> Dict[str, Any]:
    """Build a schema.org ``ItemList`` of job postings.

    Every entry goes through :func:`job_posting`, so the same validation and
    defaults apply.  Each item gets an ``@id`` equal to its ``url``.
    """
    elements = []
    for position, entry in enumerate(entries, start=1):
        item = job_posting(entry)
        item.setdefault("@id", item["url"])
        elements.append({"@type": "ListItem", "position": position, "item": item})

    logger.debug("Built job posting list with %d items", len(elements))

    return {
        "@context": _CONTEXT,
        "@type": "ItemList",
        "itemListElement": elements,
    }
