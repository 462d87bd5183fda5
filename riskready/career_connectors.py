from __future__ import annotations

import logging
from urllib.parse import quote_plus

import requests

from riskready.config import Settings, load_settings
from riskready.models import SkillGap

log = logging.getLogger(__name__)

JSEARCH_HOST = "jsearch.p.rapidapi.com"
JSEARCH_URL = f"https://{JSEARCH_HOST}/search"

# (source, url template); templates receive the quoted role and location.
JOB_BOARDS = (
    ("LinkedIn", "https://www.linkedin.com/jobs/search/?keywords={role}&location={location}"),
    ("Indeed", "https://www.indeed.com/jobs?q={role}&l={location}"),
    ("Google Jobs", "https://www.google.com/search?q={role}+jobs+{location}"),
)

# (provider, title, url template); templates receive the quoted skill query.
TRAINING_PROVIDERS = (
    ("Coursera", "Risk and audit courses", "https://www.coursera.org/search?query={query}"),
    ("edX", "Professional certificates", "https://www.edx.org/search?q={query}"),
    ("Udemy", "Hands-on skill tracks", "https://www.udemy.com/courses/search/?q={query}"),
    ("The IIA", "Internal audit certifications", "https://www.theiia.org/en/certifications/"),
)

FALLBACK_TRAINING_TOPICS = ("risk management", "internal audit")


def build_job_search_links(role: str, location: str) -> list[dict[str, str]]:
    quoted = {"role": quote_plus(role), "location": quote_plus(location)}
    return [
        {"source": source, "title": f"{role} on {source}", "url": template.format(**quoted)}
        for source, template in JOB_BOARDS
    ]


def build_training_links(skill_gaps: list[SkillGap]) -> list[dict[str, str]]:
    topics = [gap.skill.replace("&", "and") for gap in skill_gaps[:3]] or list(FALLBACK_TRAINING_TOPICS)
    query = quote_plus(" ".join(topics))
    return [
        {"provider": provider, "title": title, "url": template.format(query=query)}
        for provider, title, template in TRAINING_PROVIDERS
    ]


def _listing_to_job(listing: dict) -> dict[str, str] | None:
    url = listing.get("job_apply_link") or listing.get("job_google_link")
    if not url:
        return None
    return {
        "source": (listing.get("job_publisher") or "").strip() or "Job Board",
        "title": listing.get("job_title", "Job opening"),
        "company": listing.get("employer_name", "Unknown"),
        "location": listing.get("job_city") or listing.get("job_country") or "",
        "url": url,
    }


def fetch_live_jobs(
    role: str,
    location: str,
    max_results: int = 8,
    settings: Settings | None = None,
) -> list[dict[str, str]]:
    """Query JSearch for live listings; empty when unconfigured or on failure."""
    settings = settings or load_settings()
    if not (settings.rapidapi_key and settings.live_jobs_enabled):
        return []

    try:
        response = requests.get(
            JSEARCH_URL,
            headers={"X-RapidAPI-Key": settings.rapidapi_key, "X-RapidAPI-Host": JSEARCH_HOST},
            params={"query": f"{role} in {location}", "page": "1", "num_pages": "1"},
            timeout=12,
        )
        response.raise_for_status()
        listings = response.json().get("data", [])
    except (requests.RequestException, ValueError) as exc:
        log.warning("Live job search failed for %r: %s", role, exc)
        return []

    jobs = [job for job in map(_listing_to_job, listings[:max_results]) if job]
    log.debug("Fetched %d live listings for %r", len(jobs), role)
    return jobs
