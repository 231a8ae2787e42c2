"""UTM tracking labels.

Labels are plain dicts keyed by the UTM query parameter names, always in
``UTM_PARAMS`` order so the query strings built from them are stable.
"""

from __future__ import annotations

from typing import Any

from django.utils.http import urlencode

from storefront.apps.shop.environment import RequestEnvironment

PARAM_UTM_SOURCE = "utm_source"
PARAM_UTM_MEDIUM = "utm_medium"
PARAM_UTM_CAMPAIGN = "utm_campaign"
PARAM_UTM_CONTENT = "utm_content"
PARAM_UTM_TERM = "utm_term"
PARAM_UTM_REFERRER = "utm_referrer"

UTM_PARAMS = (
    PARAM_UTM_SOURCE,
    PARAM_UTM_MEDIUM,
    PARAM_UTM_CAMPAIGN,
    PARAM_UTM_CONTENT,
    PARAM_UTM_TERM,
    PARAM_UTM_REFERRER,
)


def build_utm_labels(
    source: str | None,
    medium: str | None,
    campaign: str | None = None,
    content: str | None = None,
    term: str | None = None,
    referrer: str | None = None,
) -> dict[str, str | None]:
    """Return all six UTM labels, empty ones included.

    Args:
        source: Where the traffic comes from (e.g. google, newsletter)
        medium: Marketing medium (e.g. cpc, banner, email)
        campaign: Campaign name, e.g. a product, promo code or slogan (spring_sale)
        content: Differentiates ads or links pointing to the same URL
        term: Paid keywords
        referrer: Extra referrer so analytics can attribute clicks that went
            through a JavaScript redirect or an HTTPS to HTTP hop

    Use ``utm_labels_to_query`` to turn the result into a query string.
    """
    return dict(zip(UTM_PARAMS, (source, medium, campaign, content, term, referrer), strict=True))


def is_blank(value: Any) -> bool:
    # "0" is blank too, not only falsy values
    return not value or value == "0"


def filter_utm_labels(labels: dict[str, Any]) -> dict[str, Any]:
    """Drop labels with blank values, keeping order."""
    return {key: value for key, value in labels.items() if not is_blank(value)}


def utm_labels_to_query(labels: dict[str, Any]) -> str:
    """Return the URL-encoded query string for the non-blank labels."""
    return urlencode(filter_utm_labels(labels))


def utm_labels_from_request(env: RequestEnvironment) -> dict[str, str]:
    """Return the UTM labels present (and non-blank) in the request's query string."""
    labels = build_utm_labels("", "")
    for key in labels:
        labels[key] = env.param(key)
    return filter_utm_labels(labels)
