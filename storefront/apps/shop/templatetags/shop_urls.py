"""Template access to the shop URL helpers.

Usage:
    {% load shop_urls %}
    <a href="{% upload_url %}logo.png?{% utm_query "newsletter" "email" campaign="spring_sale" %}">
    {% shop_domain append_protocol=True %}
"""

from django import template

from storefront.apps.shop.context import ShopContext
from storefront.apps.shop.environment import RequestEnvironment
from storefront.apps.shop.url_helper import RequestUrlHelper
from storefront.apps.shop.utm import build_utm_labels, utm_labels_to_query

register = template.Library()


def _helper(context) -> RequestUrlHelper:
    request = context.get("request")
    if request is None:
        return RequestUrlHelper(RequestEnvironment(), ShopContext.from_settings())
    helper = getattr(request, "url_helper", None)
    if helper is None:
        helper = RequestUrlHelper.for_request(request)
    return helper


@register.simple_tag
def utm_query(source, medium, campaign=None, content=None, term=None, referrer=None):
    """Render the URL-encoded UTM query string; blank labels are left out."""
    return utm_labels_to_query(build_utm_labels(source, medium, campaign, content, term, referrer))


@register.simple_tag(takes_context=True)
def shop_domain(context, append_protocol=False):
    # May come from X-Forwarded-Host: left to autoescaping, which also escapes quotes
    return _helper(context).get_shop_domain(append_protocol=append_protocol)


@register.simple_tag(takes_context=True)
def upload_url(context):
    return _helper(context).get_upload_url()


@register.simple_tag(takes_context=True)
def download_url(context):
    return _helper(context).get_download_url()
