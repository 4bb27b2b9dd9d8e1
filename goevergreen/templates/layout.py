# goevergreen/templates/layout.py
import json
import re
from typing import Dict

from fastapi.responses import HTMLResponse

from goevergreen.config import Settings
from goevergreen.models.pages import PageContent
from goevergreen.templates.components import (
    escape_html,
    render_footer,
    render_header,
    render_newsletter_section,
)
from goevergreen.templates.static_assets import SITE_CSS, SITE_JS

SECURITY_HEADERS: Dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "X-XSS-Protection": "1; mode=block",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}

PAGE_HEADERS: Dict[str, str] = {
    "Cache-Control": "public, max-age=300, s-maxage=3600",
    **SECURITY_HEADERS,
}

NO_CACHE_HEADERS: Dict[str, str] = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
    **SECURITY_HEADERS,
}

def _structured_data(description: str, settings: Settings) -> str:
    data = {
        "@context": "https://schema.org",
        "@type": "HealthAndBeautyBusiness",
        "name": settings.site_name,
        "description": description,
        "url": settings.site_url,
        "logo": f"{settings.site_url}/assets/logo.jpg",
        "contactPoint": {
            "@type": "ContactPoint",
            "email": settings.contact_email,
            "contactType": "customer support",
        },
    }
    return json.dumps(data, indent=2).replace("</", "<\\/")

def render_page(page: PageContent, pathname: str, settings: Settings) -> str:
    """Wrap sanitized content in the full site document"""
    title = escape_html(page.title)
    description = escape_html(page.description)
    page_url = escape_html(f"{settings.site_url}{pathname}")
    image_url = escape_html(f"{settings.site_url}/assets/logo.jpg")
    site_name = escape_html(settings.site_name)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <meta name="description" content="{description}">
    <meta name="robots" content="index, follow">
    <meta name="author" content="{site_name}">

    <meta property="og:title" content="{title}">
    <meta property="og:description" content="{description}">
    <meta property="og:type" content="website">
    <meta property="og:url" content="{page_url}">
    <meta property="og:image" content="{image_url}">
    <meta property="og:site_name" content="{site_name}">

    <meta name="twitter:card" content="summary_large_image">
    <meta name="twitter:title" content="{title}">
    <meta name="twitter:description" content="{description}">
    <meta name="twitter:image" content="{image_url}">

    <script type="application/ld+json">
{_structured_data(page.description, settings)}
    </script>

    <title>{title}</title>

    <link rel="icon" type="image/x-icon" href="/assets/favicon.ico">
    <link rel="apple-touch-icon" href="/assets/logo.jpg">
    <link rel="canonical" href="{page_url}">

    <style>
{SITE_CSS}
    </style>
</head>
<body>
{render_header(pathname, settings)}

    <main class="main-content">
        <div class="content-container">
            {page.content}
        </div>
    </main>
{render_newsletter_section()}
{render_footer(settings)}

    <script>
{SITE_JS}
    </script>
</body>
</html>"""

def build_page_response(page: PageContent, pathname: str, settings: Settings) -> HTMLResponse:
    return HTMLResponse(
        content=render_page(page, pathname, settings),
        headers=PAGE_HEADERS
    )

_HEAD_TITLE = re.compile(r"<title[^>]*>[\s\S]*?</title>", re.IGNORECASE)
_HEAD_ASSETS = re.compile(
    r"<link\b[^>]*rel=[\"']?stylesheet[\"']?[^>]*>"
    r"|<style\b[^>]*>[\s\S]*?</style>"
    r"|<script\b[^>]*>[\s\S]*?</script>",
    re.IGNORECASE
)
_HEAD = re.compile(r"<head\b[^>]*>([\s\S]*?)</head>", re.IGNORECASE)
_BODY = re.compile(r"(<body\b[^>]*>[\s\S]*?</body>)", re.IGNORECASE)

def render_minimal_page(upstream_html: str) -> str:
    """Upstream document with only its own title, styles and scripts in the head.

    Administrative pages keep their markup untouched; forms on them carry
    tokens bound to the exact upstream markup.
    """
    head_match = _HEAD.search(upstream_html)
    head = head_match.group(1) if head_match else ""

    title_match = _HEAD_TITLE.search(head)
    head_tags = [title_match.group(0)] if title_match else []
    head_tags.extend(match.group(0) for match in _HEAD_ASSETS.finditer(head))

    body_match = _BODY.search(upstream_html)
    body = body_match.group(1) if body_match else f"<body>{upstream_html}</body>"

    head_html = "\n    ".join(head_tags)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <meta name="robots" content="noindex, nofollow">
    {head_html}
</head>
{body}
</html>"""

def build_minimal_response(upstream_html: str) -> HTMLResponse:
    return HTMLResponse(
        content=render_minimal_page(upstream_html),
        headers=NO_CACHE_HEADERS
    )
