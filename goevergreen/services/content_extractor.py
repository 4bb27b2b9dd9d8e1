# goevergreen/services/content_extractor.py
"""Turns a WordPress.com page into site content.

Sanitizing is an ordered table of independent regex rules. After the
branding is gone, the main content region is picked by trying a fixed list
of containers and keeping the first one that is long enough. The page's own
stylesheets are carried over so the content keeps its look.
"""
import html as html_lib
import logging
import re
from typing import Callable, Mapping, NamedTuple, Optional, Pattern, Sequence, Tuple

from goevergreen.config import settings
from goevergreen.content.fallback import (
    DEFAULT_DESCRIPTION,
    DEFAULT_TITLE,
    DESCRIPTION_OVERRIDES,
    TITLE_OVERRIDES,
)
from goevergreen.content.site_routes import UPSTREAM_SLUG_FIXES
from goevergreen.models.pages import PageContent

logger = logging.getLogger(__name__)

CONTAINER_MIN_LENGTH = 100
CONTENT_MIN_LENGTH = 50

_FLAGS = re.IGNORECASE

class SanitizeRule(NamedTuple):
    name: str
    pattern: Pattern[str]
    replacement: str = ""

    def apply(self, html: str) -> str:
        return self.pattern.sub(self.replacement, html)

def _rule(name: str, pattern: str, replacement: str = "") -> SanitizeRule:
    return SanitizeRule(name, re.compile(pattern, _FLAGS), replacement)

def build_sanitize_rules(
    domain: str,
    upstream_host: str,
    slug_fixes: Mapping[str, str] = UPSTREAM_SLUG_FIXES
) -> Tuple[SanitizeRule, ...]:
    """Build the ordered branding-removal rules for one site"""
    rules = [
        _rule("promo_banner", r"Design a site like this with WordPress\.com[\s\S]*?Get started"),
        _rule(
            "admin_bar",
            r"<div[^>]*(?:id|class)=[\"'][^\"']*\b(?:wpadminbar|actionbar|marketing-bar|wpcom-masterbar)\b"
            r"[^\"']*[\"'][^>]*>[\s\S]*?</div>"
        ),
        _rule("admin_scripts", r"<script[^>]*(?:admin-bar|wp-admin|wpcom-|actionbar)[^>]*>[\s\S]*?</script>"),
        _rule("admin_stylesheets", r"<link[^>]*(?:admin-bar|wp-admin|dashicons|login)[^>]*>"),
        _rule("admin_style_blocks", r"<style[^>]*(?:admin-bar|wp-admin|login)[^>]*>[\s\S]*?</style>"),
        _rule("subscription_forms", r"<form[^>]*subscribe[^>]*>[\s\S]*?</form>"),
        _rule("subscribe_widget_text", r"Subscribe\s*Subscribed"),
        _rule("account_prompt", r"Already have a WordPress\.com account\?[\s\S]*?Log in now\."),
        _rule("report_bar", r"Report this content[\s\S]*?Collapse this bar"),
        _rule("powered_by", r"(?:<a[^>]*>\s*)?(?:Powered by|Blog at)\s+WordPress\.com\.?(?:\s*</a>)?"),
        _rule("skip_link", r"<a[^>]*class=[\"'][^\"']*skip-link[^\"']*[\"'][^>]*>[\s\S]*?</a>"),
        _rule("skip_link_text", r"Skip to content"),
        _rule("upstream_origin", r"https?://" + re.escape(upstream_host), f"https://{domain}"),
        _rule("upstream_host", re.escape(upstream_host), domain),
    ]

    for typo, fixed in slug_fixes.items():
        rules.append(_rule(f"slug_{fixed}", r"/" + re.escape(typo) + r"\b", f"/{fixed}"))

    return tuple(rules)

def sanitize(html: str, rules: Sequence[SanitizeRule]) -> str:
    for rule in rules:
        html = rule.apply(html)
    return html

def _tag_contents(pattern: Pattern[str]) -> Callable[[str], Optional[str]]:
    def find(html: str) -> Optional[str]:
        match = pattern.search(html)
        return match.group(1) if match else None
    return find

_CONTENT_CLASS_DIV = re.compile(
    r"<div\b[^>]*class=[\"'][^\"']*\b(?:entry-content|post-content|page-content|site-content)\b"
    r"[^\"']*[\"'][^>]*>",
    _FLAGS
)
_DIV_TAG = re.compile(r"<(/?)div\b[^>]*>", _FLAGS)

def content_class_div(html: str) -> Optional[str]:
    """Inner HTML of the first content-class div, up to its own closing tag"""
    opening = _CONTENT_CLASS_DIV.search(html)
    if not opening:
        return None

    depth = 1
    for tag in _DIV_TAG.finditer(html, opening.end()):
        depth += -1 if tag.group(1) else 1
        if depth == 0:
            return html[opening.end():tag.start()]
    return None

# Tried in order; the first long-enough match wins.
CONTENT_CONTAINERS: Tuple[Tuple[str, Callable[[str], Optional[str]]], ...] = (
    ("main", _tag_contents(re.compile(r"<main\b[^>]*>([\s\S]*?)</main>", _FLAGS))),
    ("article", _tag_contents(re.compile(r"<article\b[^>]*>([\s\S]*?)</article>", _FLAGS))),
    ("content_class", content_class_div),
    ("body", _tag_contents(re.compile(r"<body\b[^>]*>([\s\S]*?)</body>", _FLAGS))),
)

_PAGE_CHROME = re.compile(r"<(header|footer|nav)\b[^>]*>[\s\S]*?</\1\s*>", _FLAGS)

def strip_page_chrome(fragment: str) -> str:
    return _PAGE_CHROME.sub("", fragment)

def select_main_content(html: str) -> Optional[str]:
    """Greedy first-match selection over CONTENT_CONTAINERS"""
    for name, find in CONTENT_CONTAINERS:
        inner = find(html)
        if inner is None:
            continue

        candidate = inner.strip()
        if len(candidate) <= CONTAINER_MIN_LENGTH:
            continue

        cleaned = strip_page_chrome(candidate).strip()
        if len(cleaned) > CONTENT_MIN_LENGTH:
            logger.debug(f"Main content taken from <{name}> ({len(cleaned)} chars)")
            return cleaned

    return None

_STYLESHEET_LINK = re.compile(r"<link\b[^>]*rel=[\"']?stylesheet[\"']?[^>]*>", _FLAGS)
_STYLE_BLOCK = re.compile(r"(<style\b[^>]*>)[\s\S]*?</style>", _FLAGS)
_ADMIN_STYLE_MARKER = re.compile(r"admin-bar|wp-admin|dashicons|login", _FLAGS)

def extract_styles(html: str) -> str:
    """Stylesheet links and inline style blocks, minus admin/login styling"""
    styles = [
        tag for tag in _STYLESHEET_LINK.findall(html)
        if not _ADMIN_STYLE_MARKER.search(tag)
    ]
    for match in _STYLE_BLOCK.finditer(html):
        if not _ADMIN_STYLE_MARKER.search(match.group(1)):
            styles.append(match.group(0))
    return "\n".join(styles)

_TITLE = re.compile(r"<title[^>]*>([^<]+)</title>", _FLAGS)
_META_DESCRIPTION = (
    re.compile(r"<meta[^>]+name=[\"']description[\"'][^>]+content=[\"']([^\"']*)[\"']", _FLAGS),
    re.compile(r"<meta[^>]+content=[\"']([^\"']*)[\"'][^>]+name=[\"']description[\"']", _FLAGS),
)

def _title_suffix_pattern(site_name: str) -> Pattern[str]:
    return re.compile(
        r"(?:\s*[-–—|]\s*(?:WordPress\.com|" + re.escape(site_name) + r"))+\s*$",
        _FLAGS
    )

class ContentExtractor:
    def __init__(
        self,
        rules: Sequence[SanitizeRule],
        title_overrides: Mapping[str, str] = TITLE_OVERRIDES,
        description_overrides: Mapping[str, str] = DESCRIPTION_OVERRIDES,
        site_name: str = "GoEvergreen"
    ):
        self.rules = tuple(rules)
        self.title_overrides = title_overrides
        self.description_overrides = description_overrides
        self.title_suffix = _title_suffix_pattern(site_name)

    def extract(self, html: str, route: str) -> Optional[PageContent]:
        """Extract {content, title, description}, or None if too little content survives"""
        if not html:
            return None

        cleaned = sanitize(html, self.rules)
        main_content = select_main_content(cleaned)

        if not main_content or len(main_content) < CONTENT_MIN_LENGTH:
            logger.warning(f"Insufficient content extracted for route '{route}'")
            return None

        styles = extract_styles(html)
        if styles:
            main_content = f"{styles}\n{main_content}"

        return PageContent(
            content=main_content,
            title=self.extract_title(html, route),
            description=self.extract_description(html, route),
            route=route
        )

    def extract_title(self, html: str, route: str) -> str:
        match = _TITLE.search(html)
        title = ""
        if match:
            title = self.title_suffix.sub("", html_lib.unescape(match.group(1))).strip()
        return self.title_overrides.get(route) or title or DEFAULT_TITLE

    def extract_description(self, html: str, route: str) -> str:
        description = ""
        for pattern in _META_DESCRIPTION:
            match = pattern.search(html)
            if match:
                description = html_lib.unescape(match.group(1)).strip()
                break
        return self.description_overrides.get(route) or description or DEFAULT_DESCRIPTION

content_extractor = ContentExtractor(
    rules=build_sanitize_rules(settings.domain, settings.upstream_host),
    site_name=settings.site_name
)
