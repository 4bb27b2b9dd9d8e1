# goevergreen/content/site_routes.py
from types import MappingProxyType
from typing import NamedTuple, Tuple

HOME_ROUTE = "home"

class SiteRoute(NamedTuple):
    path: str
    name: str
    upstream_slug: str

# Public path -> logical route. Two upstream slugs carry typos on WordPress.com.
ROUTE_TABLE: Tuple[SiteRoute, ...] = (
    SiteRoute("/", HOME_ROUTE, ""),
    SiteRoute("/wellness-guides", "wellness-guides", "wellness-guides"),
    SiteRoute("/privacy-policy", "privacy-policy", "privay-policy"),
    SiteRoute("/donate", "donate", "donate"),
    SiteRoute("/contact-us", "contact-us", "contact-us"),
    SiteRoute("/benefits-of-exercises", "benefits-of-exercises", "benefits-of-exercises"),
    SiteRoute("/about", "about", "about"),
    SiteRoute("/blog", "blog", "blog"),
    SiteRoute("/reviews", "reviews", "reveiws"),
    SiteRoute("/newsletter/subscribe", "newsletter-subscribe", "newsletter-subscribe"),
    SiteRoute("/sitemap.xml", "sitemap", "sitemap"),
)

ROUTES_BY_PATH = MappingProxyType({route.path: route for route in ROUTE_TABLE})

# Upstream slug typos and the public slug they should be rewritten to
UPSTREAM_SLUG_FIXES = MappingProxyType({
    route.upstream_slug: route.name
    for route in ROUTE_TABLE
    if route.upstream_slug and route.upstream_slug != route.name
})

# Administrative pages that are proxied as-is, without the site chrome
PASSTHROUGH_PREFIXES: Tuple[str, ...] = ("/wp-admin", "/wp-login.php", "/my-account")

NAV_LINKS: Tuple[Tuple[str, str], ...] = (
    ("/", "Home"),
    ("/wellness-guides", "Wellness Guides"),
    ("/benefits-of-exercises", "Exercise Benefits"),
    ("/blog", "Blog"),
    ("/reviews", "Reviews"),
    ("/about", "About"),
    ("/contact-us", "Contact"),
)

def resolve_route(pathname: str) -> SiteRoute:
    """Map a request path to its logical route.

    Unknown paths resolve to the home route rather than a 404, so any
    unmapped URL renders home content under its own address.
    """
    normalized = pathname.rstrip("/") or "/"
    return ROUTES_BY_PATH.get(normalized, ROUTES_BY_PATH["/"])

def is_passthrough_path(pathname: str) -> bool:
    return any(pathname == prefix or pathname.startswith(prefix + "/")
               for prefix in PASSTHROUGH_PREFIXES)

def sitemap_paths() -> Tuple[str, ...]:
    return tuple(
        route.path for route in ROUTE_TABLE
        if "newsletter" not in route.path and "sitemap" not in route.path
    )
