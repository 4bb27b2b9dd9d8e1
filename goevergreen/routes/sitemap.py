# goevergreen/routes/sitemap.py
from datetime import datetime, timezone
from xml.sax.saxutils import escape

from fastapi import APIRouter, Response

from goevergreen.config import settings
from goevergreen.content.site_routes import sitemap_paths

router = APIRouter(tags=["sitemap"])

def build_sitemap(base_url: str) -> str:
    lastmod = datetime.now(timezone.utc).date().isoformat()
    entries = []
    for path in sitemap_paths():
        is_home = path == "/"
        entries.append(
            "  <url>\n"
            f"    <loc>{escape(base_url + path)}</loc>\n"
            f"    <lastmod>{lastmod}</lastmod>\n"
            f"    <changefreq>{'daily' if is_home else 'weekly'}</changefreq>\n"
            f"    <priority>{'1.0' if is_home else '0.8'}</priority>\n"
            "  </url>"
        )

    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
        + "\n".join(entries)
        + "\n</urlset>"
    )

@router.get("/sitemap.xml")
async def sitemap():
    return Response(
        content=build_sitemap(settings.site_url),
        media_type="application/xml",
        headers={"Cache-Control": "public, max-age=86400"}
    )
