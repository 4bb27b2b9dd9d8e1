# goevergreen/templates/errors.py
from datetime import datetime, timezone

from fastapi.responses import HTMLResponse

from goevergreen.config import Settings
from goevergreen.templates.components import escape_html
from goevergreen.templates.layout import NO_CACHE_HEADERS

def render_error_page(message: str, status_code: int, settings: Settings) -> str:
    site_name = escape_html(settings.site_name)
    contact_email = escape_html(settings.contact_email)
    timestamp = datetime.now(timezone.utc).isoformat(timespec="seconds")

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <meta name="robots" content="noindex">
    <title>{site_name} - Service Issue</title>
    <style>
        body {{
            font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
            background: linear-gradient(135deg, #e8f5e8 0%, #d4e7d4 100%);
            margin: 0;
            min-height: 100vh;
            display: flex;
            align-items: center;
            justify-content: center;
        }}
        .error-container {{
            background: white;
            padding: 3rem;
            border-radius: 15px;
            box-shadow: 0 10px 30px rgba(122, 155, 142, 0.2);
            text-align: center;
            max-width: 500px;
            margin: 2rem;
        }}
        .logo {{ font-size: 3rem; margin-bottom: 1rem; }}
        h1 {{ color: #7a9b8e; font-size: 2rem; margin-bottom: 1rem; }}
        p {{ color: #5a6b5d; font-size: 1.1rem; line-height: 1.6; margin-bottom: 2rem; }}
        .contact-link {{
            background: #7a9b8e;
            color: white;
            padding: 1rem 2rem;
            border-radius: 25px;
            text-decoration: none;
            font-weight: 600;
            display: inline-block;
        }}
        .error-code {{ color: #999; font-size: 0.9rem; margin-top: 2rem; }}
    </style>
</head>
<body>
    <div class="error-container">
        <div class="logo">&#127807;</div>
        <h1>{site_name}</h1>
        <p>{escape_html(message)}</p>
        <p>We're working to resolve this issue quickly. Thank you for your patience.</p>
        <a href="/" class="contact-link">Back to Home</a>
        <p><a href="mailto:{contact_email}">Contact Support</a></p>
        <div class="error-code">Error {status_code} - {timestamp}</div>
    </div>
</body>
</html>"""

def build_error_response(message: str, status_code: int, settings: Settings) -> HTMLResponse:
    return HTMLResponse(
        content=render_error_page(message, status_code, settings),
        status_code=status_code,
        headers=NO_CACHE_HEADERS
    )
