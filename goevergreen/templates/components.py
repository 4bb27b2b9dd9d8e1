# goevergreen/templates/components.py
import html
from datetime import datetime, timezone

from goevergreen.config import Settings
from goevergreen.content.site_routes import NAV_LINKS

def escape_html(text: str) -> str:
    """Escape &, <, >, " and ' for use in text and attribute values"""
    return html.escape(text or "", quote=True)

def render_header(pathname: str, settings: Settings) -> str:
    current_path = pathname.rstrip("/") or "/"
    items = []
    for href, label in NAV_LINKS:
        is_current = current_path == href
        items.append(
            f'<li><a href="{href}" class="nav-link{" active" if is_current else ""}" '
            f'aria-current="{"page" if is_current else "false"}">{label}</a></li>'
        )
    nav_items = "\n                    ".join(items)

    return f"""
    <header class="site-header">
        <div class="header-container">
            <div class="logo-section">
                <a href="/" class="logo-link">
                    <img src="/assets/logo.jpg" alt="{escape_html(settings.site_name)} Logo" class="logo" loading="eager">
                    <span class="site-title">{escape_html(settings.site_name)}</span>
                </a>
            </div>
            <nav class="main-navigation" role="navigation" aria-label="Main menu">
                <button class="mobile-menu-toggle" aria-label="Toggle mobile menu" aria-expanded="false" id="mobileMenuToggle">
                    <span></span>
                    <span></span>
                    <span></span>
                </button>
                <ul class="nav-menu" id="navMenu">
                    {nav_items}
                </ul>
            </nav>
            <div class="header-cta">
                <a href="#newsletter" class="cta-button" aria-label="Subscribe to newsletter">Get Expert Guidance</a>
            </div>
        </div>
    </header>"""

def render_newsletter_section() -> str:
    return """
    <section id="newsletter" class="newsletter-section">
        <div class="newsletter-container">
            <h2>Subscribe for Expert Wellness Guidance</h2>
            <p>Get personalized health tips, workout routines, and nutrition advice delivered to your inbox.</p>
            <form class="newsletter-form" id="newsletterForm" action="/newsletter/subscribe" method="post">
                <input type="email" name="email" placeholder="Enter your email" required maxlength="255" aria-label="Email address">
                <input type="text" name="name" placeholder="Your name (optional)" maxlength="100" aria-label="Your name">
                <button type="submit">Subscribe Now</button>
            </form>
            <div id="newsletter-message" class="form-message" role="alert"></div>
            <div id="newsletter-success" class="newsletter-success" hidden>
                <h3>&#127807; You're subscribed!</h3>
                <p>Thank you for joining our wellness community. Expert tips are on their way to your inbox.</p>
            </div>
        </div>
    </section>"""

def render_footer(settings: Settings) -> str:
    contact_email = escape_html(settings.contact_email)
    site_name = escape_html(settings.site_name)
    site_url = escape_html(settings.site_url)
    year = datetime.now(timezone.utc).year

    return f"""
    <footer class="site-footer">
        <div class="footer-container">
            <div class="footer-section">
                <h3>&#127807; {site_name}</h3>
                <p>Empowering women with premium wellness guidance and health solutions.</p>
            </div>

            <div class="footer-section">
                <h4>Wellness Resources</h4>
                <ul>
                    <li><a href="/wellness-guides">Wellness Guides</a></li>
                    <li><a href="/benefits-of-exercises">Exercise Benefits</a></li>
                    <li><a href="/blog">Health Blog</a></li>
                    <li><a href="/reviews">Customer Reviews</a></li>
                </ul>
            </div>

            <div class="footer-section">
                <h4>Support &amp; Information</h4>
                <ul>
                    <li><a href="/about">About Us</a></li>
                    <li><a href="/contact-us">Contact Support</a></li>
                    <li><a href="/privacy-policy">Privacy Policy</a></li>
                    <li><a href="/donate">Support Our Mission</a></li>
                </ul>
            </div>

            <div class="footer-section">
                <h4>Connect With Us</h4>
                <div class="contact-info">
                    <p><strong>Email:</strong> <a href="mailto:{contact_email}">{contact_email}</a></p>
                    <p><strong>Website:</strong> <a href="{site_url}">{site_url}</a></p>
                </div>
            </div>
        </div>

        <div class="footer-bottom">
            <div class="footer-bottom-content">
                <p>&copy; {year} {site_name}. All rights reserved.</p>
                <div class="footer-links">
                    <a href="/privacy-policy">Privacy Policy</a>
                    <a href="/contact-us">Contact</a>
                    <a href="/sitemap.xml">Sitemap</a>
                </div>
            </div>
        </div>
    </footer>"""
