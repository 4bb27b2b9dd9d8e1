# goevergreen/content/fallback.py
"""Hand-authored page content served when the WordPress.com origin is unreachable
or returns too little usable content, plus the static SEO titles and
descriptions that take precedence over whatever the origin provides."""
from types import MappingProxyType

from goevergreen.content.site_routes import HOME_ROUTE
from goevergreen.models.pages import PageContent

DEFAULT_TITLE = "GoEvergreen - Wellness & Health"
DEFAULT_DESCRIPTION = "GoEvergreen - Premium wellness and health guidance for women"

TITLE_OVERRIDES = MappingProxyType({
    "home": "GoEvergreen - Premium Wellness & Health Guidance for Women",
    "wellness-guides": "Comprehensive Wellness Guides - GoEvergreen",
    "benefits-of-exercises": "Exercise Benefits & Fitness Tips - GoEvergreen",
    "about": "About GoEvergreen - Your Wellness Journey Partner",
    "blog": "Health & Wellness Blog - GoEvergreen",
    "reviews": "Customer Reviews & Testimonials - GoEvergreen",
    "contact-us": "Contact GoEvergreen - Get Expert Wellness Support",
    "donate": "Support GoEvergreen - Help Us Spread Wellness",
    "privacy-policy": "Privacy Policy - GoEvergreen",
})

DESCRIPTION_OVERRIDES = MappingProxyType({
    "home": "Discover premium wellness solutions, health guidance, and fitness tips designed specifically for women. Join thousands who trust GoEvergreen for their wellness journey.",
    "wellness-guides": "Explore our comprehensive wellness guides covering nutrition, mental health, fitness, and holistic living. Expert advice for your complete well-being.",
    "benefits-of-exercises": "Learn about the incredible benefits of exercise for women's health, including weight management, mental clarity, and disease prevention.",
    "about": "Learn about GoEvergreen's mission to empower women with science-based wellness knowledge and personalized health guidance.",
    "blog": "Stay updated with the latest wellness trends, health research, and expert tips from our team of certified wellness professionals.",
    "reviews": "Read authentic reviews from women who transformed their health and wellness journey with GoEvergreen's guidance and support.",
    "contact-us": "Get in touch with our wellness experts. We're here to support your health journey with personalized guidance and care.",
    "donate": "Support our mission to make premium wellness knowledge accessible to all women. Your contribution helps us reach more lives.",
    "privacy-policy": "Learn how GoEvergreen protects your privacy and personal information. We're committed to your data security and transparency.",
})

_FALLBACK_PAGES = MappingProxyType({
    "home": PageContent(
        route="home",
        from_fallback=True,
        title=TITLE_OVERRIDES["home"],
        description="Discover premium wellness solutions, health guidance, and fitness tips designed specifically for women.",
        content="""
        <div class="hero-section">
          <h1>Welcome to GoEvergreen</h1>
          <p>Your premium destination for wellness, health, and fitness guidance designed specifically for women.</p>
          <div class="cta-buttons">
            <a href="/wellness-guides" class="btn btn-primary">Explore Wellness Guides</a>
            <a href="/benefits-of-exercises" class="btn btn-secondary">Fitness Benefits</a>
          </div>
        </div>

        <section class="features">
          <div class="feature">
            <h3>&#127807; Holistic Wellness</h3>
            <p>Comprehensive guides covering nutrition, mental health, and lifestyle optimization.</p>
          </div>
          <div class="feature">
            <h3>&#128170; Fitness Excellence</h3>
            <p>Expert exercise routines and fitness strategies tailored for women's unique needs.</p>
          </div>
          <div class="feature">
            <h3>&#129504; Mental Clarity</h3>
            <p>Mindfulness practices and stress management techniques for balanced living.</p>
          </div>
        </section>
        """,
    ),
    "wellness-guides": PageContent(
        route="wellness-guides",
        from_fallback=True,
        title=TITLE_OVERRIDES["wellness-guides"],
        description="Explore our comprehensive wellness guides covering nutrition, mental health, fitness, and holistic living.",
        content="""
        <h1>Comprehensive Wellness Guides</h1>
        <p>Explore our expertly crafted wellness guides designed to support your journey to optimal health.</p>

        <div class="guide-grid">
          <div class="guide-card">
            <h3>Nutrition Mastery</h3>
            <p>Learn the fundamentals of healthy eating, meal planning, and nutritional balance.</p>
          </div>
          <div class="guide-card">
            <h3>Mental Wellness</h3>
            <p>Discover strategies for stress management, mindfulness, and emotional well-being.</p>
          </div>
          <div class="guide-card">
            <h3>Fitness Foundation</h3>
            <p>Build strength, flexibility, and endurance with our comprehensive fitness programs.</p>
          </div>
          <div class="guide-card">
            <h3>Sleep Optimization</h3>
            <p>Master the art of quality sleep for better recovery and overall health.</p>
          </div>
        </div>
        """,
    ),
    "benefits-of-exercises": PageContent(
        route="benefits-of-exercises",
        from_fallback=True,
        title=TITLE_OVERRIDES["benefits-of-exercises"],
        description=DESCRIPTION_OVERRIDES["benefits-of-exercises"],
        content="""
        <h1>The Benefits of Regular Exercise</h1>
        <p>Movement is one of the most powerful tools for long-term health. A few minutes a day adds up.</p>

        <div class="guide-grid">
          <div class="guide-card">
            <h3>Stronger Heart</h3>
            <p>Regular cardio improves circulation, lowers blood pressure, and supports heart health.</p>
          </div>
          <div class="guide-card">
            <h3>Clearer Mind</h3>
            <p>Exercise releases endorphins that reduce stress and improve focus and mood.</p>
          </div>
          <div class="guide-card">
            <h3>Healthy Weight</h3>
            <p>Combining strength and cardio training helps maintain a healthy metabolism.</p>
          </div>
        </div>
        """,
    ),
    "about": PageContent(
        route="about",
        from_fallback=True,
        title=TITLE_OVERRIDES["about"],
        description=DESCRIPTION_OVERRIDES["about"],
        content="""
        <h1>About GoEvergreen</h1>
        <p>GoEvergreen empowers women with science-based wellness knowledge and practical,
        personalized health guidance.</p>
        <p>Our guides cover nutrition, fitness, sleep, and mental well-being, written to help you
        build habits that last.</p>
        """,
    ),
    "contact-us": PageContent(
        route="contact-us",
        from_fallback=True,
        title=TITLE_OVERRIDES["contact-us"],
        description=DESCRIPTION_OVERRIDES["contact-us"],
        content="""
        <h1>Contact Us</h1>
        <p>Have a question about your wellness journey? We'd love to hear from you.</p>
        <p>Email us at <a href="mailto:info@goevergreen.shop">info@goevergreen.shop</a> and our team
        will get back to you as soon as possible.</p>
        """,
    ),
    "privacy-policy": PageContent(
        route="privacy-policy",
        from_fallback=True,
        title=TITLE_OVERRIDES["privacy-policy"],
        description=DESCRIPTION_OVERRIDES["privacy-policy"],
        content="""
        <h1>Privacy Policy</h1>
        <p>We collect only what we need: your email address when you subscribe to our newsletter and
        the details you send us through the contact form.</p>
        <p>Visit statistics are anonymous. We do not set tracking cookies, and analytics records are
        deleted after 90 days.</p>
        """,
    ),
})

def get_fallback_content(route: str) -> PageContent:
    """Static content for a logical route; unknown routes get the home page"""
    return _FALLBACK_PAGES.get(route, _FALLBACK_PAGES[HOME_ROUTE])
