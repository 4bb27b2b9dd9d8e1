# goevergreen/templates/static_assets.py
# CSS and client script inlined into every page.

SITE_CSS = """
    * {
        margin: 0;
        padding: 0;
        box-sizing: border-box;
    }

    body {
        font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
        line-height: 1.6;
        color: #2c3e35;
        background-color: #fafaf8;
    }

    /* Header */
    .site-header {
        background: linear-gradient(135deg, #7a9b8e 0%, #a8c09a 100%);
        box-shadow: 0 2px 10px rgba(122, 155, 142, 0.2);
        position: sticky;
        top: 0;
        z-index: 1000;
    }

    .header-container {
        max-width: 1200px;
        margin: 0 auto;
        display: flex;
        align-items: center;
        justify-content: space-between;
        padding: 1rem 2rem;
        flex-wrap: wrap;
    }

    .logo-link {
        display: flex;
        align-items: center;
        gap: 1rem;
        text-decoration: none;
    }

    .logo {
        width: 50px;
        height: 50px;
        border-radius: 50%;
        object-fit: cover;
    }

    .site-title {
        color: white;
        font-size: 1.8rem;
        font-weight: 600;
        letter-spacing: -0.5px;
    }

    .main-navigation ul {
        display: flex;
        list-style: none;
        gap: 2rem;
        flex-wrap: wrap;
    }

    .main-navigation a {
        color: white;
        text-decoration: none;
        font-weight: 500;
        padding: 0.5rem 1rem;
        border-radius: 20px;
        transition: all 0.3s ease;
    }

    .main-navigation a:hover,
    .main-navigation a.active {
        background: rgba(255, 255, 255, 0.2);
    }

    .mobile-menu-toggle {
        display: none;
        background: none;
        border: none;
        cursor: pointer;
    }

    .mobile-menu-toggle span {
        display: block;
        width: 24px;
        height: 3px;
        margin: 4px 0;
        background: white;
    }

    .cta-button {
        background: #f4f4f2;
        color: #7a9b8e;
        padding: 0.8rem 1.5rem;
        border-radius: 25px;
        text-decoration: none;
        font-weight: 600;
        box-shadow: 0 2px 10px rgba(0, 0, 0, 0.1);
    }

    /* Main content */
    .main-content {
        min-height: 60vh;
        padding: 2rem 0;
    }

    .content-container {
        max-width: 1200px;
        margin: 0 auto;
        padding: 0 2rem;
    }

    .hero-section {
        text-align: center;
        padding: 4rem 2rem;
        background: linear-gradient(135deg, #f8fdf8 0%, #e8f5e8 100%);
        border-radius: 15px;
        margin-bottom: 2rem;
    }

    .hero-section h1 {
        font-size: 3rem;
        margin-bottom: 1rem;
    }

    .cta-buttons {
        display: flex;
        gap: 1rem;
        justify-content: center;
        flex-wrap: wrap;
    }

    .btn {
        padding: 1rem 2rem;
        border-radius: 25px;
        text-decoration: none;
        font-weight: 600;
        display: inline-block;
    }

    .btn-primary {
        background: #7a9b8e;
        color: white;
    }

    .btn-secondary {
        color: #7a9b8e;
        border: 2px solid #7a9b8e;
    }

    .features,
    .guide-grid {
        display: grid;
        grid-template-columns: repeat(auto-fit, minmax(280px, 1fr));
        gap: 2rem;
        margin: 2rem 0;
    }

    .feature,
    .guide-card {
        background: white;
        padding: 2rem;
        border-radius: 15px;
        box-shadow: 0 5px 25px rgba(122, 155, 142, 0.1);
    }

    .feature h3,
    .guide-card h3 {
        color: #7a9b8e;
        margin-bottom: 1rem;
    }

    /* Newsletter */
    .newsletter-section {
        background: linear-gradient(135deg, #e8f5e8 0%, #d4e7d4 100%);
        padding: 4rem 0;
        text-align: center;
    }

    .newsletter-container {
        max-width: 600px;
        margin: 0 auto;
        padding: 0 2rem;
    }

    .newsletter-section h2 {
        font-size: 2.2rem;
        margin-bottom: 1rem;
    }

    .newsletter-form {
        display: flex;
        gap: 1rem;
        flex-wrap: wrap;
        justify-content: center;
        margin-top: 2rem;
    }

    .newsletter-form input {
        padding: 1rem;
        border: 2px solid #a8c09a;
        border-radius: 25px;
        font-size: 1rem;
        min-width: 200px;
    }

    .newsletter-form button {
        background: #7a9b8e;
        color: white;
        border: none;
        padding: 1rem 2rem;
        border-radius: 25px;
        font-size: 1rem;
        font-weight: 600;
        cursor: pointer;
    }

    .newsletter-form button:disabled {
        opacity: 0.6;
        cursor: wait;
    }

    .newsletter-success {
        background: white;
        border-radius: 15px;
        padding: 2rem;
        margin-top: 2rem;
    }

    .form-message {
        margin-top: 1rem;
        padding: 0.5rem;
        border-radius: 5px;
        display: none;
    }

    .form-message.error {
        background: #f8d7da;
        color: #721c24;
        border: 1px solid #f5c6cb;
        display: block;
    }

    /* Footer */
    .site-footer {
        background: linear-gradient(135deg, #2c3e35 0%, #3a4f42 100%);
        color: #a8c09a;
        padding: 3rem 0 0;
    }

    .footer-container {
        max-width: 1200px;
        margin: 0 auto;
        padding: 0 2rem 2rem;
        display: grid;
        grid-template-columns: repeat(auto-fit, minmax(250px, 1fr));
        gap: 2rem;
    }

    .footer-section h3,
    .footer-section h4 {
        color: white;
        margin-bottom: 1rem;
    }

    .footer-section ul {
        list-style: none;
    }

    .footer-section li {
        margin-bottom: 0.5rem;
    }

    .footer-section a,
    .footer-links a {
        color: #a8c09a;
        text-decoration: none;
    }

    .footer-section a:hover,
    .footer-links a:hover {
        color: white;
    }

    .footer-bottom {
        background: rgba(0, 0, 0, 0.2);
        border-top: 1px solid #4a5a4e;
        padding: 1.5rem 0;
    }

    .footer-bottom-content {
        max-width: 1200px;
        margin: 0 auto;
        padding: 0 2rem;
        display: flex;
        justify-content: space-between;
        flex-wrap: wrap;
        gap: 1rem;
    }

    .footer-links {
        display: flex;
        gap: 1rem;
    }

    @media (max-width: 768px) {
        .mobile-menu-toggle {
            display: block;
        }

        .main-navigation ul {
            display: none;
            flex-direction: column;
            text-align: center;
            gap: 1rem;
        }

        .main-navigation ul.active {
            display: flex;
        }

        .newsletter-form {
            flex-direction: column;
            align-items: center;
        }

        .newsletter-form input,
        .newsletter-form button {
            width: 100%;
            max-width: 300px;
        }

        .hero-section h1 {
            font-size: 2rem;
        }

        .footer-bottom-content {
            flex-direction: column;
            text-align: center;
        }
    }
"""

SITE_JS = """
    document.addEventListener('DOMContentLoaded', function() {
        var form = document.getElementById('newsletterForm');
        var success = document.getElementById('newsletter-success');
        var messageDiv = document.getElementById('newsletter-message');

        if (form) {
            form.addEventListener('submit', async function(e) {
                e.preventDefault();

                var button = form.querySelector('button[type="submit"]');
                button.disabled = true;
                messageDiv.className = 'form-message';
                messageDiv.textContent = '';

                try {
                    var response = await fetch('/api/newsletter', {
                        method: 'POST',
                        headers: { 'Content-Type': 'application/json' },
                        body: JSON.stringify({ email: form.email.value, name: form.name.value })
                    });
                    var result = await response.json();

                    if (response.ok && result.success) {
                        form.style.display = 'none';
                        success.hidden = false;
                        return;
                    }
                    messageDiv.textContent = result.error || 'Subscription failed. Please try again.';
                } catch (error) {
                    messageDiv.textContent = 'Network error. Please try again later.';
                }

                messageDiv.className = 'form-message error';
                button.disabled = false;
            });
        }

        var toggle = document.getElementById('mobileMenuToggle');
        var navMenu = document.getElementById('navMenu');
        if (toggle && navMenu) {
            toggle.addEventListener('click', function() {
                navMenu.classList.toggle('active');
                toggle.setAttribute('aria-expanded', navMenu.classList.contains('active'));
            });
            document.addEventListener('keydown', function(e) {
                if (e.key === 'Escape' && navMenu.classList.contains('active')) {
                    navMenu.classList.remove('active');
                    toggle.setAttribute('aria-expanded', 'false');
                    toggle.focus();
                }
            });
        }

        document.querySelectorAll('a[href^="#"]').forEach(function(anchor) {
            anchor.addEventListener('click', function(e) {
                var target = document.querySelector(this.getAttribute('href'));
                if (target) {
                    e.preventDefault();
                    target.scrollIntoView({ behavior: 'smooth', block: 'start' });
                }
            });
        });
    });
"""
