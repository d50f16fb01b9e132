"""Common literal values used across landing_pages.

These constants keep the generator version, the submission origin, and the
document policy centralized so templates, the compiler, and tests can import
the same values without drifting. Intended for internal use within the
landing_pages package.

Examples
--------
>>> from landing_pages import _constants
>>> _constants.PAGE_META_TEMPLATE.format(key="spring-sale")
'.landing-spring-sale-meta.json'
>>> _constants.SUBMISSION_ENDPOINT.startswith(_constants.SUBMISSION_ORIGIN)
True
"""

GENERATOR_VERSION = "1.0.0"

PAGE_META_TEMPLATE = ".landing-{key}-meta.json"

# Every exported page posts custom-endpoint submissions back to this origin.
SUBMISSION_ORIGIN = "https://easy-landing-omega.vercel.app"
SUBMISSION_ENDPOINT = f"{SUBMISSION_ORIGIN}/api/submit-form"

HOSTED_FORM_ENDPOINT = "https://formspree.io/f/{key}"

CSP_POLICY = (
    "default-src 'self'; "
    "script-src 'self' 'unsafe-inline' https://www.googletagmanager.com "
    "https://www.google-analytics.com https://pagead2.googlesyndication.com; "
    f"connect-src 'self' {SUBMISSION_ORIGIN} https://formspree.io "
    "https://www.google-analytics.com; "
    "img-src 'self' data: https:; "
    "style-src 'self' 'unsafe-inline' https://fonts.googleapis.com; "
    "font-src 'self' https://fonts.gstatic.com; "
    "frame-src https://googleads.g.doubleclick.net;"
)

DEFAULT_PAGE_TITLE = "Landing Page"

SIZE_WARNING_BYTES = 200 * 1024

FORM_RESET_DELAY_MS = 4000
