"""Global configuration values."""

import os

# Template used when no preference is recorded for a compose context
DEFAULT_TEMPLATE = os.environ.get("SIGNATURE_DEFAULT_TEMPLATE", "templateB")

# Raise instead of falling back to DEFAULT_TEMPLATE when a preference is missing
STRICT_TEMPLATE_PREFERENCES = os.environ.get("SIGNATURE_STRICT_PREFERENCES", "false").lower() in ("1", "true", "yes")

# Probability of drawing the closing quote from the first pool
QUOTE_POOL_1_WEIGHT = float(os.environ.get("SIGNATURE_QUOTE_POOL_1_WEIGHT", "0.5"))

# Branded template boilerplate (can be overridden via env)
BRAND_NAME = os.environ.get("SIGNATURE_BRAND_NAME", "FORRESTER")
BRAND_TAGLINE = os.environ.get("SIGNATURE_BRAND_TAGLINE", "BOLD AT WORK")
COMPANY_NAME = os.environ.get("SIGNATURE_COMPANY_NAME", "Forrester Research, Inc.")
COMPANY_ADDRESS = os.environ.get(
    "SIGNATURE_COMPANY_ADDRESS", "60 Acorn Park Drive, Cambridge, MA 02140 United States"
)
COMPANY_LINKS = (
    ("Forrester.com", "http://www.forrester.com/"),
    ("Blogs", "http://blogs.forrester.com/"),
    ("Podcasts", "http://forr.com/what-it-means"),
    ("X", "http://twitter.com/forrester"),
    ("LinkedIn", "http://linkedin.com/company/forrester-research"),
    ("YouTube", "http://www.youtube.com/user/forresterresearch"),
    ("Instagram", "https://www.instagram.com/forrester_global/"),
)

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

SECRET_KEY = os.environ.get("SECRET_KEY", "set-signature-dev-key")
