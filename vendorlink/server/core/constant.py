"""
Application Constants.

Static values shared by the application factory and the routers.
"""

PROJECT_NAME = "VendorLink"
API_PREFIX = "/api"
VERSION = "1.0.0"

DEMO_USER_ID = "demo-user"
DEMO_USER_EMAIL = "demo@vendorlink.com"
DEMO_CATEGORY_NAME = "Demo Products"

OIDC_SCOPE = "openid email profile offline_access"
OIDC_PROMPT = "login consent"
