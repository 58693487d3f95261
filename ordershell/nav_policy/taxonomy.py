"""Fixed navigation rule sets shared by the classifier, config and page script."""

from __future__ import annotations

# Verdicts.
ALLOW = "allow"
EXTERNAL_HANDOFF = "external_handoff"
VERDICTS = (ALLOW, EXTERNAL_HANDOFF)

# Verdict origins, reported for observability.
ORIGIN_CONFIGURED = "configured"
ORIGIN_PLATFORM = "platform"
ORIGIN_PAYMENT = "payment"
ORIGIN_EXTERNAL_APP = "external_app"
ORIGIN_DEFAULT = "default"

# Unknown-host policy.
HANDOFF_CONSERVATIVE = "conservative"
HANDOFF_PERMISSIVE = "permissive"
HANDOFF_MODES = (HANDOFF_CONSERVATIVE, HANDOFF_PERMISSIVE)

# Ordering platform, including the legacy domain still linked from older sites.
PLATFORM_DOMAINS = ("kuriersoft.ch", "kurier.ch")

PAYMENT_HOSTS = (
    "secure.worldpay.com",
    "payments.worldpay.com",
    "checkout.stripe.com",
    "js.stripe.com",
    "api.stripe.com",
    "paypal.com",
    "www.paypal.com",
    "checkout.paypal.com",
    "www.sandbox.paypal.com",
    "twint.ch",
    "pay.twint.ch",
    "postfinance.ch",
    "e-payment.postfinance.ch",
    "datatrans.com",
    "pay.datatrans.com",
    "saferpay.com",
    "www.saferpay.com",
)

# App stores and social/video platforms always leave the app.
EXTERNAL_APP_HOSTS = (
    "play.google.com",
    "apps.apple.com",
    "itunes.apple.com",
    "facebook.com",
    "instagram.com",
    "twitter.com",
    "youtube.com",
)
