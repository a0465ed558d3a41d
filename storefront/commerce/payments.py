"""
Payment initializer stubs.

No real payment processing happens here. Each initializer validates its
options and returns synthetic identifiers in the shape the checkout expects,
so the checkout flow can run end-to-end against them.
"""

from __future__ import annotations

import logging
import random
import string
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

ORDER_PREFIX = "FK"


@dataclass
class RazorpayOptions:
    key: str
    amount: float
    currency: str
    name: str
    description: str
    order_id: str
    prefill: Dict[str, str] = field(default_factory=dict)
    theme_color: str = "#000000"


@dataclass
class StripeOptions:
    publishable_key: str
    amount: float
    currency: str
    description: str
    success_url: str
    cancel_url: str


@dataclass
class PayPalOptions:
    client_id: str
    amount: float
    currency: str
    description: str


def _now_ms() -> int:
    return int(time.time() * 1000)


def initialize_razorpay(options: RazorpayOptions) -> Dict[str, Any]:
    if not options.key:
        raise ValueError("Razorpay key is not configured.")
    logger.info("[PAYMENTS STUB] Razorpay checkout for order %s (%s %.2f)", options.order_id, options.currency, options.amount)
    return {
        "provider": "razorpay",
        "order_id": options.order_id,
        "payment_id": f"pay_{_now_ms()}",
        "amount": options.amount,
        "currency": options.currency,
    }


def create_stripe_checkout(options: StripeOptions) -> Dict[str, str]:
    return {
        "session_id": f"stripe_session_{_now_ms()}",
        "url": f"https://checkout.stripe.com/pay/{options.publishable_key}",
    }


def initialize_paypal(options: PayPalOptions) -> Dict[str, Any]:
    return {
        "provider": "paypal",
        "order_id": f"paypal_order_{_now_ms()}",
        "amount": options.amount,
        "currency": options.currency,
    }


def format_order_id(timestamp: int) -> str:
    """FK + the last eight digits of the timestamp, zero padded."""
    return f"{ORDER_PREFIX}{str(timestamp)[-8:].zfill(8)}"


def generate_tracking_number(timestamp: Optional[int] = None, rng: Optional[random.Random] = None) -> str:
    rng = rng or random.Random()
    stamp = str(timestamp if timestamp is not None else _now_ms())[-6:]
    suffix = "".join(rng.choice(string.ascii_uppercase + string.digits) for _ in range(4))
    return f"{ORDER_PREFIX}{stamp}{suffix}"
