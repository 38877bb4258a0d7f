"""
Abonnement - Store subscription lifecycle service.

Creates, renews, cancels and expires user subscriptions billed
through Google Play or the Apple App Store.
"""

__version__ = "0.1.0"
