"""
Plans package - resolves which plan governs a user and which policy applies.

Reconciles the user's personal subscription with organization-granted
entitlements. Pure and synchronous: subscription state and organization
contracts are supplied by the caller, and enforcement of the resulting limits
is left to the rate limiter.
"""
