"""Streamora creator backend.

Creator monetization and moderation engine for the Streamora video platform.

Modules:
    - core: Configuration, logging, record store
    - modules.identity: User directory, sessions and bearer tokens
    - modules.creator: Per-creator stats record
    - modules.monetization: Eligibility, activation, earnings and payouts
    - modules.moderation: Strike ladder and content purge
    - modules.notification: Inbox messages and broadcasts
    - modules.video: Video collection and feeds
    - modules.site: Subscriptions and site events
"""

__version__ = "0.1.0"
