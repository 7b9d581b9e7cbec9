"""Application modules.

This package contains the feature modules of the Streamora creator backend:
- identity: User directory, sessions and bearer tokens
- creator: Per-creator stats record
- monetization: Eligibility, activation, earnings and payouts
- moderation: Strike ladder and content purge
- notification: Inbox messages and broadcasts
- video: Video collection and feeds
- site: Subscriptions and site events
"""
