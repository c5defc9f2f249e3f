"""
services/ - Service Layer
=========================
Outbound HTTP calls to the upstream APIs, their typed errors,
and delivery of replies back to Telegram.
"""
