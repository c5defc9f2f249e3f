"""
handlers/ - Presentation Layer
================================
One coroutine per bot command. Each handler receives the parsed command,
the sender context and the shared ApiService, and returns the Reply to send.
Sending is left to the dispatcher; upstream failures never escape a handler.
"""
