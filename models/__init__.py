"""
models/ - Domain Layer
======================
Commands, replies, validated requests and upstream response shapes.
No I/O happens here.
"""
