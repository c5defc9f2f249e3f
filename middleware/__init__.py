"""
middleware/ - Cross-cutting wrappers
====================================
Decorators every command dispatch passes through.
"""
