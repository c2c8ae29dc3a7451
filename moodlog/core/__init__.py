"""
Core Module.

Configuration, centralized logging, and application exceptions shared by
the notion and cli layers.
"""
