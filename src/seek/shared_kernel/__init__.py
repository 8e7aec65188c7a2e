"""Shared Kernel module.

Components shared by the ISA graph context and any other context that needs
request observation metadata or object-level permission checks.
"""
