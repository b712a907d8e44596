"""CRM activity API package.

Keeping this file makes ``app`` a regular package so imports never resolve to
an unrelated ``app`` namespace from site-packages.
"""
