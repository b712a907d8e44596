"""Use cases reading aggregated contact information."""

from .get_contact_summary import ContactSummary, get_contact_summary

__all__ = ["ContactSummary", "get_contact_summary"]
