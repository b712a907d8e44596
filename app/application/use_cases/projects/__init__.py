"""Use cases reading aggregated project information."""

from .get_project_summary import ProjectSummary, get_project_summary

__all__ = ["ProjectSummary", "get_project_summary"]
