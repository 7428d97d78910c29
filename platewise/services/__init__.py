"""Collaborator services used by the landing page."""
