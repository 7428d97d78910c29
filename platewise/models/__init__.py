"""Data models for the Platewise landing page."""

from platewise.models.restaurant import Restaurant
from platewise.models.review import Profile, Review
from platewise.models.toast import Toast, ToastVariant

__all__ = ["Profile", "Restaurant", "Review", "Toast", "ToastVariant"]
