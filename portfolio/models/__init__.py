"""Portfolio models"""

from portfolio.models.portfolio import ContactSubmission, Experience, Interest, PageData, Profile, Project

__all__ = [
    "ContactSubmission",
    "Experience",
    "Interest",
    "PageData",
    "Profile",
    "Project",
]
