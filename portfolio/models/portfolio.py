"""Pydantic models for the portfolio content."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ContentModel(BaseModel):
    """Base for fixture records: immutable, strictly typed, every field required."""

    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")


class Profile(ContentModel):
    """Profile data from data/about.json."""

    name: str
    tagline: str
    bio: str
    location: str
    availability: bool
    years_of_experience: int
    email: str
    github: str
    linkedin: str
    x: str
    profile_photo: str


class Project(ContentModel):
    """A portfolio project from data/projects.json."""

    title: str
    description: str
    tags: tuple[str, ...]
    link: str
    image: str


class Interest(ContentModel):
    """A personal interest from data/interests.json."""

    emoji: str
    label: str
    description: str


class Experience(ContentModel):
    """A work or education entry from data/experience.json."""

    role: str
    company: str
    company_url: str
    logo: str
    start_date: str
    end_date: str
    description: tuple[str, ...]
    kind: Literal["work", "education"] = Field(alias="type")


class PageData(ContentModel):
    """Aggregate passed to every template render."""

    about: Profile
    projects: tuple[Project, ...]
    interests: tuple[Interest, ...]
    skills: tuple[str, ...]
    experience: tuple[Experience, ...]


class ContactSubmission(BaseModel):
    """Fields extracted from a contact form post."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    email: str = ""
    message: str = ""

    @property
    def message_len(self) -> int:
        """Length of the message in UTF-8 bytes."""
        return len(self.message.encode("utf-8"))
