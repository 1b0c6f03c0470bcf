"""Load the JSON fixtures into the PageData aggregate."""

from pathlib import Path
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from portfolio.exceptions import DataLoadException
from portfolio.logging_config import get_logger, log_with_context
from portfolio.models import Experience, Interest, PageData, Profile, Project

logger = get_logger(__name__)

T = TypeVar("T")

ABOUT_FILE = "about.json"
PROJECTS_FILE = "projects.json"
INTERESTS_FILE = "interests.json"
SKILLS_FILE = "skills.json"
EXPERIENCE_FILE = "experience.json"

_about_adapter = TypeAdapter(Profile)
_projects_adapter = TypeAdapter(tuple[Project, ...])
_interests_adapter = TypeAdapter(tuple[Interest, ...])
_skills_adapter = TypeAdapter(tuple[str, ...])
_experience_adapter = TypeAdapter(tuple[Experience, ...])


def load_fixture(data_dir: Path, filename: str, adapter: TypeAdapter[T]) -> T:
    """Read one fixture file and validate it against the expected shape.

    Args:
        data_dir: Directory holding the fixtures
        filename: Fixture file name relative to data_dir
        adapter: Pydantic adapter for the expected type

    Returns:
        The validated value

    Raises:
        DataLoadException: If the file is missing, unreadable or does not match the shape
    """
    path = data_dir / filename
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise DataLoadException(
            f"load {filename}: {e.strerror or e}",
            details={"file": str(path), "error_type": type(e).__name__},
        ) from e

    try:
        return adapter.validate_json(raw, strict=True)
    except ValidationError as e:
        errors: list[dict[str, Any]] = [
            {"loc": ".".join(str(part) for part in err["loc"]), "msg": err["msg"]} for err in e.errors()
        ]
        raise DataLoadException(
            f"load {filename}: {e.error_count()} validation error(s), first: {errors[0]['loc'] or '<root>'}: {errors[0]['msg']}",
            details={"file": str(path), "errors": errors},
        ) from e


def load_page_data(data_dir: Path) -> PageData:
    """Load all five fixtures and assemble the PageData aggregate.

    Args:
        data_dir: Directory holding about, projects, interests, skills and experience JSON files

    Returns:
        Immutable PageData

    Raises:
        DataLoadException: On the first fixture that fails to load
    """
    page = PageData(
        about=load_fixture(data_dir, ABOUT_FILE, _about_adapter),
        projects=load_fixture(data_dir, PROJECTS_FILE, _projects_adapter),
        interests=load_fixture(data_dir, INTERESTS_FILE, _interests_adapter),
        skills=load_fixture(data_dir, SKILLS_FILE, _skills_adapter),
        experience=load_fixture(data_dir, EXPERIENCE_FILE, _experience_adapter),
    )

    log_with_context(
        logger,
        "info",
        "Page data loaded",
        data_dir=str(data_dir),
        projects=len(page.projects),
        interests=len(page.interests),
        skills=len(page.skills),
        experience=len(page.experience),
        event_type="data_loaded",
    )
    return page
