"""
Demo roster for the user directory.

Loaded into the in-memory backend at startup and available to any
backend through ``skillmatch seed``.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

from skillmatch.data.models import UserProfile
from skillmatch.utils.logger import get_logger

logger = get_logger(__name__)

_SEED_EPOCH = datetime(2024, 9, 1, tzinfo=timezone.utc)

_DEMO_USER_DATA: list[dict[str, Any]] = [
    {
        "id": "user-1",
        "username": "alexchen",
        "password": "demo123",
        "fullName": "Alex Chen",
        "email": "alex.chen@university.edu",
        "academicYear": "Junior",
        "department": "Computer Science",
        "bio": "Full-stack tinkerer, hackathon regular.",
        "skillsToShare": ["React", "TypeScript", "Node.js"],
        "skillsToLearn": ["Python", "Machine Learning", "UI Design"],
        "interests": ["AI", "Startups", "Open Source"],
    },
    {
        "id": "user-2",
        "username": "priyapatel",
        "password": "demo123",
        "fullName": "Priya Patel",
        "email": "priya.patel@university.edu",
        "academicYear": "Senior",
        "department": "Data Science",
        "bio": "Kaggle addict, TA for intro ML.",
        "skillsToShare": ["Python", "Machine Learning", "Statistics"],
        "skillsToLearn": ["React", "Public Speaking"],
        "interests": ["AI", "Research"],
    },
    {
        "id": "user-3",
        "username": "samokafor",
        "password": "demo123",
        "fullName": "Sam Okafor",
        "email": "sam.okafor@university.edu",
        "academicYear": "Sophomore",
        "department": "Design",
        "bio": "Designing interfaces people enjoy.",
        "skillsToShare": ["UI Design", "Figma", "Illustration"],
        "skillsToLearn": ["typescript", "node.js"],
        "interests": ["Design", "Startups"],
    },
    {
        "id": "user-4",
        "username": "mariagarcia",
        "password": "demo123",
        "fullName": "Maria Garcia",
        "email": "maria.garcia@university.edu",
        "academicYear": "Freshman",
        "department": "Business",
        "skillsToShare": ["Public Speaking", "Marketing"],
        "skillsToLearn": ["Statistics", "Excel"],
        "interests": ["Entrepreneurship"],
    },
    {
        "id": "user-5",
        "username": "jordanlee",
        "password": "demo123",
        "fullName": "Jordan Lee",
        "email": "jordan.lee@university.edu",
        "academicYear": "Graduate",
        "department": "Electrical Engineering",
        "bio": "Embedded systems by day, music by night.",
        "skillsToShare": ["C++", "python"],
        "skillsToLearn": ["React", "UI Design"],
        "interests": ["Robotics", "Music", "Open Source"],
    },
]


def demo_users() -> list[UserProfile]:
    """Build fresh demo profiles, registered one day apart in roster order."""
    users = []
    for offset, data in enumerate(_DEMO_USER_DATA):
        created = _SEED_EPOCH + timedelta(days=offset)
        users.append(UserProfile.model_validate({**data, "createdAt": created, "updatedAt": created}))
    return users


def seed_directory(repository: Any, overwrite: bool = False) -> int:
    """
    Load the demo roster into a user repository.

    Args:
        repository: Any user repository backend
        overwrite: Replace demo users that already exist

    Returns:
        Number of users written
    """
    written = 0
    for user in demo_users():
        if repository.get_by_id(user.id) is not None:
            if not overwrite:
                continue
            repository.delete(user.id)
        repository.create(user)
        written += 1

    logger.info(f"Seeded {written} demo users")
    return written
