"""
Match service: connects the user directory to the matching engine.

Resolves the requester, gathers the candidate roster, delegates scoring
to the engine, and prepares results for API consumers.
"""

from typing import Any, Optional

from skillmatch.core.exceptions import DirectoryError, UserNotFoundError
from skillmatch.data.models import MatchResult, UserProfile
from skillmatch.data.repositories import UserRepository, get_user_repository
from skillmatch.utils.logger import LoggerMixin

from .matching_engine import MatchingEngine, get_matching_engine, reset_matching_engine

# Skill filter value meaning "no filter"
ALL_SKILLS = "all"


class MatchService(LoggerMixin):
    """
    Computes peer matches for users held in a directory.

    The service depends only on the directory's read operations, so any
    repository backend can supply profiles.
    """

    def __init__(
        self,
        directory: UserRepository,
        engine: Optional[MatchingEngine] = None,
    ):
        self.directory = directory
        self.engine = engine or get_matching_engine()

    def requester_exists(self, user_id: str) -> bool:
        """
        Check whether a user id resolves to a profile.

        Lets callers tell "unknown user" apart from "no matches", which
        ``get_matches`` reports the same way.
        """
        return self.directory.get_by_id(user_id) is not None

    def get_requester(self, user_id: str) -> UserProfile:
        """
        Resolve a requesting user.

        Raises:
            UserNotFoundError: If no profile has this id
        """
        requester = self.directory.get_by_id(user_id)
        if requester is None:
            raise UserNotFoundError(user_id)
        return requester

    def get_matches(self, user_id: str) -> list[MatchResult]:
        """
        Ranked matches for a user against everyone else in the directory.

        Args:
            user_id: Id of the requesting user

        Returns:
            Match results, highest compatibility first; empty when the
            user is unknown or nobody else is registered

        Raises:
            DirectoryError: If the directory backend fails
        """
        try:
            requester = self.directory.get_by_id(user_id)
            if requester is None:
                self.logger.warning(f"Match request for unknown user: {user_id}")
                return []
            candidates = self.directory.get_all_except(user_id)
        except DirectoryError:
            self.logger.exception(f"Directory lookup failed while matching {user_id}")
            raise

        matches = self.engine.compute_matches(requester, candidates)
        self.logger.info(f"Computed {len(matches)} matches for {user_id}")
        return matches

    def get_public_matches(self, user_id: str) -> list[dict[str, Any]]:
        """Matches serialized for API responses, credentials stripped."""
        return [match.to_public_dict() for match in self.get_matches(user_id)]

    @staticmethod
    def filter_matches(
        matches: list[MatchResult],
        search_query: str = "",
        skill_filter: Optional[str] = None,
    ) -> list[MatchResult]:
        """
        Narrow a match list the way the network page does.

        A match is kept when the candidate's name or one of the skills they
        can teach contains ``search_query``. A ``skill_filter`` other than
        ``"all"`` additionally requires a teachable skill containing it.
        Comparisons are case-insensitive; ranking order is preserved.
        """
        needle = search_query.lower()
        skill_needle = (
            skill_filter.lower()
            if skill_filter and skill_filter.lower() != ALL_SKILLS
            else None
        )

        filtered = []
        for match in matches:
            teachable = [s.lower() for s in match.skills_they_can_teach]
            matches_search = needle in match.user.full_name.lower() or any(
                needle in s for s in teachable
            )
            if not matches_search:
                continue
            if skill_needle is not None and not any(skill_needle in s for s in teachable):
                continue
            filtered.append(match)
        return filtered

    @staticmethod
    def teachable_skills(matches: list[MatchResult], limit: Optional[int] = None) -> list[str]:
        """Distinct skills offered across matches, in ranking order."""
        skills = list(dict.fromkeys(s for match in matches for s in match.skills_they_can_teach))
        return skills[:limit] if limit is not None else skills


# Singleton instance
_match_service: Optional[MatchService] = None


def get_match_service() -> MatchService:
    """Get the match service singleton wired to the configured directory."""
    global _match_service
    if _match_service is None:
        _match_service = MatchService(get_user_repository(), get_matching_engine())
    return _match_service


def reset_match_service() -> None:
    """Drop the cached service and engine (used when settings change)."""
    global _match_service
    _match_service = None
    reset_matching_engine()
