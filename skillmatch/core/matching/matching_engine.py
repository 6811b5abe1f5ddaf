"""
Peer compatibility matching engine.

Scores every candidate against a requesting user by how many skills
each side can teach the other, adds a flat bonus for shared interests,
and ranks the results.
"""

import math
from typing import Optional, Sequence

from skillmatch.data.models import MatchResult, UserProfile
from skillmatch.utils.config import get_settings
from skillmatch.utils.constants import MIN_POSSIBLE_MATCHES
from skillmatch.utils.logger import get_logger

logger = get_logger(__name__)


def _round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 rounding up."""
    return math.floor(value + 0.5)


class MatchingEngine:
    """
    Engine for scoring candidates against a requesting user.

    Stateless apart from its scoring parameters; safe to share between
    threads and requests.

    Scoring:
    - skills the candidate can teach the requester
    - skills the requester can teach the candidate
    - flat bonus when at least one interest is shared
    """

    def __init__(
        self,
        max_score: Optional[int] = None,
        interest_bonus: Optional[int] = None,
    ):
        """
        Initialize the matching engine.

        Args:
            max_score: Cap applied to every score (defaults to settings)
            interest_bonus: Bonus for sharing an interest (defaults to settings)
        """
        matching_settings = get_settings().matching
        self.max_score = matching_settings.max_score if max_score is None else max_score
        self.interest_bonus = (
            matching_settings.interest_bonus if interest_bonus is None else interest_bonus
        )

    def compute_matches(
        self,
        requester: Optional[UserProfile],
        candidates: Sequence[UserProfile],
    ) -> list[MatchResult]:
        """
        Score and rank candidates for a requester.

        The requester is not filtered out of ``candidates``; callers that
        pass the full directory should exclude it first.

        Args:
            requester: Profile of the requesting user, or None if unresolved
            candidates: Profiles to score

        Returns:
            Match results, highest compatibility first. Empty when the
            requester is unknown or there are no candidates.
        """
        if requester is None or not candidates:
            return []

        results = [self.score_candidate(requester, candidate) for candidate in candidates]
        ranked = self.rank_matches(results)

        logger.debug(
            f"Scored {len(ranked)} candidates for {requester.id} "
            f"(top score: {ranked[0].compatibility_score})"
        )
        return ranked

    def score_candidate(self, requester: UserProfile, candidate: UserProfile) -> MatchResult:
        """Compute the match result for a single candidate."""
        skills_they_can_teach = self._teachable_skills(
            candidate.skills_to_share, requester.skills_to_learn
        )
        skills_you_can_teach = self._teachable_skills(
            requester.skills_to_share, candidate.skills_to_learn
        )
        matching_skills = self._merge_skills(skills_they_can_teach, skills_you_can_teach)

        return MatchResult(
            user=candidate,
            compatibility_score=self._calculate_score(requester, candidate, matching_skills),
            matching_skills=matching_skills,
            skills_they_can_teach=skills_they_can_teach,
            skills_you_can_teach=skills_you_can_teach,
        )

    @staticmethod
    def _teachable_skills(offered_skills: list[str], learner_wants: list[str]) -> list[str]:
        """Offered skills that the learner wants, compared case-insensitively."""
        wanted = {skill.lower() for skill in learner_wants}
        return [skill for skill in offered_skills if skill.lower() in wanted]

    @staticmethod
    def _merge_skills(*skill_lists: list[str]) -> list[str]:
        """Order-preserving union; duplicates are detected on the stored casing."""
        return list(dict.fromkeys(skill for skills in skill_lists for skill in skills))

    def _calculate_score(
        self,
        requester: UserProfile,
        candidate: UserProfile,
        matching_skills: list[str],
    ) -> int:
        """
        Skill overlap percentage plus interest bonus, capped at max_score.

        The bonus is added before rounding, as the network's original
        store did. With an integer bonus this equals rounding the overlap
        first and adding the bonus afterwards.
        """
        max_possible_matches = max(requester.skill_count, MIN_POSSIBLE_MATCHES)
        overlap = len(matching_skills) / max_possible_matches * 100

        shares_interest = any(i in requester.interests for i in candidate.interests)
        bonus = self.interest_bonus if shares_interest else 0

        return min(_round_half_up(overlap + bonus), self.max_score)

    def rank_matches(self, results: list[MatchResult]) -> list[MatchResult]:
        """
        Rank match results by compatibility score.

        Args:
            results: List of match results

        Returns:
            Sorted list with highest scores first; ties keep input order
        """
        return sorted(results, key=lambda r: r.compatibility_score, reverse=True)


# Singleton instance
_matching_engine: Optional[MatchingEngine] = None


def get_matching_engine() -> MatchingEngine:
    """Get the matching engine singleton instance."""
    global _matching_engine
    if _matching_engine is None:
        _matching_engine = MatchingEngine()
    return _matching_engine


def reset_matching_engine() -> None:
    """Drop the cached engine so the next call re-reads the scoring settings."""
    global _matching_engine
    _matching_engine = None
