"""
Tests for skillmatch.data.models: profile and match result schemas.
"""

from datetime import timezone

import pytest
from pydantic import ValidationError

from skillmatch.data.models import MatchResult, UserCreate, UserProfile, UserUpdate
from skillmatch.utils.constants import MatchStrength


# ── UserProfile ──────────────────────────────────────────────────────────────


class TestUserProfile:
    def test_accepts_camel_case_input(self):
        user = UserProfile.model_validate(
            {
                "id": "u1",
                "username": "ada",
                "fullName": "Ada Lovelace",
                "email": "ada@uni.edu",
                "skillsToShare": ["Math"],
                "skillsToLearn": ["Poetry"],
            }
        )

        assert user.full_name == "Ada Lovelace"
        assert user.skills_to_share == ["Math"]
        assert user.skills_to_learn == ["Poetry"]

    def test_accepts_snake_case_input(self, make_user):
        user = make_user("u1", skills_to_share=["Go"])
        assert user.skills_to_share == ["Go"]

    def test_missing_collections_become_empty(self):
        user = UserProfile.model_validate(
            {
                "id": "u1",
                "username": "ada",
                "fullName": "Ada",
                "email": "ada@uni.edu",
                "skillsToShare": None,
                "skillsToLearn": None,
                "interests": None,
                "portfolioLinks": None,
                "connectionsCount": None,
            }
        )

        assert user.skills_to_share == []
        assert user.skills_to_learn == []
        assert user.interests == []
        assert user.portfolio_links == []
        assert user.connections_count == 0

    def test_email_is_normalized(self, make_user):
        user = make_user("u1", email="  Ada@Uni.EDU ")
        assert user.email == "ada@uni.edu"

    def test_skill_count(self, make_user):
        user = make_user("u1", skills_to_share=["a", "b"], skills_to_learn=["c"])
        assert user.skill_count == 3

    def test_timestamps_default_to_utc(self, make_user):
        user = make_user("u1")
        assert user.created_at.tzinfo == timezone.utc

    def test_public_dict_hides_password(self, make_user):
        user = make_user("u1", password="hunter2", skills_to_share=["Go"])

        public = user.to_public_dict()

        assert "password" not in public
        assert public["skillsToShare"] == ["Go"]
        assert public["fullName"] == "Student u1"
        assert isinstance(public["createdAt"], str)

    def test_document_dump_uses_aliases(self, make_user):
        document = make_user("u1").model_dump_document()

        assert document["id"] == "u1"
        assert "skillsToLearn" in document
        assert "skills_to_learn" not in document

    def test_requires_core_fields(self):
        with pytest.raises(ValidationError):
            UserProfile.model_validate({"id": "u1", "username": "ada"})


# ── UserCreate / UserUpdate ──────────────────────────────────────────────────


class TestSchemas:
    def test_create_rejects_empty_username(self):
        with pytest.raises(ValidationError):
            UserCreate(username="", full_name="Ada", email="ada@uni.edu")

    def test_create_normalizes_none_collections(self):
        data = UserCreate(username="ada", full_name="Ada", email="ada@uni.edu", interests=None)
        assert data.interests == []

    def test_update_dumps_only_set_fields(self):
        update = UserUpdate(skills_to_share=["Rust"])

        dumped = update.model_dump(by_alias=True, exclude_unset=True)

        assert dumped == {"skillsToShare": ["Rust"]}


# ── MatchResult ──────────────────────────────────────────────────────────────


class TestMatchResult:
    def test_score_above_cap_rejected(self, make_user):
        with pytest.raises(ValidationError):
            MatchResult(user=make_user("c"), compatibility_score=100)

    def test_negative_score_rejected(self, make_user):
        with pytest.raises(ValidationError):
            MatchResult(user=make_user("c"), compatibility_score=-1)

    def test_public_dict_strips_candidate_password(self, make_user):
        result = MatchResult(
            user=make_user("c", password="secret"),
            compatibility_score=42,
            skills_they_can_teach=["Go"],
        )

        public = result.to_public_dict()

        assert "password" not in public["user"]
        assert public["user"]["id"] == "c"
        assert public["compatibilityScore"] == 42
        assert public["skillsTheyCanTeach"] == ["Go"]

    @pytest.mark.parametrize(
        "score, strength",
        [
            (99, MatchStrength.STRONG),
            (70, MatchStrength.STRONG),
            (69, MatchStrength.GOOD),
            (40, MatchStrength.GOOD),
            (1, MatchStrength.WEAK),
            (0, MatchStrength.NONE),
        ],
    )
    def test_strength(self, make_user, score, strength):
        assert MatchResult(user=make_user("c"), compatibility_score=score).strength == strength

    def test_is_mutual(self, make_user):
        one_way = MatchResult(user=make_user("c"), skills_they_can_teach=["Go"])
        both_ways = MatchResult(
            user=make_user("c"),
            skills_they_can_teach=["Go"],
            skills_you_can_teach=["Rust"],
        )

        assert not one_way.is_mutual
        assert both_ways.is_mutual
