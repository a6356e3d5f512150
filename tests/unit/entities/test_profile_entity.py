"""Unit tests for the Profile entity."""

import pytest

from domain.entities.identity import CurrentIdentity
from domain.entities.profile import (
    DEFAULT_LINK_NAMES,
    ROLE_COLORS,
    Link,
    Profile,
    Role,
    SocialPlatform,
    Socials,
    default_profile,
    seed_profile,
)


class TestDefaults:
    def test_default_profile_has_empty_strings_and_default_links(self):
        profile = default_profile()

        assert profile.name == ""
        assert profile.bio == ""
        assert profile.profile_image == ""
        assert profile.roles == []
        assert [link.name for link in profile.links] == list(DEFAULT_LINK_NAMES)
        assert all(link.url == "" for link in profile.links)
        assert profile.socials == Socials()

    def test_default_profiles_do_not_share_links(self):
        first = default_profile()
        second = default_profile()

        first.links[0].url = "https://changed.example"

        assert second.links[0].url == ""

    def test_every_role_has_a_color(self):
        assert set(ROLE_COLORS) == set(Role)


class TestInvariants:
    def test_none_strings_are_coerced_to_empty(self):
        profile = Profile(name=None, bio=None, profile_image=None)  # type: ignore[arg-type]

        assert profile.name == ""
        assert profile.bio == ""
        assert profile.profile_image == ""

    def test_duplicate_roles_are_removed_keeping_order(self):
        profile = Profile(roles=[Role.DESIGNER, Role.DEVELOPER, Role.DESIGNER])

        assert profile.roles == [Role.DESIGNER, Role.DEVELOPER]

    def test_short_link_lists_are_padded_with_default_slots(self):
        profile = Profile(links=[Link(name="My Site", url="https://me.dev")])

        assert len(profile.links) == 2
        assert profile.links[0].name == "My Site"
        assert profile.links[1].name == "GitHub"

    def test_default_and_custom_link_views(self, saved_profile: Profile):
        assert len(saved_profile.default_links) == 2
        assert [link.name for link in saved_profile.custom_links] == ["Blog", "Farcaster"]


class TestCopy:
    def test_copy_is_equal_but_independent(self, saved_profile: Profile):
        clone = saved_profile.copy()

        assert clone == saved_profile
        clone.links[2].url = "https://elsewhere.example"
        clone.roles.append(Role.ARTIST)
        clone.socials.discord = "alice#1"

        assert saved_profile.links[2].url == "https://mirror.xyz/alice"
        assert Role.ARTIST not in saved_profile.roles
        assert saved_profile.socials.discord == ""


class TestDocumentMapping:
    def test_to_document_uses_wire_keys(self, saved_profile: Profile):
        document = saved_profile.to_document()

        assert document["profileImage"] == "https://cdn.example/alice.png"
        assert document["roles"] == ["Developer", "Founder"]
        assert document["socials"] == {
            "telegram": "alice",
            "discord": "",
            "twitter": "@alice",
            "linkedin": "",
        }
        assert document["links"][2] == {"name": "Blog", "url": "https://mirror.xyz/alice"}

    def test_from_document_reads_back_to_document(self, saved_profile: Profile):
        assert Profile.from_document(saved_profile.to_document()) == saved_profile

    def test_from_document_tolerates_missing_and_null_fields(self):
        profile = Profile.from_document(
            {"name": "Bob", "bio": None, "socials": {"telegram": None}, "userId": "u9"}
        )

        assert profile.name == "Bob"
        assert profile.bio == ""
        assert profile.socials.telegram == ""
        assert len(profile.links) == 2
        assert profile.roles == []

    def test_from_document_drops_unknown_roles(self):
        profile = Profile.from_document({"roles": ["Developer", "Wizard", "Developer"]})

        assert profile.roles == [Role.DEVELOPER]

    @pytest.mark.parametrize(
        "document",
        [{"roles": 5}, {"links": "Site"}, {"socials": "oops"}, {"socials": ["alice"]}],
    )
    def test_from_document_rejects_wrongly_shaped_fields(self, document):
        with pytest.raises(ValueError):
            Profile.from_document(document)


class TestSocials:
    def test_get_and_set_by_platform(self):
        socials = Socials()

        socials.set(SocialPlatform.LINKEDIN, "linkedin.com/in/alice")

        assert socials.get(SocialPlatform.LINKEDIN) == "linkedin.com/in/alice"
        assert socials.has_any()

    def test_set_rejects_unknown_platform(self):
        with pytest.raises(ValueError):
            Socials().set("myspace", "tom")  # type: ignore[arg-type]

    def test_has_any_is_false_when_all_empty(self):
        assert not Socials().has_any()


class TestSeedProfile:
    def test_seed_uses_identity_first_name_and_avatar(self):
        identity = CurrentIdentity(id="u1", first_name="Alice", image_url="https://img/a.png")

        seed = seed_profile(identity)

        assert seed.name == "Alice"
        assert seed.profile_image == "https://img/a.png"
        assert [link.name for link in seed.links] == ["Site", "GitHub"]

    def test_seed_without_identity_details_is_empty(self):
        seed = seed_profile(CurrentIdentity(id="u1"))

        assert seed == default_profile()
