"""Pydantic schemas for the profile document."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.entities.profile import DEFAULT_LINK_COUNT, Role


class LinkSchema(BaseModel):
    """A named URL."""

    name: str = ""
    url: str = ""


class SocialsSchema(BaseModel):
    """Social handles or URLs."""

    telegram: str = ""
    discord: str = ""
    twitter: str = ""
    linkedin: str = ""


class ProfileDocument(BaseModel):
    """Full profile document, used for both request and response bodies."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Alice",
                "bio": "Building onchain games",
                "roles": ["Developer", "Founder"],
                "links": [
                    {"name": "Site", "url": "https://alice.dev"},
                    {"name": "GitHub", "url": "https://github.com/alice"},
                ],
                "socials": {
                    "telegram": "alice",
                    "discord": "",
                    "twitter": "@alice",
                    "linkedin": "",
                },
                "profileImage": "",
            }
        },
    )

    name: str = ""
    bio: str = ""
    roles: list[Role] = Field(default_factory=list)
    links: list[LinkSchema] = Field(default_factory=list, min_length=DEFAULT_LINK_COUNT)
    socials: SocialsSchema = Field(default_factory=SocialsSchema)
    profileImage: str = ""
    userId: str | None = None

    @field_validator("roles")
    @classmethod
    def dedupe_roles(cls, v: list[Role]) -> list[Role]:
        return list(dict.fromkeys(v))
