"""
User profile returned by the backend's /api/users/me
"""
from enum import Enum
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

NOT_ASSIGNED = "Not assigned"


class UserRole(str, Enum):
    USER = "user"
    DEVELOPER = "developer"
    ADMIN = "admin"


class ApiKeyKind(str, Enum):
    """Credentials shown in the profile API-key panel"""
    MANAGED = "managed"
    OPENROUTER = "openrouter"
    GLM = "glm"

    @property
    def field_name(self) -> str:
        return f"{self.value}_api_key"

    @property
    def label(self) -> str:
        return {
            ApiKeyKind.MANAGED: "Managed API Key",
            ApiKeyKind.OPENROUTER: "OpenRouter API Key",
            ApiKeyKind.GLM: "GLM API Key",
        }[self]


def mask_key(key: Optional[str]) -> str:
    """Show the first and last four characters of a credential"""
    if not key:
        return NOT_ASSIGNED
    if len(key) <= 8:
        return "•" * len(key)
    return f"{key[:4]}{'•' * (len(key) - 8)}{key[-4:]}"


class UserProfile(BaseModel):
    """Current user as reported by the backend"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = Field(default=None, validation_alias=AliasChoices("name", "full_name", "fullName"))
    first_name: Optional[str] = Field(default=None, validation_alias=AliasChoices("first_name", "firstName"))
    role: UserRole = UserRole.USER
    is_active: bool = Field(default=True, validation_alias=AliasChoices("is_active", "isActive"))
    plan: Optional[str] = None
    managed_api_key: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("managed_api_key", "managedApiKey")
    )
    openrouter_api_key: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("openrouter_api_key", "openrouterApiKey")
    )
    glm_api_key: Optional[str] = Field(default=None, validation_alias=AliasChoices("glm_api_key", "glmApiKey"))

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v):
        return None if v is None else str(v)

    @field_validator("role", mode="before")
    @classmethod
    def unknown_role_is_user(cls, v):
        if not v:
            return UserRole.USER
        v = str(v).lower()
        return v if v in {role.value for role in UserRole} else UserRole.USER

    @model_validator(mode="after")
    def fill_name(self):
        if not self.name and self.first_name:
            self.name = self.first_name
        return self

    @property
    def display_name(self) -> str:
        return self.name or self.email or "User"

    @property
    def initial(self) -> str:
        source = self.first_name or self.name or self.email or "U"
        return source[0].upper()

    def key_for(self, kind: ApiKeyKind) -> Optional[str]:
        return getattr(self, kind.field_name)

    def masked_keys(self) -> dict:
        return {kind.value: mask_key(self.key_for(kind)) for kind in ApiKeyKind}

    def to_public_dict(self) -> dict:
        """Profile payload for the browser: keys are masked"""
        data = self.model_dump(mode="json", exclude={"managed_api_key", "openrouter_api_key", "glm_api_key"})
        data["display_name"] = self.display_name
        data["api_keys"] = self.masked_keys()
        return data
