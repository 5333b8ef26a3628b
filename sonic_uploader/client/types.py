"""Wire types for the Sonic server API.

The server speaks camelCase JSON; models accept either spelling on input
and always serialise with the camelCase aliases.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Platform(str, Enum):
    IOS = "iOS"
    ANDROID = "Android"
    UNKNOWN = "unknown"


class SonicModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class PackageMetadata(SonicModel):
    """Metadata recorded for one uploaded package.

    Serialised as ``{"pkgName", "url", "platform", "projectId", "branch",
    "buildUrl"}``.
    """

    pkg_name: str
    url: str
    platform: Platform
    project_id: int
    branch: str
    build_url: str

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class Project(SonicModel):
    """A Sonic project as returned by the project list endpoint."""

    id: int
    project_name: str = ""
    project_des: Optional[str] = None
    project_img: Optional[str] = None
