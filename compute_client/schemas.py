from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Link(_Record):
    href: str = ""
    rel: str = ""


class IDLink(_Record):
    name: str = ""
    id: str | int = ""
    links: list[Link] = Field(default_factory=list)


class ServerDetail(_Record):
    status: str = ""
    updated: str = Field(default="", alias="update")
    host_id: str = Field(default="", alias="hostId")
    user_id: str | int = ""
    name: str = ""
    links: list[Link] = Field(default_factory=list)
    addresses: Any = None
    tenant_id: str | int = ""
    image: IDLink = Field(default_factory=IDLink)
    created: str = ""
    uuid: str = ""
    access_ipv4: str = Field(default="", alias="accessIPv4")
    access_ipv6: str = Field(default="", alias="accessIPv6")
    key_name: str | None = None
    admin_pass: str = Field(default="", alias="adminPass")
    flavor: IDLink = Field(default_factory=IDLink)
    config_drive: str | bool = ""
    id: int | str = 0
    security_groups: list[IDLink] = Field(default_factory=list)
    metadata: dict[str, str] = Field(default_factory=dict)


class ServerResponse(_Record):
    server: ServerDetail


class ImageDetail(_Record):
    name: str = ""
    id: str | int = ""
    links: list[Link] = Field(default_factory=list)
    progress: int = 0
    metadata: dict[str, str] = Field(default_factory=dict)
    status: str = ""
    updated: str = ""


class ImageResponse(_Record):
    image: ImageDetail


class ImageList(_Record):
    images: list[IDLink] = Field(default_factory=list)


class FlavorList(_Record):
    flavors: list[IDLink] = Field(default_factory=list)


RecordT = TypeVar("RecordT", bound=BaseModel)


def parse_response(model: type[RecordT], body: bytes) -> RecordT:
    return model.model_validate_json(body)
