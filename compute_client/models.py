from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from compute_client.flavors import Flavor


@dataclass(frozen=True)
class SecurityGroupRef:
    name: str


def _freeze_metadata(metadata: Mapping | None) -> Mapping[str, str]:
    return MappingProxyType(
        {str(key): str(value) for key, value in (metadata or {}).items()}
    )


def _freeze_security_groups(
    groups: Iterable[SecurityGroupRef | str] | None,
) -> tuple[SecurityGroupRef, ...]:
    frozen: list[SecurityGroupRef] = []
    for group in groups or ():
        if not isinstance(group, SecurityGroupRef):
            group = SecurityGroupRef(name=str(group))
        # nameless references are dropped
        if group.name:
            frozen.append(group)
    return tuple(frozen)


def _optional_int(value: int | str | None) -> int | None:
    if value is None or value == "":
        return None
    return int(value)


@dataclass(frozen=True)
class ProvisionRequest:
    """Desired server as filled in by an operator before submission.

    Empty or ``None`` optional fields mean "let the
    provider pick its default"; the encoder leaves such fields off the wire.
    ``flavor`` is normalized to a ``Flavor`` member, so an unknown tier raises
    ``InvalidFlavor`` here rather than at encode time.
    """

    flavor: Flavor | int | str
    image: int
    name: str
    key_name: str = ""
    personality: str = ""
    use_config_drive: bool = False
    min_count: int | None = None
    max_count: int | None = None
    user_data: str | bytes = ""
    metadata: Mapping[str, str] = field(default_factory=dict)
    security_groups: tuple[SecurityGroupRef, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "flavor", Flavor.parse(self.flavor))
        object.__setattr__(self, "metadata", _freeze_metadata(self.metadata))
        object.__setattr__(
            self, "security_groups", _freeze_security_groups(self.security_groups)
        )

    @classmethod
    def from_dict(cls, data: Mapping) -> "ProvisionRequest":
        """Build a request from a loosely typed mapping such as a JSON file."""
        metadata = data.get("metadata") or {}
        if not isinstance(metadata, Mapping):
            raise TypeError(f"metadata must be an object, got {type(metadata).__name__}")
        groups = []
        for group in data.get("security_groups") or []:
            if isinstance(group, Mapping):
                groups.append(SecurityGroupRef(name=str(group.get("name") or "")))
            else:
                groups.append(SecurityGroupRef(name=str(group)))
        return cls(
            flavor=data.get("flavor", 0),
            image=int(data.get("image") or 0),
            name=str(data.get("name") or ""),
            key_name=str(data.get("key_name") or ""),
            personality=str(data.get("personality") or ""),
            use_config_drive=bool(data.get("use_config_drive", False)),
            min_count=_optional_int(data.get("min_count")),
            max_count=_optional_int(data.get("max_count")),
            user_data=data.get("user_data") or "",
            metadata=metadata,
            security_groups=tuple(groups),
        )
