from enum import IntEnum

from compute_client.errors import InvalidFlavor


class Flavor(IntEnum):
    """Server tiers, smallest to largest, keyed by the provider's flavor code."""

    XSMALL = 100
    SMALL = 101
    MEDIUM = 102
    LARGE = 103
    XLARGE = 104
    XXLARGE = 105

    @classmethod
    def parse(cls, value: "Flavor | int | str") -> "Flavor":
        if isinstance(value, cls):
            return value
        # bool is an int subclass; True would otherwise look like code 1
        if isinstance(value, bool):
            raise InvalidFlavor(value)
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError as exc:
                raise InvalidFlavor(value) from exc
        if isinstance(value, str):
            key = value.strip().upper().replace("-", "").replace("_", "")
            if key.isdecimal():
                return cls.parse(int(key))
            for member in cls:
                if member.name == key:
                    return member
        raise InvalidFlavor(value)


FLAVOR_CODES: frozenset[int] = frozenset(member.value for member in Flavor)
