class RequestValidationError(ValueError):
    """A provisioning request violates one invariant; nothing was sent."""

    def __init__(self, *, field: str, detail: str):
        self.field = field
        self.detail = detail
        super().__init__(f"invalid provisioning request field={field}: {detail}")


class InvalidFlavor(RequestValidationError):
    def __init__(self, value: object):
        self.value = value
        super().__init__(
            field="flavor", detail=f"flavor {value!r} is not a known tier code"
        )


class MissingImage(RequestValidationError):
    def __init__(self) -> None:
        super().__init__(field="image", detail="an image reference is required")


class MissingName(RequestValidationError):
    def __init__(self) -> None:
        super().__init__(field="name", detail="a server name is required")


class PersonalityTooLarge(RequestValidationError):
    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(
            field="personality",
            detail=f"personality is {size} bytes, limit is {limit}",
        )
