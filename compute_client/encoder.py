"""Encoder for the create-server request body.

The wire protocol reads an absent optional field as "use the provider
default", so empty and zero-valued fields are left out
rather than sent as nulls or zeros. The document is assembled as an ordered
dict and handed to ``json.dumps``; no punctuation is written by hand.
"""

import base64
import json
from typing import Any

from compute_client.errors import (
    InvalidFlavor,
    MissingImage,
    MissingName,
    PersonalityTooLarge,
    RequestValidationError,
)
from compute_client.flavors import Flavor
from compute_client.models import ProvisionRequest


PERSONALITY_MAX_BYTES = 255

__all__ = [
    "PERSONALITY_MAX_BYTES",
    "InvalidFlavor",
    "MissingImage",
    "MissingName",
    "PersonalityTooLarge",
    "RequestValidationError",
    "build_server_document",
    "encode_server_request",
]


def _encode_user_data(user_data: str | bytes) -> str:
    raw = user_data if isinstance(user_data, bytes) else user_data.encode("utf-8")
    return base64.b64encode(raw).decode("ascii")


def build_server_document(request: ProvisionRequest) -> dict[str, Any]:
    flavor = Flavor.parse(request.flavor)
    if not request.image:
        raise MissingImage()
    if not request.name:
        raise MissingName()
    personality_size = len(request.personality.encode("utf-8"))
    if personality_size > PERSONALITY_MAX_BYTES:
        raise PersonalityTooLarge(personality_size, PERSONALITY_MAX_BYTES)

    server: dict[str, Any] = {
        "flavorRef": int(flavor),
        "imageRef": int(request.image),
        "name": request.name,
    }
    if request.personality:
        server["personality"] = request.personality
    if request.key_name:
        server["key_name"] = request.key_name
    if request.use_config_drive:
        server["config_drive"] = True
    if request.min_count is not None and request.min_count > 0:
        server["min_count"] = int(request.min_count)
    if request.max_count is not None and request.max_count > 0:
        server["max_count"] = int(request.max_count)
    if request.user_data:
        server["user_data"] = _encode_user_data(request.user_data)
    if request.metadata:
        server["metadata"] = {
            key: request.metadata[key] for key in sorted(request.metadata)
        }
    if request.security_groups:
        server["security_groups"] = [
            {"name": group.name} for group in request.security_groups
        ]
    return {"server": server}


def encode_server_request(request: ProvisionRequest) -> bytes:
    """Validate ``request`` and return the UTF-8 JSON body for create-server.

    Raises a ``RequestValidationError`` subclass naming the first violated
    field; no bytes are produced in that case.
    """
    document = build_server_document(request)
    return json.dumps(document, ensure_ascii=False).encode("utf-8")
