import json
import logging
from typing import Protocol

import httpx

from compute_client.clients.http import send_request
from compute_client.config import Settings, get_settings
from compute_client.encoder import encode_server_request
from compute_client.models import ProvisionRequest
from compute_client.schemas import (
    FlavorList,
    ImageList,
    ImageResponse,
    ServerResponse,
    parse_response,
)


logger = logging.getLogger(__name__)

HARD_REBOOT_BODY = json.dumps({"reboot": {"type": "HARD"}}).encode("utf-8")


class Transport(Protocol):
    def send(self, path: str, method: str, body: bytes | None = None) -> bytes: ...


class ComputeTransport:
    """Sends requests relative to the tenant's compute endpoint."""

    def __init__(
        self,
        compute_url: str,
        tenant_id: str,
        auth_token: str | None = None,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ):
        base_url = compute_url.rstrip("/")
        if tenant_id:
            base_url = f"{base_url}/{tenant_id.strip('/')}"
        headers = {"Accept": "application/json"}
        if auth_token:
            headers["X-Auth-Token"] = auth_token
        self.client = httpx.Client(
            base_url=f"{base_url}/",
            timeout=timeout,
            headers=headers,
            transport=transport,
        )

    def send(self, path: str, method: str, body: bytes | None = None) -> bytes:
        headers = {"Content-Type": "application/json"} if body is not None else None
        response = send_request(
            self.client, method, path.lstrip("/"), content=body, headers=headers
        )
        return response.content

    def close(self) -> None:
        self.client.close()


class ComputeClient:
    def __init__(self, transport: Transport):
        self.transport = transport

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "ComputeClient":
        settings = settings or get_settings()
        return cls(
            ComputeTransport(
                settings.compute_url,
                settings.tenant_id,
                auth_token=settings.auth_token,
                timeout=settings.timeout_sec,
            )
        )

    def create_server(self, request: ProvisionRequest) -> ServerResponse:
        body = encode_server_request(request)
        logger.info(
            "creating server name=%s flavor=%s image=%s",
            request.name,
            int(request.flavor),
            request.image,
        )
        raw = self.transport.send("servers", "POST", body)
        return parse_response(ServerResponse, raw)

    def delete_server(self, server_id: str | int) -> None:
        logger.info("deleting server server_id=%s", server_id)
        self.transport.send(f"servers/{server_id}", "DELETE", None)

    def reboot_server(self, server_id: str | int) -> None:
        # the provider performs a hard reboot whatever type is requested
        logger.info("rebooting server server_id=%s", server_id)
        self.transport.send(f"servers/{server_id}/action", "POST", HARD_REBOOT_BODY)

    def list_flavors(self) -> FlavorList:
        return parse_response(FlavorList, self.transport.send("flavors", "GET", None))

    def list_images(self) -> ImageList:
        return parse_response(ImageList, self.transport.send("images", "GET", None))

    def get_image(self, image_id: str | int) -> ImageResponse:
        raw = self.transport.send(f"images/{image_id}", "GET", None)
        return parse_response(ImageResponse, raw)

    def delete_image(self, image_id: str | int) -> None:
        logger.info("deleting image image_id=%s", image_id)
        self.transport.send(f"images/{image_id}", "DELETE", None)
