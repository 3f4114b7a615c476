import argparse
import json
import logging
import sys
from pathlib import Path

from compute_client.encoder import RequestValidationError, encode_server_request
from compute_client.logging_config import configure_logging
from compute_client.models import ProvisionRequest


logger = logging.getLogger(__name__)


def render(path: Path) -> bytes:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path} must hold a JSON object")
    return encode_server_request(ProvisionRequest.from_dict(data))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Render a provisioning request file as a create-server body."
    )
    parser.add_argument("request_file", type=Path)
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        payload = render(args.request_file)
    except RequestValidationError as exc:
        logger.debug("rejected %s field=%s", args.request_file, exc.field)
        print(str(exc), file=sys.stderr)
        return 1
    except (OSError, ValueError, TypeError) as exc:
        logger.debug("could not read %s", args.request_file, exc_info=True)
        print(f"cannot render {args.request_file}: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(payload.decode("utf-8"))
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
