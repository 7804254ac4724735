#!/usr/bin/env python3
"""
Cleanup script to remove every image through the Image API.

Run:
    python seed/cleanup_images.py --base-url http://localhost:8080/api/v1
"""

import argparse
import sys
from typing import Any, cast

from aws_lambda_powertools import Logger
import requests

logger = Logger(service="cleanup")

DEFAULT_BASE_URL = "http://localhost:8080/api/v1"


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Delete images via Image API")

    parser.add_argument(
        "--base-url",
        default=DEFAULT_BASE_URL,
        help="API base URL (default: %(default)s)",
    )

    return parser.parse_args()


def cleanup_images() -> None:
    try:
        args = parse_args()

        base_url = f"{args.base_url.rstrip('/')}/image"

        logger.info("Starting cleanup process", extra={"api_base_url": base_url})

        response = requests.get(base_url, timeout=30)

        if not response.ok:
            logger.error(
                "Failed to list images",
                extra={"status": response.status_code, "response": response.text},
            )
            sys.exit(1)

        images = cast(list[dict[str, Any]], response.json())

        if not images:
            logger.info("No images found for cleanup")
            return

        failures = 0
        for image in images:
            image_id = image["id"]

            delete_resp = requests.delete(
                f"{base_url}/{requests.utils.quote(image_id, safe='')}",
                timeout=30,
            )

            if delete_resp.ok:
                logger.info("Deleted image", extra={"image_id": image_id})
            else:
                failures += 1
                logger.error(
                    "Failed to delete image",
                    extra={
                        "image_id": image_id,
                        "status": delete_resp.status_code,
                        "response": delete_resp.text,
                    },
                )

        if failures:
            logger.error("Cleanup finished with failures", extra={"failures": failures})
            sys.exit(1)

        logger.info("Cleanup completed successfully")

    except requests.RequestException as exc:
        logger.exception("Cleanup failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    cleanup_images()
