#!/usr/bin/env python3
"""
Seed script to populate the bucket through the Image API.

Run:
    python seed/seed_images.py \
      --base-url http://localhost:8080/api/v1 \
      --images-dir seed/images
"""

import argparse
import mimetypes
from pathlib import Path
import sys

from aws_lambda_powertools import Logger
import requests

logger = Logger(service="seed")

DEFAULT_BASE_URL = "http://localhost:8080/api/v1"
UPLOAD_FIELD_NAME = "myFile"


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed images via Image API")

    parser.add_argument(
        "--base-url",
        default=DEFAULT_BASE_URL,
        help="API base URL (default: %(default)s)",
    )
    parser.add_argument(
        "--images-dir",
        type=Path,
        default=Path(__file__).parent / "images",
        help="Directory holding the images to upload",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of images to seed",
    )

    return parser.parse_args()


def find_images(images_dir: Path, limit: int | None) -> list[Path]:
    files = sorted(path for path in images_dir.iterdir() if path.is_file())
    return files[:limit] if limit is not None else files


def seed_images() -> None:
    try:
        args = parse_args()

        if not args.images_dir.is_dir():
            logger.error("Images directory not found", extra={"path": str(args.images_dir)})
            sys.exit(1)

        upload_url = f"{args.base_url.rstrip('/')}/image"

        logger.info(
            "Starting seeding process",
            extra={"api_base_url": upload_url, "images_dir": str(args.images_dir)},
        )

        failures = 0
        for image_path in find_images(args.images_dir, args.limit):
            content_type = mimetypes.guess_type(image_path.name)[0] or "application/octet-stream"

            with open(image_path, "rb") as f:
                response = requests.post(
                    upload_url,
                    files={UPLOAD_FIELD_NAME: (image_path.name, f, content_type)},
                    timeout=30,
                )

            if response.status_code == 201:
                logger.info("Seeded image", extra={"image": image_path.name})
            else:
                failures += 1
                logger.error(
                    "Failed to seed image",
                    extra={
                        "image": image_path.name,
                        "status": response.status_code,
                        "response": response.text,
                    },
                )

        list_response = requests.get(upload_url, timeout=30)
        logger.info(
            "List images response",
            extra={
                "status": list_response.status_code,
                "images": [image["id"] for image in list_response.json()] if list_response.ok else list_response.text,
            },
        )

        if failures:
            logger.error("Seeding finished with failures", extra={"failures": failures})
            sys.exit(1)

        logger.info("Seeding completed")

    except requests.RequestException as exc:
        logger.exception("Seeding failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    seed_images()
