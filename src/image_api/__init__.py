"""Image API Package."""

__version__ = "1.0.0"
__description__ = (
    "REST API for uploading, listing, reading, replacing and deleting "
    "images stored in an S3 bucket"
)

__all__ = ["app", "handlers", "core"]
