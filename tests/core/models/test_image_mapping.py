"""
Unit tests for the stored object -> image mapping.
"""

import base64

import pytest

from image_api.core.models.errors import ImageMappingError
from image_api.core.models.image import (
    Image,
    StoredObject,
    image_from_object,
    images_from_objects,
)


class TestImageFromObject:
    def test_maps_all_fields(self, sample_png_bytes) -> None:
        obj = StoredObject(
            name="cat.png",
            content=sample_png_bytes,
            content_type="image/png",
            size=len(sample_png_bytes),
            updated_at="2024-01-01T10:00:00+00:00",
        )

        image = image_from_object(obj)

        assert image.id == "cat.png"
        assert image.name == "cat.png"
        assert image.content == base64.b64encode(sample_png_bytes).decode()
        assert image.decoded_content() == sample_png_bytes
        assert image.content_type == "image/png"
        assert image.size == len(sample_png_bytes)
        assert image.updated_at == "2024-01-01T10:00:00+00:00"

    def test_size_is_taken_from_content(self) -> None:
        obj = StoredObject(name="a.gif", content=b"GIF89a", content_type="image/gif", size=999)

        assert image_from_object(obj).size == 6

    def test_sniffs_content_type_when_missing(self, sample_jpeg_bytes) -> None:
        obj = StoredObject(name="photo", content=sample_jpeg_bytes)

        assert image_from_object(obj).content_type == "image/jpeg"

    def test_sniffs_content_type_when_generic(self, sample_gif_bytes) -> None:
        obj = StoredObject(
            name="anim",
            content=sample_gif_bytes,
            content_type="application/octet-stream",
        )

        assert image_from_object(obj).content_type == "image/gif"

    def test_unknown_content_falls_back_to_octet_stream(self) -> None:
        obj = StoredObject(name="notes.txt", content=b"hello")

        assert image_from_object(obj).content_type == "application/octet-stream"

    def test_empty_content_is_mapped(self) -> None:
        obj = StoredObject(name="empty.png", content=b"", content_type="image/png")

        image = image_from_object(obj)

        assert image.content == ""
        assert image.size == 0

    def test_unreadable_content_fails(self) -> None:
        obj = StoredObject(name="broken.png", content=None, content_type="image/png")

        with pytest.raises(ImageMappingError, match="broken.png") as exc:
            image_from_object(obj)

        assert exc.value.error_code == "IMAGE_MAPPING_FAILED"
        assert exc.value.details == {"name": "broken.png"}


class TestImagesFromObjects:
    def test_preserves_order(self) -> None:
        objects = [
            StoredObject(name=name, content=name.encode(), content_type="image/png")
            for name in ("c.png", "a.png", "b.png")
        ]

        images = images_from_objects(objects)

        assert [image.id for image in images] == ["c.png", "a.png", "b.png"]
        assert all(isinstance(image, Image) for image in images)

    def test_empty_input(self) -> None:
        assert images_from_objects([]) == []

    def test_all_or_nothing(self) -> None:
        objects = [
            StoredObject(name="ok.png", content=b"x", content_type="image/png"),
            StoredObject(name="bad.png", content=None, content_type="image/png"),
            StoredObject(name="never.png", content=b"y", content_type="image/png"),
        ]

        with pytest.raises(ImageMappingError, match="bad.png"):
            images_from_objects(objects)

    def test_accepts_generators(self) -> None:
        objects = (
            StoredObject(name=f"{i}.png", content=b"x", content_type="image/png")
            for i in range(3)
        )

        assert len(images_from_objects(objects)) == 3


def test_stored_object_requires_name() -> None:
    with pytest.raises(ValueError):
        StoredObject(name="", content=b"x")
