import pytest

from image_api.core.config import AppConfig
from image_api.core.utils.constants import DEFAULT_ALLOWED_MIME_TYPES, MAX_UPLOAD_SIZE


class TestAppConfigFromEnv:
    def test_defaults(self) -> None:
        config = AppConfig.from_env({})

        assert config.port == 8080
        assert config.bucket is None
        assert config.static_dir == "./static"
        assert config.allowed_mime_types == DEFAULT_ALLOWED_MIME_TYPES
        assert config.max_upload_size == MAX_UPLOAD_SIZE
        assert config.key_prefix == ""
        assert config.aws_endpoint_url is None

    def test_reads_environment(self) -> None:
        config = AppConfig.from_env(
            {
                "PORT": "9090",
                "BUCKET": "photos",
                "STATIC_DIR": "/srv/static",
                "ALLOWED_MIME_TYPES": "image/png, image/webp,,",
                "MAX_UPLOAD_SIZE": "1024",
                "IMAGE_KEY_PREFIX": "/uploads/",
                "AWS_ENDPOINT_URL": "http://localhost:4566",
                "AWS_REGION": "eu-west-1",
            }
        )

        assert config.port == 9090
        assert config.bucket == "photos"
        assert config.static_dir == "/srv/static"
        assert config.allowed_mime_types == ("image/png", "image/webp")
        assert config.max_upload_size == 1024
        assert config.key_prefix == "uploads/"
        assert config.aws_endpoint_url == "http://localhost:4566"
        assert config.aws_region == "eu-west-1"

    def test_empty_port_falls_back_to_default(self) -> None:
        assert AppConfig.from_env({"PORT": ""}).port == 8080

    def test_invalid_port_rejected(self) -> None:
        with pytest.raises(ValueError):
            AppConfig.from_env({"PORT": "not-a-port"})

    def test_uses_os_environ_by_default(self, monkeypatch) -> None:
        monkeypatch.setenv("BUCKET", "from-env")
        monkeypatch.setenv("PORT", "8181")

        config = AppConfig.from_env()

        assert config.bucket == "from-env"
        assert config.port == 8181


class TestRequireBucket:
    def test_returns_bucket(self) -> None:
        assert AppConfig(bucket="photos").require_bucket() == "photos"

    def test_missing_bucket_raises(self) -> None:
        with pytest.raises(RuntimeError, match="BUCKET"):
            AppConfig().require_bucket()


class TestRequireStaticDir:
    def test_existing_directory(self, tmp_path) -> None:
        assert AppConfig(static_dir=str(tmp_path)).require_static_dir() == str(tmp_path)

    def test_missing_directory(self, tmp_path) -> None:
        with pytest.raises(RuntimeError, match="STATIC_DIR"):
            AppConfig(static_dir=str(tmp_path / "nope")).require_static_dir()

    def test_file_is_not_a_directory(self, tmp_path) -> None:
        path = tmp_path / "index.html"
        path.write_text("<h1>hi</h1>", encoding="utf-8")

        with pytest.raises(RuntimeError):
            AppConfig(static_dir=str(path)).require_static_dir()
