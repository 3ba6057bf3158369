"""Tests for exception types."""

import pytest

from appcast_tool.exceptions import (
    AppcastError,
    AssetNotFoundError,
    InvalidConfigError,
    InvalidKeyError,
    MissingRequiredFieldError,
    MissingSecretError,
    ProviderConstructionError,
    ReleaseNotFoundError,
    UnknownProviderKindError,
)


@pytest.mark.parametrize(
    "error",
    [
        UnknownProviderKindError("source", "s3"),
        ProviderConstructionError("target", "file", ValueError("boom")),
        ReleaseNotFoundError("v1.0.0"),
        AssetNotFoundError("v1.0.0", "app.dmg"),
        MissingSecretError("rsa_key"),
        InvalidKeyError("bad key"),
        MissingRequiredFieldError("apk.key-name"),
        InvalidConfigError("bad block"),
    ],
)
def test_all_errors_are_appcast_errors(error):
    """Every error can be caught as AppcastError."""
    assert isinstance(error, AppcastError)


def test_lookup_errors():
    """Not-found errors are LookupErrors and keep their keys."""
    release_error = ReleaseNotFoundError("v2")
    asset_error = AssetNotFoundError("v2", "app.apk")

    assert isinstance(release_error, LookupError)
    assert isinstance(asset_error, LookupError)
    assert release_error.version == "v2"
    assert (asset_error.version, asset_error.name) == ("v2", "app.apk")
    assert "app.apk" in str(asset_error)


def test_missing_secret_is_distinct_from_invalid_key():
    """A missing secret and a malformed one are different kinds of error."""
    assert not issubclass(MissingSecretError, InvalidKeyError)
    assert not issubclass(InvalidKeyError, MissingSecretError)


def test_error_messages():
    """Errors carry readable messages and attributes."""
    cause = ValueError("no path")
    construction = ProviderConstructionError("source", "file", cause)

    assert construction.cause is cause
    assert "no path" in str(construction)
    assert str(UnknownProviderKindError("source", "s3")) == "unknown source provider type: 's3'"
    assert MissingRequiredFieldError("apk.key-name").field_name == "apk.key-name"
    assert "required by apk" in str(MissingSecretError("rsa_key", "apk"))
