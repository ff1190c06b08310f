"""Unit tests for profile name validation."""

import pytest

from confstore.utils.names import DEFAULT_PROFILE, is_valid_profile_name, validate_profile_name


class TestIsValidProfileName:
    """Test is_valid_profile_name function."""

    @pytest.mark.parametrize("name", ["config", "dev", "my-profile", "prod.yaml", ".hidden"])
    def test_valid(self, name):
        assert is_valid_profile_name(name) is True

    @pytest.mark.parametrize("name", ["", ".", "..", "a/b", "/abs", "nul\0byte"])
    def test_invalid(self, name):
        assert is_valid_profile_name(name) is False

    def test_default_profile_is_valid(self):
        assert is_valid_profile_name(DEFAULT_PROFILE)
        assert DEFAULT_PROFILE == "config"


class TestValidateProfileName:
    """Test validate_profile_name function."""

    def test_returns_name(self):
        assert validate_profile_name("dev") == "dev"

    def test_raises_with_name_in_message(self):
        with pytest.raises(ValueError, match="'a/b'"):
            validate_profile_name("a/b")

    def test_rejects_non_string(self):
        with pytest.raises(ValueError):
            validate_profile_name(None)  # type: ignore[arg-type]
