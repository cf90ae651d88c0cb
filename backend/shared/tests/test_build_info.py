"""Tests for shared.build_info module."""

import importlib
import os
from importlib.metadata import PackageNotFoundError
from unittest.mock import patch

import shared.build_info as build_info_module


class TestInstalledVersion:
    def test_returns_distribution_version(self):
        with patch("shared.build_info.version", return_value="0.3.0") as mock_version:
            assert build_info_module._installed_version() == "0.3.0"
        mock_version.assert_called_once_with("poker-league")

    def test_returns_dev_when_not_installed(self):
        with patch("shared.build_info.version", side_effect=PackageNotFoundError):
            assert build_info_module._installed_version() == "dev"


class TestModuleLevelConstants:
    def test_app_version_reads_from_env(self):
        with patch.dict("os.environ", {"APP_VERSION": "1.2.3"}):
            importlib.reload(build_info_module)
            assert build_info_module.APP_VERSION == "1.2.3"
        importlib.reload(build_info_module)

    def test_app_version_falls_back_to_metadata(self):
        with patch.dict("os.environ", {}, clear=False):
            os.environ.pop("APP_VERSION", None)
            importlib.reload(build_info_module)
            assert build_info_module.APP_VERSION == build_info_module._installed_version()
        importlib.reload(build_info_module)
