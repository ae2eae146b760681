"""Unit tests for the platform / framework / package catalog (cursorcraft.catalog)."""

from __future__ import annotations

import pytest

from cursorcraft.catalog import (
    PACKAGES,
    PLATFORMS,
    find_framework,
    get_frameworks_by_platform,
    get_packages_by_ids,
    get_packages_by_platform_and_framework,
    get_platform,
)
from cursorcraft.generator.models import Platform


class TestPlatforms:
    @pytest.mark.unit
    def test_one_entry_per_platform(self):
        assert [p.id for p in PLATFORMS] == list(Platform)

    @pytest.mark.unit
    def test_get_platform_accepts_enum_and_string(self):
        assert get_platform(Platform.API).name == "API Service"
        assert get_platform("Mobile").name == "Mobile Application"
        assert get_platform("tv") is None

    @pytest.mark.unit
    def test_frameworks_by_platform(self):
        ids = [f.id for f in get_frameworks_by_platform("mobile")]
        assert ids == ["react-native", "flutter", "ionic", "swift", "kotlin"]
        assert get_frameworks_by_platform("tv") == []


class TestPackages:
    @pytest.mark.unit
    def test_unique_ids(self):
        ids = [p.id for p in PACKAGES]
        assert len(ids) == len(set(ids))

    @pytest.mark.unit
    def test_vue_web_packages(self):
        ids = {p.id for p in get_packages_by_platform_and_framework("web", "vue")}
        assert {"vuex", "pinia", "tailwind", "testing-library", "zod"} <= ids
        assert "redux" not in ids
        assert "mui" not in ids

    @pytest.mark.unit
    def test_api_express_packages(self):
        ids = {p.id for p in get_packages_by_platform_and_framework(Platform.API, "express")}
        assert {"auth", "prisma", "jest", "axios", "zod"} <= ids
        assert "tailwind" not in ids

    @pytest.mark.unit
    def test_desktop_has_no_packages(self):
        assert get_packages_by_platform_and_framework("desktop", "electron") == []

    @pytest.mark.unit
    def test_packages_by_ids_in_catalog_order(self):
        assert [p.id for p in get_packages_by_ids(["zod", "auth", "missing"])] == ["auth", "zod"]


class TestFindFramework:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value,fw_id",
        [("next", "next"), ("Next.js", "next"), ("React Native", "react-native"), (" django ", "django")],
    )
    def test_by_id_or_name(self, value, fw_id):
        assert find_framework(value).id == fw_id

    @pytest.mark.unit
    def test_scoped_to_platform(self):
        assert find_framework("flutter", platform="web") is None
        assert find_framework("flutter", platform="mobile").name == "Flutter"

    @pytest.mark.unit
    def test_unknown(self):
        assert find_framework("rails") is None
