"""metadataモジュールのテスト。"""

from pathlib import Path

import pytest

from pytoolkit_optional.metadata import (
    PYPROJECT_PATH,
    get_name,
    get_package_metadata,
    get_version,
)


class TestMetadata:
    """pyproject.toml 読み込みのテストクラス。"""

    def test_project_table(self) -> None:
        """プロジェクトの pyproject.toml から name と version が読み込まれる。"""
        metadata = get_package_metadata()

        assert metadata["project"]["name"] == "pytoolkit-optional"
        assert get_name() == "pytoolkit-optional"
        assert get_version() == metadata["project"]["version"]
        assert PYPROJECT_PATH.name == "pyproject.toml"

    def test_version_missing(self, tmp_path: Path) -> None:
        """version が無い場合は unknown が返される。"""
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "sample"\n', encoding="utf-8")

        assert get_name(path) == "sample"
        assert get_version(path) == "unknown"

    def test_pyproject_missing_raises(self, tmp_path: Path) -> None:
        """pyproject.toml が無い環境 (wheel インストールなど) では FileNotFoundError が発生する。"""
        with pytest.raises(FileNotFoundError):
            get_package_metadata(tmp_path / "pyproject.toml")
