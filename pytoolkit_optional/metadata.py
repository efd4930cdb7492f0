import tomllib
from functools import cache
from pathlib import Path
from typing import NotRequired, Required, cast

from typing_extensions import ReadOnly, TypedDict

# ソースチェックアウト (または editable install) でのみ存在する。wheel には含まれない
PYPROJECT_PATH = Path(__file__).parent.parent / "pyproject.toml"

# PEP 621 のキーにはハイフンが含まれるため関数形式で定義する
ProjectInfo = TypedDict(
    "ProjectInfo",
    {
        "name": ReadOnly[Required[str]],
        "version": ReadOnly[NotRequired[str]],
        "description": ReadOnly[NotRequired[str]],
        "requires-python": ReadOnly[NotRequired[str]],
        "keywords": ReadOnly[NotRequired[list[str]]],
        "dependencies": ReadOnly[NotRequired[list[str]]],
        "optional-dependencies": ReadOnly[NotRequired[dict[str, list[str]]]],
    },
)


class PyProjectToml(TypedDict, total=False):
    """pyproject.toml のうち参照する部分の型定義

    https://peps.python.org/pep-0621/
    """

    project: ReadOnly[Required[ProjectInfo]]


@cache
def get_package_metadata(path: Path = PYPROJECT_PATH) -> PyProjectToml:
    """Return the package metadata."""
    with path.open("rb") as f:
        return cast(PyProjectToml, tomllib.load(f))


def get_name(path: Path = PYPROJECT_PATH) -> str:
    return get_package_metadata(path)["project"]["name"]


def get_version(path: Path = PYPROJECT_PATH) -> str:
    return get_package_metadata(path)["project"].get("version", "unknown")
