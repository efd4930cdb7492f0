import json
from typing import Any

from .optional import Optional


def json_default(obj: object) -> object:
    """
    ``json.dumps(..., default=json_default)`` に渡すフック。

    Optional は present なら値そのもの、空なら null として書き出される。
    """
    if isinstance(obj, Optional):
        return obj.to_json()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def dumps(obj: object, **kwargs: Any) -> str:
    return json.dumps(obj, default=json_default, **kwargs)
