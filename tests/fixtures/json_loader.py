import copy
import json
from pathlib import Path
from typing import Any, Dict


class TestDataLoader:
    """Canned accounts and video payloads from test_data.json; callers get copies"""

    _data: Dict[str, Any] = None

    @classmethod
    def load(cls) -> Dict[str, Any]:
        if cls._data is None:
            cls._data = json.loads((Path(__file__).parent / "test_data.json").read_text())
        return cls._data

    @classmethod
    def user(cls, name: str) -> Dict[str, str]:
        """Register/login payload for a named user"""
        return copy.deepcopy(cls.load()["users"][name])

    @classmethod
    def users(cls) -> Dict[str, Dict[str, str]]:
        return copy.deepcopy(cls.load()["users"])

    @classmethod
    def video(cls, **overrides) -> Dict[str, Any]:
        """Create-video payload, optionally with fields replaced"""
        payload = copy.deepcopy(cls.load()["video"])
        payload.update(overrides)
        return payload
