import copy
import json
from pathlib import Path
from typing import Any, Dict


class TestDataLoader:
    """Request payloads shared by the integration tests (tests/fixtures/test_data.json)"""

    _data: Dict[str, Any] = None

    @classmethod
    def load(cls) -> Dict[str, Any]:
        if cls._data is None:
            with open(Path(__file__).parent / "test_data.json") as f:
                cls._data = json.load(f)
        return cls._data

    @classmethod
    def get(cls, key: str) -> Any:
        return cls.load().get(key)

    @classmethod
    def get_copy(cls, key: str) -> Any:
        return copy.deepcopy(cls.get(key))

    @classmethod
    def provisioning_request(cls, organization_key: str, owner_email: str, **overrides) -> Dict:
        """Body for POST /organizations/with-new-owner, with organization fields overridden"""
        organization = cls.get_copy(organization_key)
        organization.update(overrides)
        return {"organization": organization, "owner": {"email": owner_email}}
