"""Domain data models — pure Python dataclasses."""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple, Union

from vyos_client.errors import VyOSDecodeError, VyOSValidationError

# API endpoints
ENDPOINT_CONFIGURE = "configure"
ENDPOINT_CONFIG_FILE = "config-file"
ENDPOINT_RETRIEVE = "retrieve"

# Action ops
OP_SET = "set"
OP_DELETE = "delete"
OP_SHOW_CONFIG = "showConfig"
OP_SAVE = "save"

IP_VERSION_4 = 4
IP_VERSION_6 = 6

# Every managed ethernet interface gets this MTU
DEFAULT_MTU = "1450"

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


@dataclass(frozen=True)
class Action:
    """One configuration mutation or query."""

    op: str
    path: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if isinstance(self.path, str):
            raise VyOSValidationError(
                f"path must be a sequence of segments, not a string: {self.path!r}"
            )
        # Accept any sequence; store as an immutable tuple of strings
        object.__setattr__(self, "path", tuple(str(p) for p in self.path))

    def to_dict(self) -> Dict[str, Any]:
        return {"op": self.op, "path": list(self.path)}


def encode_actions(actions: Union[Action, List[Action]]) -> str:
    """Serialize a single action as an object, a list as an array."""
    if isinstance(actions, Action):
        return json.dumps(actions.to_dict())
    return json.dumps([a.to_dict() for a in actions])


@dataclass
class ApiResponse:
    """The ``{success, error, data}`` envelope returned by the API."""

    success: bool
    error: Any = None
    data: Any = None

    @classmethod
    def from_json(cls, body: Union[bytes, str]) -> "ApiResponse":
        raw_bytes = body if isinstance(body, bytes) else body.encode("utf-8")
        try:
            payload = json.loads(body)
        except (ValueError, UnicodeDecodeError) as e:
            raise VyOSDecodeError(f"Invalid JSON response: {e}", raw_bytes)
        if not isinstance(payload, dict):
            raise VyOSDecodeError(
                f"Unexpected response type: {type(payload).__name__}", raw_bytes,
            )
        success = payload.get("success")
        if success is None:
            success = False
        if not isinstance(success, bool):
            raise VyOSDecodeError(
                f"Invalid success flag: {success!r}", raw_bytes,
            )
        return cls(
            success=success,
            error=payload.get("error"),
            data=payload.get("data"),
        )
