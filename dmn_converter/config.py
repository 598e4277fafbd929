"""
Converter configuration.

DEFAULTS is the single table of fallback values applied when the editor JSON
leaves a field out. ConverterOptions holds per-call switches; its defaults can
be overridden through environment variables.
"""

import logging
import os
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from dmn_converter.models.dmn import ClauseType, DecisionTableOrientation, HitPolicy

MODEL_NAMESPACE = "https://www.omg.org/spec/DMN/20191111/MODEL/"
URI_JSON = "http://www.ecma-international.org/ecma-262/5.1/"
DEFINITION_ID_PREFIX = "definition_"
WILDCARD = "-"


class UnknownKeyPolicy(str, Enum):
    """What to do with a rule key that matches no declared clause."""

    IGNORE = "ignore"
    WARN = "warn"
    ERROR = "error"


DEFAULTS: dict[str, Any] = {
    "hit_policy": HitPolicy.ANY,
    "preferred_orientation": DecisionTableOrientation.RULE_AS_ROW,
    "aggregation": None,
    "type_ref": ClauseType.STRING.value,
    "value_list": None,
    "wildcard": WILDCARD,
    "definition_id_prefix": DEFINITION_ID_PREFIX,
    "namespace": MODEL_NAMESPACE,
    "type_language": URI_JSON,
    "unknown_key_policy": UnknownKeyPolicy.WARN,
}

UNKNOWN_KEY_POLICY_ENV = "DMN_CONVERTER_UNKNOWN_KEY_POLICY"
INFER_TYPES_ENV = "DMN_CONVERTER_INFER_TYPES"

logger = logging.getLogger(__name__)


def unknown_key_policy_from_env() -> UnknownKeyPolicy:
    """Policy from the environment; unrecognized values fall back to the default."""
    default = DEFAULTS["unknown_key_policy"]
    raw = os.getenv(UNKNOWN_KEY_POLICY_ENV, default.value).strip().lower()
    try:
        return UnknownKeyPolicy(raw)
    except ValueError:
        logger.warning("Invalid %s=%r, using %s", UNKNOWN_KEY_POLICY_ENV, raw, default.value)
        return default


def infer_types_from_env() -> bool:
    return os.getenv(INFER_TYPES_ENV, "1").strip().lower() in ("1", "true", "yes")


class ConverterOptions(BaseModel):
    """Options for a single conversion call."""

    unknown_key_policy: UnknownKeyPolicy = Field(
        default_factory=unknown_key_policy_from_env,
        description="Rule keys with no matching clause: ignore | warn | error",
    )
    infer_types: bool = Field(
        default_factory=infer_types_from_env,
        description="Infer missing clause types from rule values (otherwise default to string)",
    )
    namespace: str = Field(default=DEFAULTS["namespace"], description="Namespace set on the Definition")
    type_language: str = Field(default=DEFAULTS["type_language"], description="Type language URI set on the Definition")

    model_config = {"frozen": True}
