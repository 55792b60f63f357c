"""
Structural validation of token list documents.

The shape follows the tokenlists.org schema, restricted to the fields this
package consumes. Unknown keys (tags, keywords, other extensions) are ignored.
"""

import re
from dataclasses import dataclass, field
from typing import Annotated, Any, Dict, List, Optional, Tuple, Union

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    TypeAdapter,
)
from pydantic import ValidationError as PydanticValidationError

from ..utils.chain_address import ChainAddress, is_address


MAX_SAFE_INTEGER = 2 ** 53 - 1
MAX_TOKENS = 10_000

_ISO_TIMESTAMP_RE = re.compile(
    r"\d{4}-(?:0[1-9]|1[0-2])-(?:0[1-9]|[12]\d|3[01])"
    r"T(?:[01]\d|2[0-3]):[0-5]\d(?::[0-5]\d(?:\.\d{1,9})?)?"
    r"(?:Z|[+-](?:[01]\d|2[0-3])(?::?[0-5]\d)?)"
)
_DECIMAL_RE = re.compile(r"[0-9]+")
_URL_ADAPTER = TypeAdapter(AnyUrl)


def _check_address(value: str) -> str:
    if not is_address(value):
        raise ValueError("Invalid EVM address")
    return value


def _check_iso_timestamp(value: str) -> str:
    if not _ISO_TIMESTAMP_RE.fullmatch(value):
        raise ValueError("Invalid ISO-8601 timestamp")
    return value


def _check_url(value: str) -> str:
    try:
        _URL_ADAPTER.validate_python(value)
    except PydanticValidationError:
        raise ValueError("Invalid URL") from None
    # Keep the document's spelling; AnyUrl would normalize it.
    return value


def _integral_number(value: Any) -> Any:
    # JSON has one number type: 18.0 is the integer 18
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _parse_chain_id_key(value: Any) -> int:
    if not isinstance(value, str) or not _DECIMAL_RE.fullmatch(value):
        raise ValueError("Chain ID must be a decimal string")
    chain_id = int(value)
    if not 1 <= chain_id <= MAX_SAFE_INTEGER:
        raise ValueError("Chain ID must be a positive safe integer")
    return chain_id


Address = Annotated[StrictStr, AfterValidator(_check_address)]
IsoTimestamp = Annotated[StrictStr, AfterValidator(_check_iso_timestamp)]
Url = Annotated[StrictStr, AfterValidator(_check_url)]
ChainId = Annotated[StrictInt, Field(ge=1, le=MAX_SAFE_INTEGER), BeforeValidator(_integral_number)]
BridgedChainId = Annotated[int, BeforeValidator(_parse_chain_id_key)]
VersionNumber = Annotated[StrictInt, Field(ge=0, le=MAX_SAFE_INTEGER), BeforeValidator(_integral_number)]


class _DocumentModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class BridgeTarget(_DocumentModel):
    """The counterpart of a token on another chain."""

    token_address: Address = Field(alias="tokenAddress")


class TokenExtensions(_DocumentModel):
    bridge_info: Optional[Dict[BridgedChainId, BridgeTarget]] = Field(
        default=None, alias="bridgeInfo"
    )


class TokenInfo(_DocumentModel):
    """A single token entry of a token list."""

    chain_id: ChainId = Field(alias="chainId")
    address: Address
    name: StrictStr = Field(max_length=60)
    symbol: StrictStr = Field(max_length=20)
    decimals: Annotated[StrictInt, Field(ge=0, le=255), BeforeValidator(_integral_number)]
    logo_uri: Optional[Url] = Field(default=None, alias="logoURI")
    extensions: Optional[TokenExtensions] = None

    @property
    def chain_address(self) -> ChainAddress:
        return ChainAddress(self.chain_id, self.address)

    @property
    def bridged_chain_addresses(self) -> List[ChainAddress]:
        """Chain addresses declared in ``extensions.bridgeInfo``, in document order."""
        if self.extensions is None or not self.extensions.bridge_info:
            return []
        return [
            ChainAddress(chain_id, target.token_address)
            for chain_id, target in self.extensions.bridge_info.items()
        ]


class TokenListVersion(_DocumentModel):
    major: VersionNumber
    minor: VersionNumber
    patch: VersionNumber


class TokenList(_DocumentModel):
    """A token list document."""

    name: StrictStr
    timestamp: IsoTimestamp
    version: TokenListVersion
    tokens: List[TokenInfo] = Field(min_length=1, max_length=MAX_TOKENS)


@dataclass(frozen=True)
class ValidationIssue:
    """One structural problem, located by its path inside the document."""

    path: Tuple[Union[str, int], ...]
    reason: str

    def __str__(self) -> str:
        location = ".".join(str(part) for part in self.path) or "<root>"
        return f"{location}: {self.reason}"


@dataclass
class TokenListValidationResult:
    """Result from token list validation."""
    success: bool
    output: Optional[TokenList] = None
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        """Check if validation failed."""
        return not self.success


def validate_token_list(raw: Any) -> TokenListValidationResult:
    """
    Validate a parsed JSON document against the token list shape.

    All issues are collected; validation does not stop at the first one.

    Args:
        raw: Parsed JSON document

    Returns:
        TokenListValidationResult with the typed TokenList on success,
        or the list of issues on failure
    """
    try:
        token_list = TokenList.model_validate(raw)
    except PydanticValidationError as e:
        issues = [
            ValidationIssue(path=tuple(error["loc"]), reason=error["msg"])
            for error in e.errors()
        ]
        return TokenListValidationResult(success=False, issues=issues)

    return TokenListValidationResult(success=True, output=token_list)
