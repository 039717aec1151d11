"""Pydantic models shared across pare.

The models fall into two groups:

**Configuration** -- :class:`Config`, the ``{server, api_key}`` pair read
from ``~/.pare.json`` (keys ``Server`` and ``APIKey``) and overridden by
CLI flags.

**Wire protocol** -- request and response bodies exchanged with the
Condenser server: :class:`ShortenRequest`, :class:`ShortenResponse`,
:class:`DeleteRequest`, :class:`DeleteResponse`, :class:`MetaResponse`,
and :class:`LinkMetadata`.

Optional request fields are ``None`` when absent and are left out of the
serialized JSON entirely (see :func:`to_wire_json`), because the server
distinguishes "unspecified" from "empty". An empty string supplied for an
optional field is normalised to ``None``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

STATUS_DELETED = "deleted"
STATUS_NOEXIST = "noexist"


def _empty_to_none(value: Any) -> Any:
    if value == "":
        return None
    return value


# --- Configuration ---

_CONFIG_KEYS = {"apikey": "APIKey", "server": "Server"}


class Config(BaseModel):
    """Effective connection settings for a single invocation.

    Field aliases match the on-disk format::

        {"APIKey": "k1", "Server": "https://s.example"}

    Keys are matched case-insensitively (``apiKey`` and ``SERVER`` work too);
    an exact match wins over a differently-cased one. Unknown keys in the
    file are ignored. JSON ``null`` is read as an empty string.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    api_key: str = Field(default="", alias="APIKey")
    server: str = Field(default="", alias="Server")

    @model_validator(mode="before")
    @classmethod
    def _fold_key_case(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        folded = dict(data)
        for key, value in data.items():
            if not isinstance(key, str):
                continue
            alias = _CONFIG_KEYS.get(key.lower())
            if alias is not None and alias not in data:
                folded.setdefault(alias, value)
        return folded

    @field_validator("api_key", "server", mode="before")
    @classmethod
    def _null_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value


# --- Requests ---


class ShortenRequest(BaseModel):
    """Body of ``POST /api/shorten``.

    ``shortcode`` is sent as ``code``; both it and ``meta`` are omitted from
    the JSON when absent.
    """

    model_config = ConfigDict(populate_by_name=True)

    url: str
    shortcode: Optional[str] = Field(default=None, alias="code")
    meta: Optional[str] = None

    @field_validator("shortcode", "meta", mode="before")
    @classmethod
    def _empty_is_absent(cls, value: Any) -> Any:
        return _empty_to_none(value)


class DeleteRequest(BaseModel):
    """Body of ``POST /api/delete``."""

    code: str


# --- Responses ---


class ShortenResponse(BaseModel):
    """Successful reply to ``POST /api/shorten``."""

    short_url: str


class DeleteResponse(BaseModel):
    """Reply to ``POST /api/delete``.

    ``status`` is ``"deleted"`` or ``"noexist"``; other values are accepted
    as-is so that newer servers do not break older clients.
    """

    code: str
    status: str

    @property
    def existed(self) -> bool:
        return self.status != STATUS_NOEXIST


class LinkMetadata(BaseModel):
    """Ownership and creation details of a shortcode."""

    owner: str
    time: datetime
    user_meta: Optional[str] = None

    @field_validator("user_meta", mode="before")
    @classmethod
    def _empty_is_absent(cls, value: Any) -> Any:
        return _empty_to_none(value)


class MetaResponse(BaseModel):
    """Successful reply to ``GET /api/meta/<code>``."""

    full_url: str
    meta: LinkMetadata


# --- Serialization ---


def to_wire_json(body: Optional[BaseModel]) -> str:
    """Serialize *body* as compact JSON for the request payload.

    Absent optional fields are excluded and aliases are used for key names.
    A ``None`` body serializes to an empty object (``{}``), which is what
    GET requests carry.

    Args:
        body: The request model, or ``None``.

    Returns:
        The JSON text.
    """
    if body is None:
        return "{}"
    return body.model_dump_json(by_alias=True, exclude_none=True)
