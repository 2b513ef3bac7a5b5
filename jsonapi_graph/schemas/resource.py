"""Pydantic schemas for incoming JSON:API documents.

Unknown members are kept so nothing is lost on the way to the deserializer.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict


class JSONAPIResourceIdentifier(BaseModel):
    """Resource identifier object: type + id."""

    model_config = ConfigDict(extra="allow")

    type: str
    id: Union[str, int]


class JSONAPIRelationship(BaseModel):
    """Relationship object of a resource."""

    model_config = ConfigDict(extra="allow")

    data: Union[JSONAPIResourceIdentifier, List[Optional[JSONAPIResourceIdentifier]], None] = None
    links: Optional[Dict[str, Any]] = None
    meta: Optional[Dict[str, Any]] = None


class JSONAPIResource(BaseModel):
    """Resource object with attributes and relationships."""

    model_config = ConfigDict(extra="allow")

    type: str
    id: Optional[Union[str, int]] = None
    attributes: Optional[Dict[str, Any]] = None
    relationships: Optional[Dict[str, JSONAPIRelationship]] = None
    meta: Optional[Dict[str, Any]] = None
    links: Optional[Dict[str, Any]] = None


class JSONAPIDocument(BaseModel):
    """Top-level JSON:API document."""

    model_config = ConfigDict(extra="allow")

    data: Union[JSONAPIResource, List[Optional[JSONAPIResource]], None] = None
    included: Optional[List[JSONAPIResource]] = None
    meta: Optional[Dict[str, Any]] = None
    links: Optional[Dict[str, Any]] = None
