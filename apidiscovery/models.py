"""
Typed models for discovery documents and directory listings.

Every model here is an immutable pydantic model decoded straight from the JSON
returned by the discovery endpoint. Three rules apply to all of them:

- Every field is optional and defaults to `None`. The service omits empty
  fields instead of sending nulls, so an absent field is never replaced with
  an empty list or dict. Absent and empty stay distinguishable: an absent
  `enum` is `None`, a present-but-empty one is `[]`.
- Python attribute names are snake_case; JSON member names (camelCase, plus
  `$ref`, `type_value` and `version_module`) are the aliases. Both spellings
  are accepted on construction.
- Unknown members are kept, so `to_json_dict()` re-encodes exactly what was
  received. Key order inside mappings is preserved.

`Schema` and `RestResource` are recursive. `$ref` values are stored as plain
strings and never dereferenced here; see `apidiscovery.refs` for an explicit
resolution pass.

`from_json_dict()` is the decoding entry point used by the client. It accepts
trees of any depth; plain `model_validate` stops at pydantic's recursion
guard.

Example:
    >>> doc = RestDescription.from_json_dict(payload)
    >>> doc.schemas["File"].properties["name"].type
    'string'
    >>> doc.auth is None
    True
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DiscoveryModel(BaseModel):
    """Base for all document models: frozen, camelCase aliases, extras kept."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="allow",
    )

    @classmethod
    def from_json_dict(cls, data: Any) -> DiscoveryModel:
        """
        Decode parsed JSON into this model, at any nesting depth.

        Recursive members (`properties`, `items`, `additionalProperties`,
        nested `resources`, ...) are validated bottom-up without recursion:
        each node is validated on its own, with its already built children in
        place. `model_validate` on a whole tree is bounded by pydantic's
        recursion guard (about 255 nested models); this is not.

        Validation errors are pydantic's own; their location is relative to
        the node that failed. The input is not modified.
        """
        if not isinstance(data, dict):
            return cls.model_validate(data)

        root: Dict[str, Any] = {}
        order = []
        stack = [(cls, data, root, "value")]
        while stack:
            model_cls, node, container, key = stack.pop()
            if not isinstance(node, dict):
                # left for the parent's validation to reject
                continue
            node = dict(node)
            container[key] = node
            order.append((model_cls, node, container, key))

            for field_name, (child_cls, many) in _NESTED.get(model_cls, {}).items():
                slot = _slot(model_cls, node, field_name)
                if slot is None:
                    continue
                value = node[slot]
                if not many:
                    stack.append((child_cls, value, node, slot))
                elif isinstance(value, dict):
                    value = dict(value)
                    node[slot] = value
                    stack.extend((child_cls, child, value, k) for k, child in value.items())

        # pre-order reversed: children are built before their parents
        for model_cls, node, container, key in reversed(order):
            container[key] = model_cls.model_validate(node)
        return root["value"]

    def to_json_dict(self) -> Dict[str, Any]:
        """
        Re-encode to the JSON shape the model was decoded from.

        Only fields present in the source (or passed explicitly on
        construction) are emitted, under their JSON names.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class Icons(DiscoveryModel):
    """Links to 16x16 and 32x32 icons representing an API."""

    x16: Optional[str] = None
    x32: Optional[str] = None


# Directory listing


class DirectoryEntry(DiscoveryModel):
    """One api/version pair known to the discovery endpoint."""

    id: Optional[str] = None
    name: Optional[str] = None
    version: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    discovery_link: Optional[str] = None
    discovery_rest_url: Optional[str] = None
    documentation_link: Optional[str] = None
    icons: Optional[Icons] = None
    kind: Optional[str] = None
    labels: Optional[List[str]] = None
    preferred: Optional[bool] = None


class DirectoryListing(DiscoveryModel):
    """
    Response of the "list APIs" call.

    `items` keeps the order chosen by the service; it is not sorted.
    """

    discovery_version: Optional[str] = None
    kind: Optional[str] = None
    items: Optional[List[DirectoryEntry]] = None


# Schemas


class Annotations(DiscoveryModel):
    """Additional information about a property."""

    required: Optional[List[str]] = None
    """API method ids for which the property is mandatory."""


class VariantMapping(DiscoveryModel):
    """Maps one discriminant value to the schema used for it."""

    ref: Optional[str] = Field(default=None, alias="$ref")
    type_value: Optional[str] = Field(default=None, alias="type_value")


class Variant(DiscoveryModel):
    """
    Polymorphic payload metadata.

    The value of the `discriminant` property selects an entry of `map`. The
    model only records the mapping; it does not dispatch on it.
    """

    discriminant: Optional[str] = None
    map: Optional[List[VariantMapping]] = None


class Schema(DiscoveryModel):
    """
    A JSON Schema-like type definition, used for payloads and parameters.

    A schema is either a definition (`id`, `type`, `properties`, ...) or a
    reference to one (`ref`, JSON `$ref`). References are kept verbatim and
    may form cycles through the document's schema registry.

    `minimum`, `maximum` and `default` are transmitted as strings and are not
    parsed. `enum` and `enum_descriptions` are parallel lists.
    """

    id: Optional[str] = None
    ref: Optional[str] = Field(default=None, alias="$ref")
    type: Optional[str] = None
    format: Optional[str] = None
    description: Optional[str] = None
    default: Optional[str] = None
    required: Optional[bool] = None
    repeated: Optional[bool] = None
    read_only: Optional[bool] = None
    pattern: Optional[str] = None
    minimum: Optional[str] = None
    maximum: Optional[str] = None
    enum: Optional[List[str]] = None
    enum_descriptions: Optional[List[str]] = None
    location: Optional[str] = None
    """Whether a parameter goes in the query or the path."""
    annotations: Optional[Annotations] = None
    properties: Optional[Dict[str, Schema]] = None
    additional_properties: Optional[Schema] = None
    items: Optional[Schema] = None
    variant: Optional[Variant] = None


# Methods and resources


class RequestRef(DiscoveryModel):
    """The schema for a method's request body."""

    ref: Optional[str] = Field(default=None, alias="$ref")
    parameter_name: Optional[str] = None


class ResponseRef(DiscoveryModel):
    """The schema for a method's response body."""

    ref: Optional[str] = Field(default=None, alias="$ref")


class MediaUploadProtocol(DiscoveryModel):
    multipart: Optional[bool] = None
    path: Optional[str] = None


class MediaUploadProtocols(DiscoveryModel):
    simple: Optional[MediaUploadProtocol] = None
    resumable: Optional[MediaUploadProtocol] = None


class MediaUpload(DiscoveryModel):
    """Media upload parameters: accepted MIME ranges, size cap, protocols."""

    accept: Optional[List[str]] = None
    max_size: Optional[str] = None
    protocols: Optional[MediaUploadProtocols] = None


class RestMethod(DiscoveryModel):
    """
    One invocable operation.

    `id` is stable across document versions. `path` is an RFC 6570 template;
    `flat_path` is the same path without `{+var}` expansions.
    `parameter_order` lists parameter names most significant first and is a
    hint only.
    """

    id: Optional[str] = None
    description: Optional[str] = None
    path: Optional[str] = None
    flat_path: Optional[str] = None
    http_method: Optional[str] = None
    parameters: Optional[Dict[str, Schema]] = None
    parameter_order: Optional[List[str]] = None
    request: Optional[RequestRef] = None
    response: Optional[ResponseRef] = None
    scopes: Optional[List[str]] = None
    media_upload: Optional[MediaUpload] = None
    supports_media_download: Optional[bool] = None
    supports_media_upload: Optional[bool] = None
    supports_subscription: Optional[bool] = None
    etag_required: Optional[bool] = None
    use_media_download_service: Optional[bool] = None


class RestResource(DiscoveryModel):
    """A named group of methods and sub-resources, nested to any depth."""

    methods: Optional[Dict[str, RestMethod]] = None
    resources: Optional[Dict[str, RestResource]] = None


# Document


class OAuth2Scope(DiscoveryModel):
    description: Optional[str] = None


class OAuth2(DiscoveryModel):
    scopes: Optional[Dict[str, OAuth2Scope]] = None
    """Scope URI to its human-readable description."""


class Auth(DiscoveryModel):
    oauth2: Optional[OAuth2] = None


class RestDescription(DiscoveryModel):
    """
    The discovery document for one version of an API.

    `schemas` is the registry that every `$ref` in `parameters`, `methods`
    and `resources` is expected to name. Decoding does not check this; use
    `apidiscovery.refs.dangling_refs()` to do so.
    """

    kind: Optional[str] = None
    etag: Optional[str] = None
    discovery_version: Optional[str] = None
    id: Optional[str] = None
    name: Optional[str] = None
    version: Optional[str] = None
    revision: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    owner_domain: Optional[str] = None
    owner_name: Optional[str] = None
    package_path: Optional[str] = None
    canonical_name: Optional[str] = None
    icons: Optional[Icons] = None
    documentation_link: Optional[str] = None
    labels: Optional[List[str]] = None
    features: Optional[List[str]] = None
    protocol: Optional[str] = None
    root_url: Optional[str] = None
    service_path: Optional[str] = None
    base_path: Optional[str] = None
    """Deprecated by the service in favour of `root_url` + `service_path`."""
    base_url: Optional[str] = None
    """Deprecated by the service in favour of `root_url` + `service_path`."""
    batch_path: Optional[str] = None
    exponential_backoff_default: Optional[bool] = None
    version_module: Optional[bool] = Field(default=None, alias="version_module")
    auth: Optional[Auth] = None
    schemas: Optional[Dict[str, Schema]] = None
    parameters: Optional[Dict[str, Schema]] = None
    resources: Optional[Dict[str, RestResource]] = None
    methods: Optional[Dict[str, RestMethod]] = None


# Members holding further models, by field name: (model class, is a mapping).
# `from_json_dict` builds these bottom-up.
_NESTED = {
    Schema: {
        "properties": (Schema, True),
        "additional_properties": (Schema, False),
        "items": (Schema, False),
    },
    RestMethod: {"parameters": (Schema, True)},
    RestResource: {
        "methods": (RestMethod, True),
        "resources": (RestResource, True),
    },
    RestDescription: {
        "schemas": (Schema, True),
        "parameters": (Schema, True),
        "methods": (RestMethod, True),
        "resources": (RestResource, True),
    },
}


def _slot(model_cls, node: Dict[str, Any], field_name: str) -> Optional[str]:
    """Return the key `node` uses for `field_name`: its JSON alias or its name."""
    alias = model_cls.model_fields[field_name].alias or field_name
    if alias in node:
        return alias
    if field_name in node:
        return field_name
    return None
