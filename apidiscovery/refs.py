"""
Explicit `$ref` resolution and traversal over a `RestDescription`.

Decoding never dereferences schema references; this module is the separate
pass a consumer runs when it needs to. All walks are iterative and structural:
a `$ref` is reported, never followed, so self-referencing or mutually
referencing schemas cannot make a traversal loop, and resource trees of any
depth are handled without recursion.
"""

from typing import Iterator, List, Tuple

from .lib.enums.message import FailMessage
from .lib.errors.app_error import UnresolvedReferenceError
from .models import RestDescription, RestMethod, Schema


def resolve_ref(description: RestDescription, ref: str) -> Schema:
    """
    Look up a schema by id in the document's registry.

    Only one hop is taken: if the registered schema is itself a reference,
    it is returned as is.

    Raises:
        UnresolvedReferenceError: `ref` is not a key of `description.schemas`.
    """
    registry = description.schemas or {}
    try:
        return registry[ref]
    except KeyError:
        raise UnresolvedReferenceError(
            FailMessage.UNRESOLVED_REF,
            context={"ref": ref, "api": description.id},
        ) from None


def iter_methods(description: RestDescription) -> Iterator[Tuple[str, RestMethod]]:
    """
    Yield `(dotted_path, method)` for every method in the document.

    Top-level methods come first, then resources depth-first, each in
    document order. The path joins resource and method names with dots, e.g.
    `"files.revisions.list"`.
    """
    for name, method in (description.methods or {}).items():
        yield name, method

    stack = list(reversed(list((description.resources or {}).items())))
    while stack:
        prefix, resource = stack.pop()
        for name, method in (resource.methods or {}).items():
            yield f"{prefix}.{name}", method
        children = (resource.resources or {}).items()
        stack.extend((f"{prefix}.{name}", child) for name, child in reversed(list(children)))


def _schema_refs(schema: Schema) -> Iterator[str]:
    pending = [schema]
    while pending:
        current = pending.pop()
        if current.ref is not None:
            yield current.ref
        if current.variant is not None:
            for mapping in current.variant.map or []:
                if mapping.ref is not None:
                    yield mapping.ref
        nested = list((current.properties or {}).values())
        if current.additional_properties is not None:
            nested.append(current.additional_properties)
        if current.items is not None:
            nested.append(current.items)
        pending.extend(reversed(nested))


def iter_refs(description: RestDescription) -> Iterator[str]:
    """
    Yield every `$ref` used by parameters, methods and resources.

    Covers common parameters, method parameters, method request/response
    bodies and everything nested inside those schemas (`properties`,
    `items`, `additionalProperties`, `variant.map`). Duplicates are yielded
    each time they occur. The `schemas` registry itself is not scanned.
    """
    for schema in (description.parameters or {}).values():
        yield from _schema_refs(schema)

    for _, method in iter_methods(description):
        for schema in (method.parameters or {}).values():
            yield from _schema_refs(schema)
        if method.request is not None and method.request.ref is not None:
            yield method.request.ref
        if method.response is not None and method.response.ref is not None:
            yield method.response.ref


def dangling_refs(description: RestDescription) -> List[str]:
    """Return distinct refs that name no schema, in first-seen order."""
    registry = description.schemas or {}
    return list(dict.fromkeys(ref for ref in iter_refs(description) if ref not in registry))
