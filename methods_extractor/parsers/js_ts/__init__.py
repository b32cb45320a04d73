from .exports import (
    export_assignment_value,
    find_commonjs_export,
    find_esm_export,
    locate_export,
)
from .members import (
    describe_member,
    enumerate_methods,
    extract_class_methods,
    extract_object_literal_methods,
)
from .resolver import resolve_identifier, unwind_assignment

__all__ = [
    "describe_member",
    "enumerate_methods",
    "export_assignment_value",
    "extract_class_methods",
    "extract_object_literal_methods",
    "find_commonjs_export",
    "find_esm_export",
    "locate_export",
    "resolve_identifier",
    "unwind_assignment",
]
