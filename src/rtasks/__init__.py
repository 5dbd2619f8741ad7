"""rtasks — dotted-path member access and small runtime utility tasks."""

from .codegen import multiply_vectors, vector_multiply_function
from .environment import Environment
from .errors import (
    InvalidPathError,
    MemberNotFoundError,
    NullIntermediateError,
    RTasksError,
    UnsupportedAlgorithmError,
)
from .getter import get_member, get_property_value
from .model import Empty, Entity
from .reflection import obsolete, public_obsolete_classes
from .setter import set_member, set_property_value
from .streams import (
    DecompressionMethod,
    PlanetInfo,
    calculate_hash,
    decompress_stream,
    read_encoded_text,
    read_planet_info_from_xlsx,
)
from .typedef import MemberDef, TypeDef

__all__ = [
    "get_property_value",
    "set_property_value",
    "get_member",
    "set_member",
    "Environment",
    "Entity",
    "Empty",
    "TypeDef",
    "MemberDef",
    "obsolete",
    "public_obsolete_classes",
    "vector_multiply_function",
    "multiply_vectors",
    "DecompressionMethod",
    "PlanetInfo",
    "calculate_hash",
    "decompress_stream",
    "read_encoded_text",
    "read_planet_info_from_xlsx",
    "RTasksError",
    "InvalidPathError",
    "MemberNotFoundError",
    "NullIntermediateError",
    "UnsupportedAlgorithmError",
]
