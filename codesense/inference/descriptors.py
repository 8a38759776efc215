"""
Type descriptors: the values produced by type inference.

A descriptor is an immutable pydantic model tagged with a `TypeKind`. The
factories below are the only way the rest of the package builds descriptors,
so a descriptor can be shared freely once created.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict

PRIMITIVE_NAMES = ("String", "Number", "Boolean")


class TypeKind(Enum):
    PRIMITIVE = "primitive"
    ARRAY = "array"
    OBJECT = "object"
    CLASS = "class"
    FUNCTION = "function"
    UNKNOWN = "unknown"


class ClassMember(BaseModel):
    """A field, method or accessor recorded on a class descriptor."""

    model_config = ConfigDict(frozen=True)

    name: str
    kind: str = "property"  # property | method | getter | setter
    type: Optional["TypeDescriptor"] = None
    is_static: bool = False


class TypeDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: TypeKind
    name: Optional[str] = None
    shape: Optional[Dict[str, "TypeDescriptor"]] = None
    element_type: Optional["TypeDescriptor"] = None
    members: Optional[List[ClassMember]] = None
    return_type: Optional["TypeDescriptor"] = None
    # For CLASS descriptors: True for an instance, False for the class (constructor) itself.
    is_instance: bool = False

    @property
    def is_unknown(self) -> bool:
        return self.kind == TypeKind.UNKNOWN


ClassMember.model_rebuild()
TypeDescriptor.model_rebuild()


# --- Factories ---


def create_unknown() -> TypeDescriptor:
    return TypeDescriptor(kind=TypeKind.UNKNOWN)


def create_primitive(name: str) -> TypeDescriptor:
    return TypeDescriptor(kind=TypeKind.PRIMITIVE, name=name)


def create_array(element_type: Optional[TypeDescriptor] = None) -> TypeDescriptor:
    return TypeDescriptor(kind=TypeKind.ARRAY, name="Array", element_type=element_type)


def create_object(shape: Dict[str, TypeDescriptor]) -> TypeDescriptor:
    """An anonymous object whose own keys are known (an object literal)."""
    return TypeDescriptor(kind=TypeKind.OBJECT, shape=dict(shape))


def create_named_object(name: str) -> TypeDescriptor:
    """An object of a catalog type such as `HTMLElement` or `Date`."""
    return TypeDescriptor(kind=TypeKind.OBJECT, name=name)


def create_function(return_type: Optional[TypeDescriptor] = None) -> TypeDescriptor:
    return TypeDescriptor(kind=TypeKind.FUNCTION, return_type=return_type)


def create_class(name: Optional[str], members: List[ClassMember]) -> TypeDescriptor:
    return TypeDescriptor(kind=TypeKind.CLASS, name=name, members=list(members))


def create_instance(class_type: TypeDescriptor) -> TypeDescriptor:
    """The type of `new C()` or of `this` inside C: only the non-static members survive."""
    members = [member for member in class_type.members or [] if not member.is_static]
    return TypeDescriptor(kind=TypeKind.CLASS, name=class_type.name, members=members, is_instance=True)


def with_member(class_type: TypeDescriptor, member: ClassMember) -> TypeDescriptor:
    """Returns a copy of a class descriptor with `member` added or replaced by name."""
    members = [existing for existing in class_type.members or [] if existing.name != member.name]
    members.append(member)
    return class_type.model_copy(update={"members": members})
