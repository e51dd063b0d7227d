from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Tuple

class JavaType(ABC):
    """A type occurrence in Java source: bare, parameterized, array, type variable or wildcard."""

    @property
    @abstractmethod
    def fully_qualified_name(self) -> str:
        """Erased, fully qualified name of the type."""
        pass

    @property
    def is_parameterized(self) -> bool:
        return False

    @property
    def actual_type_arguments(self) -> Tuple[JavaType, ...]:
        return ()

    @property
    def is_array(self) -> bool:
        return False

    @property
    def element_type(self) -> Optional[JavaType]:
        return None

    def generic_fully_qualified_name(self) -> str:
        """The type's own generic-aware text."""
        return self.fully_qualified_name

    def erasure(self) -> JavaType:
        return self

@dataclass(frozen=True)
class BareType(JavaType):
    name: str

    @property
    def fully_qualified_name(self) -> str:
        return self.name

@dataclass(frozen=True)
class TypeVariable(JavaType):
    """A use of a type variable; ``erased_name`` is the raw type it erases to."""
    name: str
    erased_name: str = field(default='java.lang.Object', compare=False)

    @property
    def fully_qualified_name(self) -> str:
        return self.name

    def erasure(self) -> JavaType:
        return BareType(self.erased_name)

@dataclass(frozen=True)
class ParameterizedType(JavaType):
    base_name: str
    arguments: Tuple[JavaType, ...]

    @property
    def fully_qualified_name(self) -> str:
        return self.base_name

    @property
    def is_parameterized(self) -> bool:
        return bool(self.arguments)

    @property
    def actual_type_arguments(self) -> Tuple[JavaType, ...]:
        return self.arguments

    def generic_fully_qualified_name(self) -> str:
        if not self.arguments:
            return self.base_name
        args = ','.join(arg.generic_fully_qualified_name() for arg in self.arguments)
        return f"{self.base_name}<{args}>"

    def erasure(self) -> JavaType:
        return BareType(self.base_name)

@dataclass(frozen=True)
class ArrayType(JavaType):
    component: JavaType

    @property
    def fully_qualified_name(self) -> str:
        return f"{self.component.fully_qualified_name}[]"

    @property
    def is_array(self) -> bool:
        return True

    @property
    def element_type(self) -> Optional[JavaType]:
        return self.component

    def generic_fully_qualified_name(self) -> str:
        return f"{self.component.generic_fully_qualified_name()}[]"

    def erasure(self) -> JavaType:
        return ArrayType(self.component.erasure())

@dataclass(frozen=True)
class WildcardType(JavaType):
    """``?``, ``? extends X`` or ``? super X``."""
    bound: Optional[JavaType] = None
    bound_kind: str = 'extends'

    @property
    def fully_qualified_name(self) -> str:
        return '?'

    def generic_fully_qualified_name(self) -> str:
        if self.bound is None:
            return '?'
        return f"? {self.bound_kind} {self.bound.generic_fully_qualified_name()}"

@dataclass(frozen=True)
class TypeParameter:
    """Declaration of a method or class type parameter, e.g. ``V extends List<String>``."""
    name: str
    bounds: Tuple[JavaType, ...] = ()
