from dataclasses import dataclass
from typing import List, Dict, Tuple, Optional

from models.type_descriptors import JavaType, TypeParameter

@dataclass(frozen=True)
class JavaMethod:
    name: str
    modifiers: Tuple[str, ...]
    annotations: Tuple[str, ...]
    return_type: JavaType
    type_parameters: Tuple[TypeParameter, ...]
    parameters: Tuple[JavaType, ...]
    is_var_args: bool
    exceptions: Tuple[JavaType, ...]
    is_interface_member: bool = False

    @property
    def is_static(self) -> bool:
        return 'static' in self.modifiers

    @property
    def is_public(self) -> bool:
        # Interface members are implicitly public unless declared private.
        if self.is_interface_member:
            return 'private' not in self.modifiers
        return 'public' in self.modifiers

    @property
    def return_type_name(self) -> str:
        return self.return_type.fully_qualified_name

    @property
    def generic_return_type(self) -> JavaType:
        return self.return_type

    def parameter_types(self, resolve_generics: bool = True) -> Tuple[JavaType, ...]:
        """Declared parameter types; raw (erased) types unless resolve_generics is set."""
        if resolve_generics:
            return self.parameters
        return tuple(param.erasure() for param in self.parameters)

    @property
    def exception_types(self) -> Tuple[JavaType, ...]:
        return self.exceptions

@dataclass(frozen=True)
class JavaClass:
    package: str
    class_name: str
    full_class_name: str
    file_path: Optional[str]
    type_parameters: Tuple[TypeParameter, ...]
    methods: Tuple[JavaMethod, ...]

@dataclass(frozen=True)
class FactoryMethodParameter:
    type: str
    name: str

@dataclass(frozen=True)
class FactoryMethod:
    """A matcher factory method, with every type rendered as fully qualified source text."""
    matcher_class: str
    name: str
    return_type: str
    generified_type: Optional[str] = None
    generic_type_parameters: Tuple[str, ...] = ()
    parameters: Tuple[FactoryMethodParameter, ...] = ()
    exceptions: Tuple[str, ...] = ()

    def to_dict(self) -> Dict:
        """Convert FactoryMethod to a JSON-serializable dictionary."""
        return {
            "matcher_class": self.matcher_class,
            "name": self.name,
            "return_type": self.return_type,
            "generified_type": self.generified_type,
            "generic_type_parameters": list(self.generic_type_parameters),
            "parameters": [{"type": param.type, "name": param.name} for param in self.parameters],
            "exceptions": list(self.exceptions)
        }

    def signature(self) -> str:
        """Java-style one-line signature, e.g. ``<T> org.hamcrest.Matcher<T> is(T param1)``."""
        parts: List[str] = []
        if self.generic_type_parameters:
            parts.append(f"<{', '.join(self.generic_type_parameters)}>")
        return_type = self.return_type
        if self.generified_type is not None:
            return_type = f"{return_type}<{self.generified_type}>"
        parts.append(return_type)
        params = ', '.join(f"{param.type} {param.name}" for param in self.parameters)
        parts.append(f"{self.name}({params})")
        if self.exceptions:
            parts.append(f"throws {', '.join(self.exceptions)}")
        return ' '.join(parts)
