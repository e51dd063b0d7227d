from abc import ABC, abstractmethod
from typing import Dict, Optional, Sequence, Set

from models.reader_config import ReaderConfig

class BaseTypeResolver(ABC):
    """Abstract base class for type resolvers across different languages."""

    @abstractmethod
    def resolve_type_name(self, type_name: str, enclosing_classes: Sequence[str] = ()) -> str:
        """Resolve a type name to its fully qualified name."""
        pass

class JavaTypeResolver(BaseTypeResolver):
    """Resolves Java type names, as written in one compilation unit, to fully qualified names."""

    def __init__(self, config: ReaderConfig, class_cache: Set[str], imports: Dict[str, str], package: str):
        self.config = config
        self.class_cache = class_cache
        self.imports = imports
        self.package = package

    def resolve_type_name(self, type_name: str, enclosing_classes: Sequence[str] = ()) -> str:
        """Resolve type name to fully qualified name.

        ``enclosing_classes`` lists the fully qualified names of the classes
        surrounding the reference, innermost first, so member types win over
        same-package and on-demand imports.
        Unresolvable names are returned unchanged.
        """
        type_name = type_name.strip()
        if not type_name or type_name in self.config.primitive_types:
            return type_name

        if '.' in type_name:
            head, _, rest = type_name.partition('.')
            resolved_head = self._resolve_simple_name(head, enclosing_classes)
            if resolved_head:
                return f"{resolved_head}.{rest}"
            return type_name

        return self._resolve_simple_name(type_name, enclosing_classes) or type_name

    def _resolve_simple_name(self, name: str, enclosing_classes: Sequence[str]) -> Optional[str]:
        for enclosing in enclosing_classes:
            if enclosing.rsplit('.', 1)[-1] == name:
                return enclosing
            member = f"{enclosing}.{name}"
            if member in self.class_cache:
                return member

        if name in self.imports:
            return self.imports[name]

        same_package_type = f"{self.package}.{name}" if self.package else name
        if same_package_type in self.class_cache:
            return same_package_type

        if name in self.config.java_lang_types:
            return f"java.lang.{name}"

        return self._resolve_from_wildcard_imports(name)

    def _resolve_from_wildcard_imports(self, class_name: str) -> Optional[str]:
        if not class_name or not class_name[0].isupper():
            return None
        wildcard_packages = [import_path for import_key, import_path in self.imports.items()
                           if import_key.startswith('*')]
        for package in wildcard_packages:
            potential_full_name = f"{package}.{class_name}"
            if potential_full_name in self.class_cache or self._is_known_java_class(package, class_name):
                return potential_full_name
        return None

    def _is_known_java_class(self, package: str, class_name: str) -> bool:
        known = self.config.known_packages
        return package in known and class_name in known[package]
