from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Optional, Set

from tree_sitter import Language, Parser, Node, Tree
from models.domain_models import JavaClass
from models.reader_config import ReaderConfig

@dataclass
class ParsedSource:
    """A parsed compilation unit kept by the source model."""
    file_path: Optional[str]
    content: bytes
    tree: Tree
    package: str

    @property
    def root_node(self) -> Node:
        return self.tree.root_node

class BaseFileProcessor(ABC):
    """Abstract base class for turning parsed source files into class models."""

    def __init__(self, config: ReaderConfig, language: Language, parser: Parser):
        self.config = config
        self.language = language
        self.parser = parser

    @abstractmethod
    def process_class(self, source: ParsedSource, class_node: Node, full_class_name: str,
                      class_cache: Set[str]) -> JavaClass:
        """Build the class model for one class declaration of a parsed source."""
        pass

    @abstractmethod
    def _extract_imports(self, root_node: Node, content: bytes) -> Dict[str, str]:
        """Extract import statements."""
        pass
