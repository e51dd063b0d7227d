from abc import ABC, abstractmethod
from pathlib import Path
from typing import TextIO, Union

from models.domain_models import JavaClass
from models.reader_config import ReaderConfig

class BaseSourceModel(ABC):
    """Abstract base class for source models that expose classes and their methods by name."""

    def __init__(self, config: ReaderConfig):
        self.config = config

    @abstractmethod
    def add_source(self, source: Union[str, TextIO], file_path: str = None) -> None:
        """Add one compilation unit, given as text or as a reader."""
        pass

    @abstractmethod
    def add_source_tree(self, root: Path) -> int:
        """Add every source file below a directory; returns the number of files added."""
        pass

    @abstractmethod
    def get_class_by_name(self, class_name: str) -> JavaClass:
        """Return the class declared under a fully qualified name, or raise ClassNotFoundError."""
        pass
