import logging
from pathlib import Path
from typing import Dict, List, TextIO, Tuple, Union

import tree_sitter_java as tsjava
from tree_sitter import Language, Node, Parser

from analyzers.base_source_model import BaseSourceModel
from models.domain_models import JavaClass
from models.errors import ClassNotFoundError
from models.reader_config import ReaderConfig
from processors.base_processor import ParsedSource
from processors.java_processor import JavaFileProcessor
from services.class_cache_builder import ClassCacheBuilder

logger = logging.getLogger(__name__)

class JavaSourceModel(BaseSourceModel):
    """Source model of Java classes, parsed with Tree-sitter."""

    def __init__(self, config: ReaderConfig = None):
        super().__init__(config or ReaderConfig())

        # Initialize Tree-sitter components
        try:
            self.language: Language = Language(tsjava.language())
            self.parser = Parser(self.language)
        except Exception as e:
            logger.error(f"Failed to initialize Tree-sitter for Java: {e}")
            raise

        self.file_processor = JavaFileProcessor(self.config, self.language, self.parser)
        self.class_cache_builder = ClassCacheBuilder()
        self._classes: Dict[str, Tuple[ParsedSource, Node]] = {}

    def add_source(self, source: Union[str, TextIO], file_path: str = None) -> None:
        """Parse a compilation unit and index the classes it declares."""
        if isinstance(source, str):
            text = source
        elif hasattr(source, 'read'):
            text = source.read()
        else:
            raise ValueError(f"Expected source text or a reader, got {type(source).__name__}")

        content = bytes(text, 'utf8')
        tree = self.parser.parse(content)
        package = self.class_cache_builder.extract_package(tree.root_node, content)
        parsed = ParsedSource(file_path=file_path, content=content, tree=tree, package=package)

        for full_class_name, class_node in self.class_cache_builder.build_class_cache(tree.root_node, content).items():
            if full_class_name in self._classes:
                logger.warning(f"Class {full_class_name} declared again in {file_path or '<source>'}, replacing it")
            self._classes[full_class_name] = (parsed, class_node)

    def add_source_tree(self, root: Path) -> int:
        """Add all Java files below a directory."""
        logger.info(f"Scanning Java source tree at {root}")
        java_files = sorted(Path(root).rglob("*.java"))
        logger.info(f"Found {len(java_files)} Java files")

        added = 0
        for i, java_file in enumerate(java_files):
            logger.debug(f"Adding file {i+1}/{len(java_files)}: {java_file}")
            try:
                self.add_source(self._read_file_content(java_file), str(java_file))
                added += 1
            except OSError as e:
                logger.warning(f"Skipping unreadable file {java_file}: {e}")
        logger.info(f"Indexed {len(self._classes)} classes from {added} files")
        return added

    def get_class_by_name(self, class_name: str) -> JavaClass:
        """Build a fresh model of a class from its parsed source."""
        if class_name not in self._classes:
            raise ClassNotFoundError(class_name)
        parsed, class_node = self._classes[class_name]
        return self.file_processor.process_class(parsed, class_node, class_name, set(self._classes))

    def class_names(self) -> List[str]:
        return sorted(self._classes)

    def _read_file_content(self, file_path: Path) -> str:
        """Read file content with encoding fallback."""
        try:
            with open(file_path, 'r', encoding=self.config.source_encoding) as f:
                return f.read()
        except UnicodeDecodeError:
            with open(file_path, 'r', encoding=self.config.fallback_encoding) as f:
                return f.read()
