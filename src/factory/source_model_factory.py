from typing import Optional

from analyzers.java_source_model import JavaSourceModel
from analyzers.base_source_model import BaseSourceModel
from models.reader_config import ReaderConfig

class SourceModelFactory:
    """Factory for creating language-specific source models."""

    @staticmethod
    def create_source_model(language: str, config: Optional[ReaderConfig] = None) -> BaseSourceModel:
        """Create a source model for the specified language."""
        language = language.lower()
        if language == 'java':
            return JavaSourceModel(config or ReaderConfig())
        else:
            raise ValueError(f"Unsupported language: {language}")

    @staticmethod
    def create_default_source_model() -> BaseSourceModel:
        """Create a default source model (Java)."""
        return JavaSourceModel(ReaderConfig())
