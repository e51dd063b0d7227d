from typing import Dict, Iterable
from models.reader_config import ReaderConfig

class ReaderConfigBuilder:
    """Builder pattern for creating reader configuration."""

    def __init__(self):
        self.config_data = {}

    def with_factory_annotations(self, annotations: Iterable[str]) -> 'ReaderConfigBuilder':
        self.config_data['factory_annotations'] = frozenset(annotations)
        return self

    def with_parameter_name_prefix(self, prefix: str) -> 'ReaderConfigBuilder':
        self.config_data['parameter_name_prefix'] = prefix
        return self

    def with_source_encoding(self, encoding: str) -> 'ReaderConfigBuilder':
        self.config_data['source_encoding'] = encoding
        return self

    def with_known_package(self, package: str, class_names: Iterable[str]) -> 'ReaderConfigBuilder':
        known: Dict = dict(self.config_data.get('known_packages', ReaderConfig().known_packages))
        known[package] = frozenset(class_names)
        self.config_data['known_packages'] = known
        return self

    def build(self) -> ReaderConfig:
        return ReaderConfig(**self.config_data)
