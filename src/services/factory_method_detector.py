import logging

from models.domain_models import JavaMethod
from models.reader_config import ReaderConfig

logger = logging.getLogger(__name__)

class FactoryMethodDetector:
    """Detects matcher factory methods.

    A method qualifies when it is public, static, annotated with one of the
    configured factory annotations and does not return void.
    """

    def __init__(self, config: ReaderConfig):
        self.config = config

    def __call__(self, method: JavaMethod) -> bool:
        return self.is_factory_method(method)

    def is_factory_method(self, method: JavaMethod) -> bool:
        qualifies = (method.is_static
                     and method.is_public
                     and self.has_factory_annotation(method)
                     and method.return_type_name != self.config.void_type)
        if not qualifies:
            logger.debug(f"Skipping {method.name}: not a factory method")
        return qualifies

    def has_factory_annotation(self, method: JavaMethod) -> bool:
        return any(annotation in self.config.factory_annotations for annotation in method.annotations)
