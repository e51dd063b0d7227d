import logging
from enum import Enum
from typing import Callable, Iterator, List, Optional

from analyzers.base_source_model import BaseSourceModel
from models.domain_models import FactoryMethod, FactoryMethodParameter, JavaClass, JavaMethod
from models.errors import IterationMisuseError, UnsupportedMutationError
from models.reader_config import ReaderConfig
from services.factory_method_detector import FactoryMethodDetector
from services.type_signature_renderer import (
    render_generified_type, render_parameter_type, render_type_parameter
)

logger = logging.getLogger(__name__)

FactoryMethodRule = Callable[[JavaMethod], bool]

class CursorState(Enum):
    BEFORE_START = "before_start"
    SCANNING = "scanning"
    FOUND = "found"
    EXHAUSTED = "exhausted"

class FactoryMethodCursor:
    """Forward-only cursor over the factory methods of one class.

    ``has_next()`` scans ahead to the next qualifying method and may be called
    any number of times at the same position; ``next()`` is only valid right
    after it has returned True. The cursor also supports the iterator protocol.
    """

    def __init__(self, java_class: JavaClass, rule: FactoryMethodRule,
                 builder: Callable[[JavaClass, JavaMethod], FactoryMethod]):
        self.java_class = java_class
        self.rule = rule
        self.builder = builder
        self._methods = java_class.methods
        self._position = -1
        self._state = CursorState.BEFORE_START

    @property
    def state(self) -> CursorState:
        return self._state

    def has_next(self) -> bool:
        if self._state is CursorState.FOUND:
            return True
        if self._state is CursorState.EXHAUSTED:
            return False
        self._state = CursorState.SCANNING
        while True:
            self._position += 1
            if self._position >= len(self._methods):
                self._state = CursorState.EXHAUSTED
                return False
            if self.rule(self._methods[self._position]):
                self._state = CursorState.FOUND
                return True

    def next(self) -> FactoryMethod:
        if self._state is not CursorState.FOUND:
            raise IterationMisuseError("next() called without has_next() check.")
        method = self._methods[self._position]
        self._state = CursorState.SCANNING
        return self.builder(self.java_class, method)

    def remove(self) -> None:
        raise UnsupportedMutationError("Factory method sequences are read-only")

    def __iter__(self) -> Iterator[FactoryMethod]:
        return self

    def __next__(self) -> FactoryMethod:
        if not self.has_next():
            raise StopIteration
        return self.next()

class FactoryMethodExtractor:
    """Reads the matcher factory methods of a class from a source model.

    Usage::

        for method in FactoryMethodExtractor(source_model).iter_factory_methods('org.MyMatchers'):
            ...

    The qualification rule defaults to :class:`FactoryMethodDetector`; any
    callable taking a method and returning a bool can replace it.
    """

    def __init__(self, source_model: BaseSourceModel, rule: Optional[FactoryMethodRule] = None,
                 config: Optional[ReaderConfig] = None):
        self.source_model = source_model
        self.config = config or source_model.config
        self.rule = rule or FactoryMethodDetector(self.config)

    def extract(self, class_name: str) -> FactoryMethodCursor:
        """Open a new cursor over a class; raises ClassNotFoundError for unknown classes."""
        java_class = self.source_model.get_class_by_name(class_name)
        logger.debug(f"Reading factory methods of {class_name} ({len(java_class.methods)} methods)")
        return FactoryMethodCursor(java_class, self.rule, self.build_factory_method)

    def iter_factory_methods(self, class_name: str) -> Iterator[FactoryMethod]:
        yield from self.extract(class_name)

    def __call__(self, class_name: str) -> Iterator[FactoryMethod]:
        return self.iter_factory_methods(class_name)

    def read_method(self, class_name: str, method_name: str) -> Optional[FactoryMethod]:
        """Return the first factory method of a class with the given name."""
        for method in self.extract(class_name):
            if method.name == method_name:
                return method
        return None

    def build_factory_method(self, java_class: JavaClass, method: JavaMethod) -> FactoryMethod:
        type_parameters = [
            render_type_parameter(type_parameter, self.config.universal_top_type)
            for type_parameter in method.type_parameters
        ]
        generified_type = render_generified_type(method.generic_return_type)

        parameter_types = method.parameter_types(True)
        parameters: List[FactoryMethodParameter] = []
        for number, param_type in enumerate(parameter_types, start=1):
            # String[] -> String... on the trailing parameter of a varargs method
            is_var_args_slot = method.is_var_args and number == len(parameter_types)
            parameters.append(FactoryMethodParameter(
                type=render_parameter_type(param_type, is_var_args_slot, self.config.vararg_suffix),
                name=f"{self.config.parameter_name_prefix}{number}"
            ))

        exceptions = [exception.fully_qualified_name for exception in method.exception_types]

        return FactoryMethod(
            matcher_class=java_class.full_class_name,
            name=method.name,
            return_type=method.return_type_name,
            generified_type=generified_type,
            generic_type_parameters=tuple(type_parameters),
            parameters=tuple(parameters),
            exceptions=tuple(exceptions)
        )
