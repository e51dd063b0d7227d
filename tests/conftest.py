from typing import Sequence

import pytest

from analyzers.java_source_model import JavaSourceModel
from models.domain_models import JavaClass, JavaMethod
from models.reader_config import ReaderConfig
from models.type_descriptors import BareType, JavaType, ParameterizedType
from services.factory_method_extractor import FactoryMethodExtractor

FACTORY = 'org.hamcrest.Factory'
MATCHER_OF_STRING = ParameterizedType('org.hamcrest.Matcher', (BareType('java.lang.String'),))


@pytest.fixture
def config() -> ReaderConfig:
    return ReaderConfig()


@pytest.fixture
def source_model(config: ReaderConfig) -> JavaSourceModel:
    return JavaSourceModel(config)


def extractor_for(*sources: str) -> FactoryMethodExtractor:
    model = JavaSourceModel()
    for source in sources:
        model.add_source(source)
    return FactoryMethodExtractor(model)


def read_method(class_name: str, source: str, method_name: str):
    return extractor_for(source).read_method(class_name, method_name)


def make_method(name: str, modifiers: Sequence[str] = ('public', 'static'),
                annotations: Sequence[str] = (FACTORY,), return_type: JavaType = MATCHER_OF_STRING,
                parameters: Sequence[JavaType] = (), is_var_args: bool = False) -> JavaMethod:
    return JavaMethod(
        name=name,
        modifiers=tuple(modifiers),
        annotations=tuple(annotations),
        return_type=return_type,
        type_parameters=(),
        parameters=tuple(parameters),
        is_var_args=is_var_args,
        exceptions=()
    )


def make_class(full_class_name: str, methods: Sequence[JavaMethod]) -> JavaClass:
    package, _, class_name = full_class_name.rpartition('.')
    return JavaClass(
        package=package,
        class_name=class_name,
        full_class_name=full_class_name,
        file_path=None,
        type_parameters=(),
        methods=tuple(methods)
    )
