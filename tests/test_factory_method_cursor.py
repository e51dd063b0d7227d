from unittest.mock import MagicMock

import pytest

from models.errors import ClassNotFoundError, IterationMisuseError, UnsupportedMutationError
from models.reader_config import ReaderConfig
from models.type_descriptors import ArrayType, BareType
from services.factory_method_detector import FactoryMethodDetector
from services.factory_method_extractor import CursorState, FactoryMethodExtractor

from conftest import make_class, make_method


@pytest.fixture
def matchers():
    return make_class('org.Matchers', [
        make_method('first'),
        make_method('second', modifiers=('private', 'static')),
        make_method('third'),
    ])


@pytest.fixture
def source_model(matchers):
    model = MagicMock()
    model.get_class_by_name.return_value = matchers
    return model


@pytest.fixture
def extractor(source_model, config):
    return FactoryMethodExtractor(source_model, config=config)


def test_has_next_is_idempotent(extractor):
    cursor = extractor.extract('org.Matchers')
    assert cursor.has_next()
    assert cursor.has_next()
    assert cursor.next().name == 'first'
    assert cursor.has_next()
    assert cursor.has_next()
    assert cursor.next().name == 'third'


def test_next_without_has_next_is_a_usage_error(extractor):
    cursor = extractor.extract('org.Matchers')
    assert cursor.state is CursorState.BEFORE_START
    with pytest.raises(IterationMisuseError):
        cursor.next()


def test_next_twice_without_has_next_is_a_usage_error(extractor):
    cursor = extractor.extract('org.Matchers')
    assert cursor.has_next()
    cursor.next()
    with pytest.raises(IterationMisuseError):
        cursor.next()


def test_exhausted_cursor_never_resumes(extractor):
    cursor = extractor.extract('org.Matchers')
    assert [method.name for method in cursor] == ['first', 'third']
    assert cursor.state is CursorState.EXHAUSTED
    for _ in range(3):
        assert not cursor.has_next()
        with pytest.raises(IterationMisuseError):
            cursor.next()
    with pytest.raises(StopIteration):
        next(cursor)


def test_remove_is_rejected(extractor):
    cursor = extractor.extract('org.Matchers')
    assert cursor.has_next()
    with pytest.raises(UnsupportedMutationError):
        cursor.remove()


def test_qualification_is_lazy(source_model, config):
    rule = MagicMock(side_effect=FactoryMethodDetector(config))
    cursor = FactoryMethodExtractor(source_model, rule=rule, config=config).extract('org.Matchers')
    rule.assert_not_called()

    assert cursor.has_next()
    assert rule.call_count == 1
    assert cursor.has_next()
    assert rule.call_count == 1

    cursor.next()
    assert cursor.has_next()
    assert rule.call_count == 3


def test_descriptors_are_only_built_when_pulled(source_model, config):
    extractor = FactoryMethodExtractor(source_model, config=config)
    builder = MagicMock(wraps=extractor.build_factory_method)
    extractor.build_factory_method = builder

    cursor = extractor.extract('org.Matchers')
    assert cursor.has_next()
    builder.assert_not_called()
    cursor.next()
    assert builder.call_count == 1


def test_each_extraction_rereads_the_class(extractor, source_model):
    list(extractor('org.Matchers'))
    list(extractor('org.Matchers'))
    assert source_model.get_class_by_name.call_count == 2


def test_class_not_found_propagates(source_model, extractor):
    source_model.get_class_by_name.side_effect = ClassNotFoundError('org.Missing')
    with pytest.raises(ClassNotFoundError):
        extractor.extract('org.Missing')


def test_each_failing_condition_excludes_a_method(source_model, config):
    source_model.get_class_by_name.return_value = make_class('org.Dodgy', [
        make_method('notStatic', modifiers=('public',)),
        make_method('notPublic', modifiers=('static',)),
        make_method('noAnnotation', annotations=('java.lang.Deprecated',)),
        make_method('returnsVoid', return_type=BareType('void')),
        make_method('good'),
    ])
    extractor = FactoryMethodExtractor(source_model, config=config)
    assert [method.name for method in extractor('org.Dodgy')] == ['good']


def test_vararg_marker_follows_the_method_flag(source_model, config):
    strings = ArrayType(BareType('java.lang.String'))
    source_model.get_class_by_name.return_value = make_class('org.Arrays', [
        make_method('varargs', parameters=(strings, strings), is_var_args=True),
        make_method('plain', parameters=(strings, strings)),
    ])
    varargs, plain = FactoryMethodExtractor(source_model, config=config)('org.Arrays')
    assert [param.type for param in varargs.parameters] == ['java.lang.String[]', 'java.lang.String...']
    assert [param.type for param in plain.parameters] == ['java.lang.String[]', 'java.lang.String[]']


def test_custom_parameter_prefix(source_model):
    config = ReaderConfig(parameter_name_prefix='arg')
    source_model.get_class_by_name.return_value = make_class('org.Named', [
        make_method('named', parameters=(BareType('int'), BareType('long'), BareType('char'))),
    ])
    method, = FactoryMethodExtractor(source_model, config=config)('org.Named')
    assert [param.name for param in method.parameters] == ['arg1', 'arg2', 'arg3']
