import pytest

from models.type_descriptors import (
    ArrayType, BareType, ParameterizedType, TypeParameter, TypeVariable, WildcardType
)
from services.type_signature_renderer import (
    render_generified_type, render_parameter_type, render_type, render_type_parameter
)

STRING = BareType('java.lang.String')
OBJECT = BareType('java.lang.Object')


def list_of(arg):
    return ParameterizedType('java.util.List', (arg,))


class TestRenderType:
    def test_bare_type_renders_its_name(self):
        assert render_type(STRING) == 'java.lang.String'
        assert render_type(BareType('int')) == 'int'

    def test_type_variable_renders_its_name(self):
        assert render_type(TypeVariable('T')) == 'T'

    def test_type_arguments_are_joined_without_spaces(self):
        map_type = ParameterizedType('java.util.Map', (STRING, BareType('java.lang.Integer')))
        assert render_type(map_type) == 'java.util.Map<java.lang.String,java.lang.Integer>'

    def test_nested_generics_expand_recursively(self):
        assert render_type(list_of(list_of(STRING))) == \
            'java.util.List<java.util.List<java.lang.String>>'

    def test_arrays_append_one_pair_of_brackets_per_dimension(self):
        assert render_type(ArrayType(BareType('int'))) == 'int[]'
        assert render_type(ArrayType(ArrayType(STRING))) == 'java.lang.String[][]'

    def test_array_of_generic_and_generic_of_array(self):
        set_of_string_array = ParameterizedType('java.util.Set', (ArrayType(STRING),))
        assert render_type(ArrayType(set_of_string_array)) == 'java.util.Set<java.lang.String[]>[]'

    def test_wildcards_use_their_own_text(self):
        bounded = WildcardType(bound=list_of(STRING))
        lower = WildcardType(bound=TypeVariable('T'), bound_kind='super')
        assert render_type(ParameterizedType('java.util.Collection', (bounded,))) == \
            'java.util.Collection<? extends java.util.List<java.lang.String>>'
        assert render_type(ParameterizedType('java.util.Comparator', (lower,))) == \
            'java.util.Comparator<? super T>'
        assert render_type(WildcardType()) == '?'

    def test_raw_parameterized_type_renders_base_name(self):
        assert render_type(ParameterizedType('org.hamcrest.Matcher', ())) == 'org.hamcrest.Matcher'

    def test_unknown_descriptor_is_rejected(self):
        with pytest.raises(TypeError):
            render_type('java.lang.String')


class TestRenderTypeParameter:
    def test_unbounded_type_variable_is_bare_name(self):
        assert render_type_parameter(TypeParameter('T')) == 'T'

    def test_object_bound_is_not_rendered(self):
        assert render_type_parameter(TypeParameter('T', (OBJECT,))) == 'T'

    def test_multiple_bounds_are_joined_with_ampersand(self):
        param = TypeParameter('V', (
            list_of(STRING),
            ParameterizedType('java.lang.Comparable', (STRING,)),
        ))
        assert render_type_parameter(param) == \
            'V extends java.util.List<java.lang.String> & java.lang.Comparable<java.lang.String>'

    def test_object_is_dropped_from_mixed_bounds(self):
        param = TypeParameter('T', (OBJECT, BareType('java.io.Serializable')))
        assert render_type_parameter(param) == 'T extends java.io.Serializable'

    def test_recursive_bound(self):
        param = TypeParameter('T', (ParameterizedType('java.lang.Comparable', (TypeVariable('T'),)),))
        assert render_type_parameter(param) == 'T extends java.lang.Comparable<T>'


class TestRenderGenerifiedType:
    def test_no_type_arguments_gives_none(self):
        assert render_generified_type(BareType('org.hamcrest.Matcher')) is None
        assert render_generified_type(ParameterizedType('org.hamcrest.Matcher', ())) is None

    def test_first_argument_is_fully_expanded(self):
        matcher = ParameterizedType('org.hamcrest.Matcher', (list_of(list_of(STRING)),))
        assert render_generified_type(matcher) == 'java.util.List<java.util.List<java.lang.String>>'

    def test_only_first_argument_is_used(self):
        pair = ParameterizedType('org.Pair', (STRING, BareType('java.lang.Long')))
        assert render_generified_type(pair) == 'java.lang.String'


class TestRenderParameterType:
    def test_vararg_slot_replaces_brackets(self):
        assert render_parameter_type(ArrayType(STRING), is_var_args=True) == 'java.lang.String...'

    def test_vararg_slot_keeps_inner_dimensions(self):
        assert render_parameter_type(ArrayType(ArrayType(BareType('int'))), is_var_args=True) == 'int[]...'

    def test_other_arrays_keep_brackets(self):
        assert render_parameter_type(ArrayType(STRING)) == 'java.lang.String[]'

    def test_non_array_is_unchanged_on_vararg_slot(self):
        assert render_parameter_type(STRING, is_var_args=True) == 'java.lang.String'
