from typing import Optional

from models.type_descriptors import (
    ArrayType, BareType, JavaType, ParameterizedType, TypeParameter, TypeVariable, WildcardType
)

UNIVERSAL_TOP_TYPE = 'java.lang.Object'
VARARG_SUFFIX = '...'

def render_type(java_type: JavaType) -> str:
    """Render a type as fully qualified source text, expanding nested generics.

    Type arguments are joined with a bare comma (``Map<K,V>``) so generated
    code stays byte-for-byte stable.
    """
    if isinstance(java_type, ArrayType):
        return f"{render_type(java_type.element_type)}[]"
    if isinstance(java_type, ParameterizedType):
        if not java_type.is_parameterized:
            return java_type.fully_qualified_name
        args = ','.join(render_type(arg) for arg in java_type.actual_type_arguments)
        return f"{java_type.fully_qualified_name}<{args}>"
    if isinstance(java_type, WildcardType):
        return java_type.generic_fully_qualified_name()
    if isinstance(java_type, (BareType, TypeVariable)):
        return java_type.fully_qualified_name
    raise TypeError(f"Cannot render type descriptor {java_type!r}")

def render_type_parameter(type_parameter: TypeParameter, top_type: str = UNIVERSAL_TOP_TYPE) -> str:
    """Render a type parameter declaration, e.g. ``V extends List<String> & Comparable<String>``."""
    bounds = [render_type(bound) for bound in type_parameter.bounds]
    bounds = [bound for bound in bounds if bound != top_type]
    if not bounds:
        return type_parameter.name
    return f"{type_parameter.name} extends {' & '.join(bounds)}"

def render_generified_type(java_type: JavaType) -> Optional[str]:
    """Render the first type argument of a parameterized type; None if it has none."""
    if not java_type.actual_type_arguments:
        return None
    return render_type(java_type.actual_type_arguments[0])

def render_parameter_type(java_type: JavaType, is_var_args: bool = False,
                          vararg_suffix: str = VARARG_SUFFIX) -> str:
    if is_var_args and java_type.is_array:
        return f"{render_type(java_type.element_type)}{vararg_suffix}"
    return render_type(java_type)
