import logging
from typing import List, Set, Optional, Dict, Tuple

from tree_sitter import Language, Parser, Node

from processors.base_processor import BaseFileProcessor, ParsedSource
from models.domain_models import JavaClass, JavaMethod
from models.reader_config import ReaderConfig
from models.type_descriptors import (
    ArrayType, BareType, JavaType, ParameterizedType, TypeParameter, TypeVariable, WildcardType
)
from services.type_resolver import JavaTypeResolver

logger = logging.getLogger(__name__)

PRIMITIVE_NODE_TYPES = ('integral_type', 'floating_point_type', 'boolean_type', 'void_type')
ANNOTATION_NODE_TYPES = ('annotation', 'marker_annotation')
COMMENT_NODE_TYPES = ('line_comment', 'block_comment')
INTERFACE_NODE_TYPES = ('interface_declaration', 'annotation_type_declaration')
MODIFIER_KEYWORDS = ('public', 'private', 'protected', 'static', 'final', 'abstract',
                     'synchronized', 'native', 'strictfp', 'default', 'transient', 'volatile')

class JavaFileProcessor(BaseFileProcessor):
    """Processor for Java source files."""

    def __init__(self, config: ReaderConfig, language: Language, parser: Parser):
        super().__init__(config, language, parser)

    def process_class(self, source: ParsedSource, class_node: Node, full_class_name: str,
                      class_cache: Set[str]) -> JavaClass:
        """Build the model of a class and the methods declared directly in its body."""
        content = source.content
        imports = self._extract_imports(source.root_node, content)
        type_resolver = JavaTypeResolver(self.config, class_cache, imports, source.package)
        enclosing = self._enclosing_classes(full_class_name, source.package)

        class_type_parameters = self._extract_type_parameters(
            class_node, content, type_resolver, {}, enclosing
        )
        class_type_vars = self._type_variable_scope({}, class_type_parameters)
        in_interface = class_node.type in INTERFACE_NODE_TYPES

        methods = []
        for method_node in self._iter_method_nodes(class_node):
            method = self._process_method_node(
                method_node, content, type_resolver, class_type_vars, enclosing, in_interface
            )
            methods.append(method)
            logger.debug(f"Read method {full_class_name}.{method.name}")

        class_name = full_class_name.rsplit('.', 1)[-1]
        return JavaClass(
            package=source.package,
            class_name=class_name,
            full_class_name=full_class_name,
            file_path=source.file_path,
            type_parameters=class_type_parameters,
            methods=tuple(methods)
        )

    def _extract_imports(self, root_node: Node, content: bytes) -> Dict[str, str]:
        """Extract single-type and on-demand imports; static imports are ignored."""
        imports = {}
        for child in root_node.children:
            if child.type != 'import_declaration':
                continue
            child_types = [c.type for c in child.children]
            if 'static' in child_types:
                continue
            import_path = None
            for import_child in child.children:
                if import_child.type in ('scoped_identifier', 'identifier'):
                    import_path = self._node_text(import_child, content)
            if not import_path:
                continue
            if 'asterisk' in child_types:
                imports[f"*{import_path}"] = import_path
            else:
                class_name = import_path.split('.')[-1]
                imports[class_name] = import_path
        return imports

    def _enclosing_classes(self, full_class_name: str, package: str) -> Tuple[str, ...]:
        """Fully qualified names of the class and its outer classes, innermost first."""
        nested_path = full_class_name[len(package) + 1:] if package else full_class_name
        parts = nested_path.split('.')
        names = []
        for i in range(len(parts), 0, -1):
            path = '.'.join(parts[:i])
            names.append(f"{package}.{path}" if package else path)
        return tuple(names)

    def _iter_method_nodes(self, class_node: Node) -> List[Node]:
        body = class_node.child_by_field_name('body')
        if body is None:
            return []
        members = list(body.children)
        if body.type == 'enum_body':
            members = []
            for child in body.children:
                if child.type == 'enum_body_declarations':
                    members.extend(child.children)
        return [member for member in members if member.type == 'method_declaration']

    def _process_method_node(self, method_node: Node, content: bytes, type_resolver: JavaTypeResolver,
                             class_type_vars: Dict[str, str], enclosing: Tuple[str, ...],
                             in_interface: bool = False) -> JavaMethod:
        """Process a single method declaration."""
        method_name = self._node_text(method_node.child_by_field_name('name'), content)
        modifiers, annotations = self._extract_modifiers(method_node, content, type_resolver, enclosing)

        type_parameters = self._extract_type_parameters(
            method_node, content, type_resolver, class_type_vars, enclosing
        )
        type_vars = self._type_variable_scope(class_type_vars, type_parameters)

        return_type = self._to_java_type(
            method_node.child_by_field_name('type'), content, type_resolver, type_vars, enclosing
        )
        return_type = self._apply_dimensions(return_type, method_node.child_by_field_name('dimensions'))

        parameters, is_var_args = self._extract_method_parameters(
            method_node, content, type_resolver, type_vars, enclosing
        )
        exceptions = self._extract_throws(method_node, content, type_resolver, type_vars, enclosing)

        return JavaMethod(
            name=method_name,
            modifiers=tuple(modifiers),
            annotations=tuple(annotations),
            return_type=return_type,
            type_parameters=type_parameters,
            parameters=tuple(parameters),
            is_var_args=is_var_args,
            exceptions=tuple(exceptions),
            is_interface_member=in_interface
        )

    def _extract_modifiers(self, node: Node, content: bytes, type_resolver: JavaTypeResolver,
                           enclosing: Tuple[str, ...]) -> Tuple[List[str], List[str]]:
        """Extract modifier keywords and fully qualified annotation names."""
        modifiers = []
        annotations = []
        for child in node.children:
            if child.type != 'modifiers':
                continue
            for modifier in child.children:
                if modifier.type in ANNOTATION_NODE_TYPES:
                    name_node = modifier.child_by_field_name('name')
                    annotation_name = self._node_text(name_node, content)
                    annotations.append(type_resolver.resolve_type_name(annotation_name, enclosing))
                elif modifier.type in MODIFIER_KEYWORDS:
                    modifiers.append(modifier.type)
        return modifiers, annotations

    def _extract_type_parameters(self, node: Node, content: bytes, type_resolver: JavaTypeResolver,
                                 outer_type_vars: Dict[str, str],
                                 enclosing: Tuple[str, ...]) -> Tuple[TypeParameter, ...]:
        """Extract declared type parameters and their bounds."""
        type_parameters_node = node.child_by_field_name('type_parameters')
        if type_parameters_node is None:
            for child in node.children:
                if child.type == 'type_parameters':
                    type_parameters_node = child
                    break
        if type_parameters_node is None:
            return ()

        declarations = [c for c in type_parameters_node.children if c.type == 'type_parameter']
        # Bounds may refer to any parameter of the same list, e.g. <T extends Comparable<T>>.
        names = []
        for declaration in declarations:
            for child in declaration.children:
                if child.type in ('type_identifier', 'identifier'):
                    names.append(self._node_text(child, content))
                    break
        type_vars = dict(outer_type_vars)
        type_vars.update((name, self.config.universal_top_type) for name in names)

        type_parameters = []
        for name, declaration in zip(names, declarations):
            bounds = []
            for child in declaration.children:
                if child.type == 'type_bound':
                    bounds = [
                        self._to_java_type(bound, content, type_resolver, type_vars, enclosing)
                        for bound in child.named_children
                        if bound.type not in COMMENT_NODE_TYPES
                    ]
            type_parameters.append(TypeParameter(name=name, bounds=tuple(bounds)))
        return tuple(type_parameters)

    def _type_variable_scope(self, outer_type_vars: Dict[str, str],
                             type_parameters: Tuple[TypeParameter, ...]) -> Dict[str, str]:
        """Map each type variable in scope to its erasure, the erasure of its first bound."""
        scope = dict(outer_type_vars)
        for type_parameter in type_parameters:
            erased = self.config.universal_top_type
            if type_parameter.bounds:
                first_bound = type_parameter.bounds[0]
                if isinstance(first_bound, TypeVariable):
                    erased = scope.get(first_bound.name, erased)
                else:
                    erased = first_bound.erasure().fully_qualified_name
            scope[type_parameter.name] = erased
        return scope

    def _extract_method_parameters(self, method_node: Node, content: bytes, type_resolver: JavaTypeResolver,
                                   type_vars: Dict[str, str],
                                   enclosing: Tuple[str, ...]) -> Tuple[List[JavaType], bool]:
        """Extract parameter types in declaration order, and whether the method is variadic."""
        parameters = []
        is_var_args = False
        parameters_node = method_node.child_by_field_name('parameters')
        for child in parameters_node.children:
            if child.type == 'formal_parameter':
                param_type = self._to_java_type(
                    child.child_by_field_name('type'), content, type_resolver, type_vars, enclosing
                )
                parameters.append(self._apply_dimensions(param_type, child.child_by_field_name('dimensions')))
            elif child.type == 'spread_parameter':
                type_node = next(c for c in child.named_children if self._is_type_node(c))
                param_type = self._to_java_type(type_node, content, type_resolver, type_vars, enclosing)
                parameters.append(ArrayType(param_type))
                is_var_args = True
        return parameters, is_var_args

    def _extract_throws(self, method_node: Node, content: bytes, type_resolver: JavaTypeResolver,
                        type_vars: Dict[str, str], enclosing: Tuple[str, ...]) -> List[JavaType]:
        """Extract throws clause."""
        for child in method_node.children:
            if child.type == 'throws':
                return [
                    self._to_java_type(exception, content, type_resolver, type_vars, enclosing)
                    for exception in child.named_children
                    if exception.type not in COMMENT_NODE_TYPES
                ]
        return []

    def _to_java_type(self, node: Node, content: bytes, type_resolver: JavaTypeResolver,
                      type_vars: Dict[str, str], enclosing: Tuple[str, ...]) -> JavaType:
        """Convert a type node into a type descriptor, resolving every name it mentions."""
        node_type = node.type
        if node_type in PRIMITIVE_NODE_TYPES:
            return BareType(self._node_text(node, content))

        if node_type == 'type_identifier':
            name = self._node_text(node, content)
            if name in type_vars:
                return TypeVariable(name, type_vars[name])
            return BareType(type_resolver.resolve_type_name(name, enclosing))

        if node_type == 'scoped_type_identifier':
            name = ''.join(self._node_text(node, content).split())
            return BareType(type_resolver.resolve_type_name(name, enclosing))

        if node_type == 'generic_type':
            base_name = None
            arguments: Tuple[JavaType, ...] = ()
            for child in node.named_children:
                if child.type in ('type_identifier', 'scoped_type_identifier'):
                    base_name = self._to_java_type(child, content, type_resolver, type_vars, enclosing).fully_qualified_name
                elif child.type == 'type_arguments':
                    arguments = tuple(
                        self._to_java_type(arg, content, type_resolver, type_vars, enclosing)
                        for arg in child.named_children
                        if arg.type not in COMMENT_NODE_TYPES
                    )
            return ParameterizedType(base_name, arguments)

        if node_type == 'array_type':
            element = self._to_java_type(
                node.child_by_field_name('element'), content, type_resolver, type_vars, enclosing
            )
            return self._apply_dimensions(element, node.child_by_field_name('dimensions'))

        if node_type == 'wildcard':
            bound_kind = 'extends'
            bound = None
            for child in node.children:
                if child.type in ('extends', 'super'):
                    bound_kind = child.type
                elif self._is_type_node(child):
                    bound = self._to_java_type(child, content, type_resolver, type_vars, enclosing)
            return WildcardType(bound=bound, bound_kind=bound_kind)

        if node_type == 'annotated_type':
            type_node = next(c for c in node.named_children if self._is_type_node(c))
            return self._to_java_type(type_node, content, type_resolver, type_vars, enclosing)

        logger.debug(f"Unrecognised type node '{node_type}', keeping its source text")
        return BareType(''.join(self._node_text(node, content).split()))

    def _apply_dimensions(self, java_type: JavaType, dimensions_node: Optional[Node]) -> JavaType:
        if dimensions_node is None:
            return java_type
        for child in dimensions_node.children:
            if child.type == '[':
                java_type = ArrayType(java_type)
        return java_type

    def _is_type_node(self, node: Node) -> bool:
        return node.is_named and node.type not in ANNOTATION_NODE_TYPES + COMMENT_NODE_TYPES + (
            'modifiers', 'variable_declarator', 'super', 'identifier'
        )

    def _node_text(self, node: Node, content: bytes) -> str:
        return content[node.start_byte:node.end_byte].decode('utf8')
