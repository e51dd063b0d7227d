import logging
from typing import Dict, List, Optional

from tree_sitter import Node

logger = logging.getLogger(__name__)

CLASS_NODE_TYPES = ('class_declaration', 'interface_declaration', 'enum_declaration',
                    'record_declaration', 'annotation_type_declaration')

class ClassCacheBuilder:
    """Builds an index of all classes declared in a compilation unit for type resolution."""

    def build_class_cache(self, root_node: Node, content: bytes) -> Dict[str, Node]:
        """Map the fully qualified name of every class in the unit, nested ones included, to its node."""
        class_cache = {}
        package = self.extract_package(root_node, content)
        for class_node in self._extract_class_nodes(root_node):
            class_name = self._get_class_name(class_node, content)
            if not class_name:
                continue
            parent_names = []
            parent = class_node.parent
            while parent and parent != root_node:
                if parent.type in CLASS_NODE_TYPES:
                    parent_name = self._get_class_name(parent, content)
                    if parent_name:
                        parent_names.append(parent_name)
                parent = parent.parent
            parent_names.reverse()
            nested_path = '.'.join(parent_names + [class_name])
            full_class_name = f"{package}.{nested_path}" if package else nested_path
            class_cache[full_class_name] = class_node
        logger.debug(f"Indexed {len(class_cache)} classes in package '{package}'")
        return class_cache

    def extract_package(self, root_node: Node, content: bytes) -> str:
        for child in root_node.children:
            if child.type == 'package_declaration':
                for package_child in child.children:
                    if package_child.type in ('scoped_identifier', 'identifier'):
                        return self._node_text(package_child, content)
        return ""

    def _extract_class_nodes(self, root_node: Node) -> List[Node]:
        class_nodes = []
        stack = [root_node]
        while stack:
            node = stack.pop()
            if node.type in CLASS_NODE_TYPES:
                class_nodes.append(node)
            stack.extend(reversed(node.children))
        return class_nodes

    def _get_class_name(self, class_node: Node, content: bytes) -> Optional[str]:
        name_node = class_node.child_by_field_name('name')
        if name_node is None:
            return None
        return self._node_text(name_node, content)

    def _node_text(self, node: Node, content: bytes) -> str:
        return content[node.start_byte:node.end_byte].decode('utf8')
