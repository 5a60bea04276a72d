"""
Indented text rendering of syntax trees and tokens for the shell
"""

from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any

INDENT = '    '


def format_tree(node: Any, level: int = 0) -> str:
    """Render node and its children, one field per line"""
    if isinstance(node, Enum):
        return node.name
    if isinstance(node, (list, tuple)):
        return _format_list(node, level)
    if not is_dataclass(node):
        return repr(node)

    name = type(node).__name__
    node_fields = fields(node)
    if not node_fields:
        return name
    if _is_flat(node):
        args = ', '.join(f"{f.name}={format_tree(getattr(node, f.name))}" for f in node_fields)
        return f"{name}({args})"

    pad = INDENT * (level + 1)
    lines = [f"{name}("]
    for f in node_fields:
        lines.append(f"{pad}{f.name}={format_tree(getattr(node, f.name), level + 1)},")
    lines.append(f"{INDENT * level})")
    return '\n'.join(lines)


def _format_list(items, level: int) -> str:
    if not items:
        return '[]'
    pad = INDENT * (level + 1)
    lines = ['[']
    for item in items:
        lines.append(f"{pad}{format_tree(item, level + 1)},")
    lines.append(f"{INDENT * level}]")
    return '\n'.join(lines)


def _is_flat(node) -> bool:
    """True when no field holds another node or a list"""
    for f in fields(node):
        value = getattr(node, f.name)
        if isinstance(value, (list, tuple)) or is_dataclass(value):
            return False
    return True


def format_tokens(tokens) -> str:
    """One token per line: line:column TYPE value"""
    lines = []
    for token in tokens:
        value = token.value.name if isinstance(token.value, Enum) else token.value
        if value is None:
            lines.append(f"{token.line}:{token.column}\t{token.type.name}")
        else:
            lines.append(f"{token.line}:{token.column}\t{token.type.name}\t{value!r}")
    return '\n'.join(lines)
