"""TypeScript generator inferring interface declarations from the IR."""

import json
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple
from ..types import ConversionOptions, FormatGenerator, IRNode, IRType

_WORD_SEPARATORS = re.compile(r"[^A-Za-z0-9]+")
_IDENTIFIER = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")

RESERVED_WORDS = frozenset({
    "break", "case", "catch", "class", "const", "continue", "debugger",
    "default", "delete", "do", "else", "enum", "export", "extends", "false",
    "finally", "for", "function", "if", "import", "in", "instanceof", "new",
    "null", "return", "super", "switch", "this", "throw", "true", "try",
    "typeof", "var", "void", "while", "with",
})

SCALAR_TYPE_NAMES = {
    IRType.STRING: "string",
    IRType.NUMBER: "number",
    IRType.BOOLEAN: "boolean",
    IRType.NULL: "null",
}


def to_pascal_case(text: str) -> str:
    """Split on non-alphanumeric runs and capitalize each segment."""
    name = "".join(word[0].upper() + word[1:] for word in _WORD_SEPARATORS.split(text) if word)
    if not name:
        return "Object"
    if name[0].isdigit():
        return f"_{name}"
    return name


def singularize(name: str) -> str:
    """
    Best-effort English singular by suffix stripping.

    Irregular plurals and words ending in "s" are mangled
    ("status" -> "statu", "address" -> "addres").
    """
    if name.endswith("ies"):
        singular = name[:-3] + "y"
    elif name.endswith("es"):
        singular = name[:-2]
    elif name.endswith("s"):
        singular = name[:-1]
    else:
        singular = name
    return singular or name


def to_safe_property_name(name: str) -> str:
    if name in RESERVED_WORDS or not _IDENTIFIER.fullmatch(name):
        return json.dumps(name, ensure_ascii=False)
    return name


@dataclass
class _Declarations:
    """Interface blocks in declaration order plus the bookkeeping for unique names."""
    blocks: Dict[str, str] = field(default_factory=dict)
    shapes: Dict[Tuple[str, str], str] = field(default_factory=dict)
    reserved: Set[str] = field(default_factory=set)

    def claim(self, base: str) -> str:
        """Take the first free name among ``base``, ``base2``, ``base3``..."""
        name = base
        counter = 2
        while name in self.blocks or name in self.reserved:
            name = f"{base}{counter}"
            counter += 1
        # Placeholder keeps the parent ahead of its nested declarations
        self.blocks[name] = ""
        return name

    def settle(self, base: str, name: str, body: str) -> str:
        """Record a finished interface, reusing an identical one with the same base name."""
        existing = self.shapes.get((base, body))
        if existing is not None:
            del self.blocks[name]
            return existing
        self.shapes[(base, body)] = name
        self.blocks[name] = f"interface {name} {body}\n"
        return name


class TypeScriptGenerator(FormatGenerator):
    """
    Generator for TypeScript interface definitions.

    Unlike the other generators this one walks the IR children: each object
    becomes an interface named after its key, and each array is typed from
    its sampled element. Distinct objects that would share a name get a
    numeric suffix (``User``, ``User2``); structurally identical objects
    under the same name share one interface.
    """

    name = "typescript"
    description = "TypeScript interface/type definitions"
    DEFAULT_ROOT_NAME = "Data"
    DEFAULT_INDENT = 2

    def generate(self, ir: IRNode, options: ConversionOptions) -> str:
        root_name = to_pascal_case(options.root_name or self.DEFAULT_ROOT_NAME)
        member_indent = " " * (options.indent or self.DEFAULT_INDENT)

        declarations = _Declarations()
        if ir.type != IRType.OBJECT and self._element_name(ir, root_name) != root_name:
            # The root becomes a type alias, so no interface may take its name
            declarations.reserved.add(root_name)

        type_text = self._resolve(ir, root_name, member_indent, declarations)
        blocks = list(declarations.blocks.values())
        if ir.type != IRType.OBJECT and type_text.rstrip("[]") != root_name:
            blocks.insert(0, f"type {root_name} = {type_text};\n")

        self.logger.debug(f"Generated {len(blocks)} TypeScript declarations")
        return "\n".join(blocks)

    @staticmethod
    def _element_name(node: IRNode, name: str) -> Optional[str]:
        """Interface name the innermost array element would ask for, if it is an object."""
        while node.type == IRType.ARRAY and node.children:
            node = node.children[0]
            name = singularize(name)
        return name if node.type == IRType.OBJECT else None

    def _resolve(self, node: IRNode, name: str, member_indent: str,
                 declarations: _Declarations) -> str:
        """TypeScript type for a node, declaring interfaces for the objects it reaches."""
        if node.type in SCALAR_TYPE_NAMES:
            return SCALAR_TYPE_NAMES[node.type]
        if node.type == IRType.ARRAY:
            if node.children:
                element = self._resolve(node.children[0], singularize(name), member_indent, declarations)
                return f"{element}[]"
            return "any[]"
        if node.type == IRType.OBJECT:
            return self._declare(node, name, member_indent, declarations)
        return "any"

    def _declare(self, node: IRNode, base: str, member_indent: str,
                 declarations: _Declarations) -> str:
        name = declarations.claim(base)

        members: List[str] = []
        for child in node.children:
            key = child.name or "prop"
            optional = "" if child.metadata.is_required else "?"
            child_type = self._resolve(child, to_pascal_case(key), member_indent, declarations)
            members.append(f"{member_indent}{to_safe_property_name(key)}{optional}: {child_type};")

        body = "{\n" + "\n".join(members) + "\n}" if members else "{}"
        return declarations.settle(base, name, body)
