import re
from typing import Any, List, Optional, Tuple, Union
from dataclasses import dataclass, field

from pydantic import BaseModel

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def is_identifier(name: str) -> bool:
    return bool(_IDENTIFIER.match(name))


def property_name(name: str) -> str:
    """Имя свойства объекта, в кавычках если это не идентификатор"""
    return name if is_identifier(name) else quote(name)


def quote(value: str) -> str:
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


def indent(text: str, prefix: str = "  ") -> str:
    """Отступ для всех непустых строк"""
    return "\n".join(prefix + line if line else line for line in text.split("\n"))


# Выражения и инструкции тела метода.
# Дерево отдается эмиттеру целиком, строки собираются только в __str__.


@dataclass
class Identifier:
    name: str

    def __str__(self):
        return self.name


@dataclass
class StringLiteral:
    value: str

    def __str__(self):
        return quote(self.value)


@dataclass
class ElementAccess:
    """target['key']"""

    target: str
    key: str

    def __str__(self):
        return f"{self.target}[{quote(self.key)}]"


@dataclass
class TemplateLiteral:
    """Шаблонная строка; parts - текст и подстановки (Identifier) по порядку"""

    parts: List[Union[str, Identifier]] = field(default_factory=list)

    def __str__(self):
        chunks = []
        for part in self.parts:
            if isinstance(part, str):
                chunks.append(part.replace("\\", "\\\\").replace("`", "\\`"))
            else:
                chunks.append("${" + str(part) + "}")
        return "`" + "".join(chunks) + "`"


@dataclass
class ObjectLiteral:
    fields: List[Tuple[str, Any]] = field(default_factory=list)

    def __str__(self):
        if not self.fields:
            return "{}"

        body = "\n".join(
            f"{property_name(name)}: {value}," for name, value in self.fields
        )
        return "{\n" + indent(body) + "\n}"


@dataclass
class CallExpression:
    callee: str
    arguments: List[Any] = field(default_factory=list)
    type_arguments: List[str] = field(default_factory=list)

    def __str__(self):
        generic = f"<{', '.join(self.type_arguments)}>" if self.type_arguments else ""
        return f"{self.callee}{generic}({', '.join(map(str, self.arguments))})"


@dataclass
class Destructure:
    """const { a, b } = target"""

    target: str
    # (свойство, локальное имя)
    bindings: List[Tuple[str, str]] = field(default_factory=list)
    multiline: bool = False

    def __str__(self):
        names = [
            name if name == local else f"{property_name(name)}: {local}"
            for name, local in self.bindings
        ]

        if self.multiline:
            body = indent("\n".join(f"{name}," for name in names))
            return f"const {{\n{body}\n}} = {self.target}"

        return f"const {{ {', '.join(names)} }} = {self.target}"


@dataclass
class BlankLine:
    def __str__(self):
        return ""


@dataclass
class Return:
    expression: Any

    def __str__(self):
        return f"return {self.expression}"


# Декларации


class PropertySignature(BaseModel):
    name: str
    type: str
    optional: bool = False

    def __str__(self):
        return f"{property_name(self.name)}{'?' if self.optional else ''}: {self.type}"


class ObjectType(BaseModel):
    """Инлайн тип объекта { a: T; b?: U }"""

    properties: List[PropertySignature] = []

    def __str__(self):
        if not self.properties:
            return "{}"

        return "{ " + "; ".join(map(str, self.properties)) + " }"


class Parameter(BaseModel):
    name: str
    var_type: Optional[Any] = None
    optional: bool = False
    scope: Optional[str] = None

    def __str__(self):
        return (
            (f"{self.scope} " if self.scope else "")
            + self.name
            + ("?" if self.optional else "")
            + (f": {self.var_type}" if self.var_type is not None else "")
        )


class Constructor(BaseModel):
    parameters: List[Parameter] = []

    def __str__(self):
        return f"constructor({', '.join(map(str, self.parameters))}) {{}}"


class Method(BaseModel):
    name: str
    parameters: List[Parameter] = []
    return_type: Optional[str] = None

    # Узлы дерева инструкций (Destructure, BlankLine, Return, ...)
    statements: List[Any] = []

    def __str__(self) -> str:
        signature = (
            f"{self.name}({', '.join(map(str, self.parameters))})"
            + (f": {self.return_type}" if self.return_type else "")
        )
        body = "\n".join(str(statement) for statement in self.statements)

        return signature + " {\n" + (indent(body) + "\n" if body else "") + "}"


class ClassDeclaration(BaseModel):
    name: str
    is_exported: bool = True
    constructor: Optional[Constructor] = None

    # Список, а не словарь: одноименные методы сосуществуют
    methods: List[Method] = []

    def __str__(self) -> str:
        members = []
        if self.constructor:
            members.append(str(self.constructor))
        members.extend(map(str, self.methods))

        header = f"{'export ' if self.is_exported else ''}class {self.name} {{"
        if not members:
            return header + "}"

        return header + "\n" + indent("\n\n".join(members)) + "\n}"

    def add_method(self, method: Union[Method, str], **kwargs) -> Method:
        if isinstance(method, str):
            method = Method(name=method, **kwargs)

        self.methods.append(method)
        return method


class ImportDeclaration(BaseModel):
    module_specifier: str
    named_imports: List[str] = []
    type_only: bool = True

    def __str__(self):
        return (
            f"import {'type ' if self.type_only else ''}"
            f"{{ {', '.join(self.named_imports)} }} from {quote(self.module_specifier)}"
        )


class TypeAlias(BaseModel):
    name: str
    type: str
    is_exported: bool = True

    def __str__(self):
        return f"{'export ' if self.is_exported else ''}type {self.name} = {self.type}"


class CodeBlock(BaseModel):
    code: str = ""

    def __str__(self):
        return self.code.replace("\t", "  ")


class SourceFile(BaseModel):
    file_name: str
    header: Optional[str] = None

    imports: List[ImportDeclaration] = []
    type_aliases: List[TypeAlias] = []
    classes: List[ClassDeclaration] = []
    code_blocks: List[CodeBlock] = []

    def __str__(self):
        sections = [
            self.header or "",
            "\n".join(map(str, self.imports)),
            "\n\n".join(map(str, self.type_aliases)),
            "\n\n".join(map(str, self.classes)),
            "\n\n".join(map(str, self.code_blocks)),
        ]
        return "\n\n".join(filter(bool, sections)) + "\n"

    def get_class(self, name: str) -> Optional[ClassDeclaration]:
        return next((c for c in self.classes if c.name == name), None)

    def add_class(self, cls: Union[ClassDeclaration, str], **kwargs) -> ClassDeclaration:
        if isinstance(cls, str):
            cls = ClassDeclaration(name=cls, **kwargs)

        self.classes.append(cls)
        return cls

    def get_type_alias(self, name: str) -> Optional[TypeAlias]:
        return next((t for t in self.type_aliases if t.name == name), None)

    def get_type_alias_or_raise(self, name: str) -> TypeAlias:
        type_alias = self.get_type_alias(name)
        if type_alias is None:
            raise KeyError(f"Type alias {name} not found in {self.file_name}")

        return type_alias

    def add_type_alias(self, type_alias: Union[TypeAlias, str], **kwargs) -> TypeAlias:
        if isinstance(type_alias, str):
            type_alias = TypeAlias(name=type_alias, **kwargs)

        self.type_aliases.append(type_alias)
        return type_alias

    def get_import(self, module_specifier: str) -> Optional[ImportDeclaration]:
        return next(
            (i for i in self.imports if i.module_specifier == module_specifier), None
        )

    def add_import(
        self, module_specifier: str, named_imports: List[str], type_only: bool = True
    ) -> ImportDeclaration:
        declaration = ImportDeclaration(
            module_specifier=module_specifier,
            named_imports=list(named_imports),
            type_only=type_only,
        )
        self.imports.append(declaration)
        return declaration

    def add_code_block(self, code_block: Union[CodeBlock, str]) -> "SourceFile":
        if isinstance(code_block, str):
            code_block = CodeBlock(code=code_block)

        self.code_blocks.append(code_block)
        return self


class Project(BaseModel):
    name: str
    files: List[SourceFile] = []

    def get_file(self, file_name: str) -> Optional[SourceFile]:
        return next((f for f in self.files if f.file_name == file_name), None)

    def add_file(self, file_name: Union[SourceFile, str], **kwargs) -> SourceFile:
        if isinstance(file_name, str):
            file_name = SourceFile(file_name=file_name, **kwargs)

        self.files.append(file_name)
        return file_name
