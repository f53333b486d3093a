"""Импорты внешних типов в сгенерированные модули"""

import logging
import posixpath
from typing import List

from ..types.models import SourceFile

logger = logging.getLogger(__name__)

_EXTENSIONS = (".ts", ".tsx")


def module_specifier(in_file: str, target_file: str) -> str:
    """
    Относительный путь импорта от одного файла к другому.

    Examples:
        >>> module_specifier("services/UserService.ts", "models.ts")
        '../models'
        >>> module_specifier("index.ts", "services/UserService.ts")
        './services/UserService'
    """
    target = target_file
    for extension in _EXTENSIONS:
        if target.endswith(extension):
            target = target[: -len(extension)]
            break

    relative = posixpath.relpath(target, posixpath.dirname(in_file) or ".")
    return relative if relative.startswith(".") else "./" + relative


def include_or_create_named_import(
    in_file: SourceFile, from_target_file: SourceFile, named_imports: List[str]
) -> None:
    """Импорт имен из target файла; уже импортированные имена не дублируются"""
    if not named_imports:
        return

    specifier = module_specifier(in_file.file_name, from_target_file.file_name)
    declaration = in_file.get_import(specifier)
    present = set(declaration.named_imports) if declaration else set()

    missing = [name for name in dict.fromkeys(named_imports) if name not in present]
    if not missing:
        return

    if declaration is None:
        in_file.add_import(specifier, missing)
    else:
        declaration.named_imports.extend(missing)

    logger.debug("Import %s from %s into %s", ", ".join(missing), specifier, in_file.file_name)
