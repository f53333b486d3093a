"""
Ошибки генерации сервисов
"""

from typing import List


class GenerationError(Exception):
    """Базовая ошибка генерации"""


class UnknownOperationError(GenerationError):
    """Путь объявляет HTTP-методы вне известного набора"""

    def __init__(self, path: str, verbs: List[str]):
        self.path = path
        self.verbs = list(verbs)
        super().__init__(
            f"Unknown operation(s) found for {path}: {', '.join(self.verbs)}"
        )


class DuplicateOperationError(GenerationError):
    """Две операции дают одну и ту же пару (сервис, метод)"""

    def __init__(self, service_name: str, method_name: str, path: str, verb: str):
        self.service_name = service_name
        self.method_name = method_name
        self.path = path
        self.verb = verb
        super().__init__(
            f"Duplicate method {service_name}.{method_name} for {verb.upper()} {path}"
        )
