import logging
from typing import Set, Tuple

from ...exceptions import DuplicateOperationError, UnknownOperationError
from ..types.models import Method
from ..types.spec import KNOWN_OPERATIONS, APIDescription, Operation
from .method_synthesizer import MethodSynthesizer
from .naming import NESTJS, NamingConvention, names_from_operation_id
from .registry import ServiceRegistry

logger = logging.getLogger(__name__)


class ServicesGenerator:
    """Обход таблицы путей: проверка методов и генерация по операции"""

    def __init__(
        self,
        description: APIDescription,
        registry: ServiceRegistry,
        synthesizer: MethodSynthesizer,
        convention: NamingConvention = NESTJS,
        strict_operation_ids: bool = False,
    ):
        self.description = description
        self.registry = registry
        self.synthesizer = synthesizer
        self.convention = convention
        self.strict_operation_ids = strict_operation_ids
        self._seen: Set[Tuple[str, str]] = set()

    def generate(self) -> None:
        for raw_path, path_item in self.description.paths.items():
            unknown_operations = path_item.unknown_verbs(KNOWN_OPERATIONS)

            if unknown_operations:
                raise UnknownOperationError(raw_path, unknown_operations)

            for verb in path_item.declared_verbs:
                self.generate_operation(raw_path, verb, path_item.operations[verb])

    def generate_operation(self, raw_path: str, verb: str, operation: Operation) -> Method:
        service_name, method_name = names_from_operation_id(
            operation.operation_id, self.convention
        )
        if (service_name, method_name) == (
            self.convention.default_service,
            self.convention.default_method,
        ):
            logger.warning(
                "operationId %r of %s %s does not follow the naming convention",
                operation.operation_id,
                verb.upper(),
                raw_path,
            )

        self._check_duplicate(service_name, method_name, raw_path, verb)

        service_file = self.registry.get_or_create_module(
            self.registry.service_file_path(service_name)
        )
        service_class = self.registry.get_or_create_service_class(service_name, service_file)

        logger.debug("%s %s -> %s.%s", verb.upper(), raw_path, service_name, method_name)
        return self.synthesizer.synthesize(
            service_file=service_file,
            service_class=service_class,
            method_name=method_name,
            raw_path=raw_path,
            verb=verb,
            operation=operation,
        )

    def _check_duplicate(self, service_name, method_name, raw_path, verb) -> None:
        key = (service_name, method_name)
        if key not in self._seen:
            self._seen.add(key)
            return

        if self.strict_operation_ids:
            raise DuplicateOperationError(service_name, method_name, raw_path, verb)

        logger.warning(
            "Duplicate method %s.%s for %s %s",
            service_name,
            method_name,
            verb.upper(),
            raw_path,
        )
