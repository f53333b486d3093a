import logging
import posixpath

from ..types.models import (
    ClassDeclaration,
    Constructor,
    Parameter,
    Project,
    SourceFile,
)
from .imports import include_or_create_named_import
from .templates import templates

logger = logging.getLogger(__name__)

CONFIGURATION_TYPE = "Configuration"


class ServiceRegistry:
    """Кэш модулей и классов сервисов на один проход генерации.

    Повторный запрос по тому же ключу (путь файла; имя класса в модуле)
    возвращает тот же объект, а не копию.
    """

    def __init__(self, project: Project, utils_file: SourceFile, services_dir: str = "services"):
        self.project = project
        self.utils_file = utils_file
        self.services_dir = services_dir

    def service_file_path(self, service_name: str) -> str:
        return posixpath.join(self.services_dir, f"{service_name}.ts")

    def get_or_create_module(self, file_path: str) -> SourceFile:
        service_file = self.project.get_file(file_path)
        if service_file is not None:
            return service_file

        service_file = self.project.add_file(file_path, header=templates.header)
        include_or_create_named_import(
            in_file=service_file,
            from_target_file=self.utils_file,
            named_imports=[self._configuration_type()],
        )
        logger.debug("Created service module %s", file_path)
        return service_file

    def get_or_create_service_class(
        self, service_name: str, module: SourceFile
    ) -> ClassDeclaration:
        service_class = module.get_class(service_name)
        if service_class is not None:
            return service_class

        return module.add_class(
            ClassDeclaration(
                name=service_name,
                is_exported=True,
                constructor=Constructor(
                    parameters=[
                        Parameter(
                            name="configuration",
                            var_type=self._configuration_type(),
                            scope="private",
                        )
                    ]
                ),
            )
        )

    def _configuration_type(self) -> str:
        return self.utils_file.get_type_alias_or_raise(CONFIGURATION_TYPE).name
