"""
Главный модуль генератора - чистый интерфейс
"""

import logging
from typing import Dict, Any

from .config import ServicesConfig
from .internal.generator.imports import module_specifier
from .internal.generator.method_synthesizer import MethodSynthesizer
from .internal.generator.models_generator import generate_models
from .internal.generator.registry import ServiceRegistry
from .internal.generator.services_generator import ServicesGenerator
from .internal.generator.templates import templates
from .internal.parser.openapi import OpenApiParser
from .internal.types.models import Project, SourceFile
from .internal.types.type_renderer import TypeRenderer

logger = logging.getLogger(__name__)

UTILS_FILE = "utils.ts"
MODELS_FILE = "models.ts"
INDEX_FILE = "index.ts"
SERVICES_DIR = "services"


class ApiServicesGenerator:
    """Генерация TypeScript сервисов из OpenAPI описания"""

    def __init__(self, openapi_spec: Dict[str, Any], config: ServicesConfig = None):
        self.config = config or ServicesConfig()
        self.parser = OpenApiParser(openapi_spec)
        self.type_renderer = TypeRenderer()

    def generate(self) -> Project:
        """Генерация проекта: utils, models, сервисы и index"""
        description = self.parser.parse()
        project = Project(name="services")

        utils_file = self._create_utils_file(project)
        models_file = project.add_file(MODELS_FILE, header=templates.header)
        generate_models(description, models_file, self.type_renderer)

        registry = ServiceRegistry(project, utils_file, services_dir=SERVICES_DIR)
        synthesizer = MethodSynthesizer(
            self.type_renderer, models_file, body_field=self.config.body_field
        )
        ServicesGenerator(
            description,
            registry,
            synthesizer,
            convention=self.config.naming_convention(),
            strict_operation_ids=self.config.strict_operation_ids,
        ).generate()

        self._create_index_file(project)
        logger.info("Generated %d files", len(project.files))
        return project

    @staticmethod
    def _create_utils_file(project: Project) -> SourceFile:
        utils_file = project.add_file(UTILS_FILE, header=templates.header)
        for name, type_text in templates.utils_type_aliases:
            utils_file.add_type_alias(name, type=type_text)
        return utils_file

    @staticmethod
    def _create_index_file(project: Project) -> SourceFile:
        exported = [f.file_name for f in project.files]
        index_file = project.add_file(INDEX_FILE, header=templates.header)
        index_file.add_code_block(
            "\n".join(
                templates.barrel_line.format(
                    module=module_specifier(INDEX_FILE, file_name)
                )
                for file_name in exported
            )
        )
        return index_file


def generate_services(
    openapi_spec: Dict[str, Any], config: ServicesConfig = None
) -> Project:
    """Создание сервисов из OpenAPI спецификации"""
    generator = ApiServicesGenerator(openapi_spec, config)
    return generator.generate()
