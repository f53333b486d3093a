import logging

from ..types.models import SourceFile, TypeAlias
from ..types.spec import APIDescription
from ..types.type_renderer import TypeRenderer, sanitize_type_name

logger = logging.getLogger(__name__)


def generate_models(
    description: APIDescription, models_file: SourceFile, type_renderer: TypeRenderer
) -> None:
    """Тип для каждой схемы из components/schemas, в порядке объявления"""
    for schema_name, schema in description.schemas.items():
        name = sanitize_type_name(schema_name)
        if models_file.get_type_alias(name) is not None:
            logger.warning("Schema %s collides with an existing type %s", schema_name, name)
            continue

        rendered = type_renderer.render(schema)
        models_file.add_type_alias(TypeAlias(name=name, type=rendered.text))

    logger.debug("Generated %d model types", len(models_file.type_aliases))
