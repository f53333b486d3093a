"""Синтез метода сервиса для одной операции.

Сгенерированный метод:

    getUser(props: { id: string }): Promise<User> {
      const { baseUrl, adapter } = this.configuration
      const {
        id,
      } = props

      return adapter<User>({
        url: `${baseUrl}/users/${id}`,
        method: 'GET',
        queryParams: undefined,
        bodyArgs: undefined,
      })
    }
"""

import logging
from typing import List, Optional

from ..types.models import (
    BlankLine,
    CallExpression,
    ClassDeclaration,
    Destructure,
    ElementAccess,
    Identifier,
    Method,
    ObjectLiteral,
    ObjectType,
    Parameter,
    PropertySignature,
    Return,
    SourceFile,
    StringLiteral,
    TemplateLiteral,
)
from ..types.spec import Operation
from ..types.type_renderer import TypeRenderer
from ..utils import binding_name, path_args_to_template, path_parameter_names
from .imports import include_or_create_named_import
from .parameters import (
    BodySchema,
    extract_body_schema,
    extract_response_schema,
    group_parameters,
    has_parameters,
)

logger = logging.getLogger(__name__)

UNDEFINED = Identifier("undefined")


class MethodSynthesizer:
    """Построение MethodArtifact и регистрация импортов его типов"""

    def __init__(
        self,
        type_renderer: TypeRenderer,
        models_file: SourceFile,
        body_field: str = "bodyArgs",
    ):
        self.type_renderer = type_renderer
        self.models_file = models_file
        self.body_field = body_field

    def synthesize(
        self,
        service_file: SourceFile,
        service_class: ClassDeclaration,
        method_name: str,
        raw_path: str,
        verb: str,
        operation: Operation,
    ) -> Method:
        body = extract_body_schema(operation, self.body_field)
        response = extract_response_schema(operation)
        grouped = group_parameters(operation)
        references: List[str] = []

        if response is not None:
            return_type = self.type_renderer.render(response.schema_)
        else:
            return_type = self.type_renderer.render_primitive("void")
        references.extend(return_type.references)

        parameters = []
        if has_parameters(operation, body):
            props_type = self._props_type(operation, body, references)
            parameters.append(Parameter(name="props", var_type=props_type))

        path_bindings = {
            param.name: binding_name(param.name) for param in grouped.get("path", [])
        }
        unbound = [
            name for name in path_parameter_names(raw_path) if name not in path_bindings
        ]
        if unbound:
            logger.warning(
                "%s %s: placeholders %s have no path parameter",
                verb.upper(),
                raw_path,
                ", ".join(unbound),
            )

        statements = [
            Destructure(
                target="this.configuration",
                bindings=[("baseUrl", "baseUrl"), ("adapter", "adapter")],
            )
        ]
        if path_bindings:
            statements.append(
                Destructure(
                    target="props",
                    bindings=list(path_bindings.items()),
                    multiline=True,
                )
            )
        statements.append(BlankLine())
        statements.append(
            Return(
                CallExpression(
                    callee="adapter",
                    type_arguments=[return_type.text],
                    arguments=[
                        self._request_descriptor(raw_path, verb, grouped, body, path_bindings)
                    ],
                )
            )
        )

        # operationId считаются уникальными: дубликаты не заменяются
        method = service_class.add_method(
            Method(
                name=method_name,
                parameters=parameters,
                return_type=f"Promise<{return_type.text}>",
                statements=statements,
            )
        )

        if references:
            include_or_create_named_import(
                in_file=service_file,
                from_target_file=self.models_file,
                named_imports=references,
            )

        return method

    def _props_type(
        self, operation: Operation, body: Optional[BodySchema], references: List[str]
    ) -> ObjectType:
        properties = []

        if body is not None:
            body_type = self.type_renderer.render(body.schema_)
            references.extend(body_type.references)
            properties.append(
                PropertySignature(
                    name=body.content_name,
                    type=body_type.text,
                    optional=not body.required,
                )
            )

        for param in operation.parameters:
            param_type = self.type_renderer.render(param.schema_)
            references.extend(param_type.references)
            properties.append(
                PropertySignature(
                    name=param.name,
                    type=param_type.text,
                    optional=not param.required,
                )
            )

        return ObjectType(properties=properties)

    def _request_descriptor(self, raw_path, verb, grouped, body, path_bindings) -> ObjectLiteral:
        query = grouped.get("query", [])

        return ObjectLiteral(
            fields=[
                (
                    "url",
                    TemplateLiteral(
                        [Identifier("baseUrl")] + path_args_to_template(raw_path, path_bindings)
                    ),
                ),
                ("method", StringLiteral(verb.upper())),
                (
                    "queryParams",
                    ObjectLiteral([(p.name, ElementAccess("props", p.name)) for p in query])
                    if query
                    else UNDEFINED,
                ),
                (
                    "bodyArgs",
                    ElementAccess("props", body.content_name) if body is not None else UNDEFINED,
                ),
            ]
        )
