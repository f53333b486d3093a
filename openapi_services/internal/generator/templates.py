from typing import List, Tuple


class Templates:
    """Шаблоны общих файлов сгенерированного пакета"""

    header = "// Auto-generated by openapi-services. Do not edit."

    # (имя, тип) для utils.ts в порядке объявления
    utils_type_aliases: List[Tuple[str, str]] = [
        ("RequestMethod", "'POST' | 'GET' | 'PATCH' | 'DELETE' | 'PUT'"),
        (
            "RequestArgs",
            "{\n"
            "  url: string\n"
            "  method: RequestMethod\n"
            "  queryParams?: Record<string, unknown>\n"
            "  bodyArgs?: unknown\n"
            "}",
        ),
        ("Adapter", "<T>(args: RequestArgs) => Promise<T>"),
        ("Configuration", "{\n  baseUrl: string\n  adapter: Adapter\n}"),
    ]

    barrel_line = "export * from '{module}'"


templates = Templates()
