import argparse
import logging
import os
import sys

from openapi_services.internal.types.models import Project
from openapi_services.generator import ApiServicesGenerator
from openapi_services.config import CONFIG_FILE_NAME, ServicesConfig
from openapi_services.exceptions import GenerationError
from openapi_services.loader import load_document


def confirm_choice(message: str) -> bool:
    """Запрос подтверждения у пользователя"""
    while True:
        choice = input(f"{message} (y/n): ").lower().strip()
        if choice in ["y", "yes", "да", ""]:
            return True
        elif choice in ["n", "no", "нет"]:
            return False
        print("Введите y/n")


def generate_project(config: ServicesConfig) -> Project:
    """Ядро генерации - только генерация без сохранения"""
    if not config.url:
        raise ValueError("URL не указан в конфигурации")

    print(f"🚀 Генерация сервисов из {config.url}")

    print("📥 Загрузка OpenAPI спецификации...")
    openapi_spec = load_document(config.url)

    print("⚙️ Генерация кода...")
    return ApiServicesGenerator(openapi_spec, config).generate()


def save_project_files(project: Project, target_path: str):
    """Сохранение файлов проекта"""
    print(f"💾 Сохранение {len(project.files)} файлов...")

    for source_file in project.files:
        path = os.path.join(target_path, source_file.file_name)
        os.makedirs(os.path.dirname(path), exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            f.write(str(source_file))

    print("✅ Генерация завершена успешно!")
    print(f"📦 Сервисы созданы в: {os.path.abspath(target_path)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Генерация TypeScript сервисов из OpenAPI"
    )
    parser.add_argument("--url", type=str, help="URL или путь к OpenAPI спецификации")
    parser.add_argument("--dirname", type=str, help="Директория для генерации сервисов")
    parser.add_argument(
        "--init-config",
        action="store_true",
        help=f"Создать конфиг файл {CONFIG_FILE_NAME}",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Ошибка при повторяющихся парах сервис/метод",
    )
    parser.add_argument(
        "--force", action="store_true", help="Генерировать без подтверждения"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Подробный лог")
    return parser


def generate(argv=None):
    """Команда генерации сервисов"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Инициализация конфига
    if args.init_config:
        config = ServicesConfig(
            url=args.url,
            dirname=args.dirname or "api_services",
        )
        config.save_to_file()
        print(f"✅ Создан конфиг файл {CONFIG_FILE_NAME}")
        return

    file_config = ServicesConfig.from_file(search_dir=args.dirname)

    if file_config and (args.url or args.dirname):
        print(f"🔧 Найден конфиг файл {CONFIG_FILE_NAME}:")
        print(f"   URL: {file_config.url}")
        print(f"   Директория: {file_config.dirname}")

        if args.force or confirm_choice("Использовать конфиг из файла?"):
            final_config = file_config
        else:
            final_config = file_config.merge_with_args(args)
    elif file_config:
        print(f"📋 Используется конфиг из {CONFIG_FILE_NAME}")
        final_config = file_config.merge_with_args(args)
    elif args.url:
        final_config = ServicesConfig(
            url=args.url,
            dirname=args.dirname or "api_services",
            strict_operation_ids=args.strict,
        )
    else:
        print("❌ Ошибка: Укажите --url или создайте конфиг с --init-config")
        sys.exit(1)

    if not final_config.url:
        print("❌ Ошибка: URL не указан ни в конфиге, ни в аргументах")
        sys.exit(1)

    if args.strict:
        final_config.strict_operation_ids = True

    try:
        project = generate_project(final_config)
        save_project_files(project, final_config.dirname or "api_services")
    except (GenerationError, ValueError) as e:
        print(f"❌ Ошибка генерации: {e}")
        sys.exit(1)


if __name__ == "__main__":
    generate()
