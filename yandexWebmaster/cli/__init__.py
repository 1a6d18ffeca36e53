"""CLI package for yandexWebmaster."""
