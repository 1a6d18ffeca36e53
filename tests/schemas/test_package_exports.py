from __future__ import annotations

import importlib

import yandexWebmaster.schemas as schemas


def test_every_exported_name_resolves():
    namespace: dict = {}
    exec("from yandexWebmaster.schemas import *", namespace)
    missing = [name for name in schemas.__all__ if name not in namespace]
    assert missing == []


def test_submodule_models_are_reexported():
    for module_name in (
        "hosts",
        "verification",
        "statistics",
        "search_queries",
        "sitemaps",
        "indexing",
        "important_urls",
        "recrawl",
        "links",
        "diagnostics",
    ):
        module = importlib.import_module(f"yandexWebmaster.schemas.{module_name}")
        for name in module.__all__:
            assert getattr(schemas, name) is getattr(module, name), name
            assert name in schemas.__all__, name


def test_client_imports():
    module = importlib.import_module("api_clients.webmaster_client")
    assert hasattr(module, "YandexWebmasterClient")
