"""Тесты реестра клиентов."""

import threading

from socialhttp import ClientRegistry, HttpClientConfiguration, HTTPClient


def test_same_config_value_shares_client():
    registry = ClientRegistry()

    a = registry.get(HttpClientConfiguration(retry_count=1))
    b = registry.get(HttpClientConfiguration(retry_count=1))

    assert a is b
    assert len(registry) == 1


def test_different_configs_get_different_clients():
    registry = ClientRegistry()

    a = registry.get(HttpClientConfiguration(retry_count=1))
    b = registry.get(HttpClientConfiguration(retry_count=2))

    assert a is not b
    assert len(registry) == 2


def test_default_config():
    registry = ClientRegistry()
    client = registry.get()

    assert isinstance(client, HTTPClient)
    assert client is registry.get(HttpClientConfiguration())
    assert HttpClientConfiguration() in registry


def test_registries_are_independent():
    config = HttpClientConfiguration()
    assert ClientRegistry().get(config) is not ClientRegistry().get(config)


def test_clear():
    registry = ClientRegistry()
    first = registry.get()

    registry.clear()

    assert len(registry) == 0
    assert registry.get() is not first


def test_concurrent_get_creates_one_client():
    registry = ClientRegistry()
    config = HttpClientConfiguration(retry_count=3)
    results = []

    def worker():
        results.append(registry.get(config))

    threads = [threading.Thread(target=worker) for _ in range(10)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len({id(client) for client in results}) == 1
