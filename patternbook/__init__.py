"""Runnable demonstrations of the classic software design patterns, one module per pattern."""

__version__ = "0.1.0"

__all__ = [
    "abstract_factory",
    "adapter",
    "bridge",
    "builder",
    "chain_of_responsibility",
    "command",
    "composite",
    "decorator",
    "facade",
    "factory",
    "flyweight",
    "iterator",
    "mediator",
    "memento",
    "observer",
    "prototype",
    "proxy",
    "singleton_lock",
    "singleton_once",
    "state",
    "strategy",
    "template",
    "visitor",
]