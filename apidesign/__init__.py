"""Small, working examples of API design idioms: stacks, argument lists, adapters, proxies, facades, renderer factories, observers, singletons and timers."""

__version__ = "0.1.0"