"""In-process generator environment.

Holds the generators known to this process and runs them by namespace.
Generators come from explicit ``register`` calls or from installed
``polymer_init_<name>`` modules found by ``lookup``.
"""

from __future__ import annotations

import asyncio
import importlib
import inspect
import pkgutil
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from polymer_init.config import InitConfig
from polymer_init.init.errors import TemplateNotFoundError
from polymer_init.init.models import GeneratorDescriptor

MODULE_PREFIX = "polymer_init_"


@dataclass
class _Registration:
    generator: Any
    descriptor: GeneratorDescriptor


class GeneratorEnvironment:
    """Registry of template generators keyed by namespace.

    A generator is a callable taking no arguments, an object with a
    ``run()`` method, or a class with a ``run()`` method (instantiated with
    no arguments on every run). Coroutine results are awaited; plain
    callables run in a worker thread.
    """

    def __init__(self, config: InitConfig | None = None) -> None:
        self.config = config or InitConfig()
        self._generators: dict[str, _Registration] = {}

    def register(
        self,
        generator: Any,
        namespace: str,
        resolved: str = "unknown",
        description: str | None = None,
    ) -> GeneratorDescriptor:
        """Register *generator* under *namespace*, replacing any previous entry."""
        if not (callable(generator) or callable(getattr(generator, "run", None))):
            raise TypeError(f"Generator for {namespace!r} must be callable or define run()")
        descriptor = GeneratorDescriptor(namespace=namespace, resolved=resolved, description=description)
        self._generators[namespace] = _Registration(generator=generator, descriptor=descriptor)
        return descriptor

    def unregister(self, namespace: str) -> None:
        self._generators.pop(namespace, None)

    def lookup(self, module_names: Iterable[str] | None = None) -> list[str]:
        """Register generators from installed ``polymer_init_<name>`` modules.

        Each module must expose a ``generator`` attribute and may expose a
        ``DESCRIPTION`` string. ``polymer_init_starter_kit`` is registered as
        ``polymer-init-starter-kit:app``.

        Args:
            module_names: Modules to inspect. Defaults to every top-level
                module on ``sys.path`` whose name starts with the prefix.

        Returns:
            The namespaces registered, in discovery order.
        """
        if module_names is None:
            module_names = sorted(
                info.name for info in pkgutil.iter_modules() if info.name.startswith(MODULE_PREFIX)
            )

        registered: list[str] = []
        for module_name in module_names:
            module = importlib.import_module(module_name)
            generator = getattr(module, "generator", None)
            if generator is None:
                continue
            template_name = module_name[len(MODULE_PREFIX):].replace("_", "-")
            namespace = self.config.namespace_for(template_name)
            self.register(
                generator,
                namespace,
                resolved=getattr(module, "__file__", None) or "unknown",
                description=getattr(module, "DESCRIPTION", None),
            )
            registered.append(namespace)
        return registered

    def get_generators_meta(self) -> dict[str, GeneratorDescriptor]:
        """Return a new ``{namespace: descriptor}`` mapping on every call."""
        return {namespace: entry.descriptor for namespace, entry in self._generators.items()}

    async def run(self, namespace: str) -> None:
        """Run the generator registered under *namespace* to completion.

        Raises:
            TemplateNotFoundError: If nothing is registered under *namespace*.
        """
        entry = self._generators.get(namespace)
        if entry is None:
            raise TemplateNotFoundError(namespace)

        target = entry.generator
        if inspect.isclass(target):
            target = target()
        run = getattr(target, "run", None)
        if callable(run):
            target = run

        if inspect.iscoroutinefunction(target):
            await target()
            return
        result = await asyncio.to_thread(target)
        if inspect.isawaitable(result):
            await result
