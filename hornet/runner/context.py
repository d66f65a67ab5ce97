"""Isolated execution contexts for individual benchmarks.

A context exposes a benchmark's hooks to the runner. Every hook is optional;
the runner checks for presence before calling:

    set_up(arg)                  before each sample
    reset_random()               right after set_up
    test(arg)                    synchronous run body
    test_async(deferred, arg)    deferred run body, resolves exactly once
    tear_down(arg)               after each sample

The runner asks a ContextFactory for a context, addressed by the benchmark's
identifying path plus a query marker. The built-in ModuleContextFactory
imports the benchmark as a Python module from a suite directory.
"""

import importlib.util
import sys
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import Any

from hornet.runner.errors import ContextLoadError
from hornet.utils.logger import Logger

HOOK_NAMES = ("set_up", "test", "test_async", "tear_down", "reset_random")


@dataclass(frozen=True)
class ScreenArea:
    """Available screen space for placing a context."""

    width: int
    height: int
    left: int = 0
    top: int = 0


@dataclass(frozen=True)
class Placement:
    """Requested geometry of an execution context."""

    left: int
    top: int
    width: int
    height: int


def place_bottom_right(screen: ScreenArea, width: int, height: int) -> Placement:
    """Anchor a ``width`` x ``height`` viewport at the screen's bottom-right.

    Overshooting is allowed; the host moves the context fully on screen.
    """
    return Placement(
        left=screen.left + screen.width - width,
        top=screen.top + screen.height - height,
        width=width,
        height=height,
    )


class ExecutionContext:
    """Handle to one live, isolated benchmark environment."""

    def __init__(
        self,
        url: str,
        *,
        set_up: Callable[[Any], Any] | None = None,
        test: Callable[[Any], Any] | None = None,
        test_async: Callable[[Any, Any], Any] | None = None,
        tear_down: Callable[[Any], Any] | None = None,
        reset_random: Callable[[], Any] | None = None,
        on_close: Callable[[], None] | None = None,
    ) -> None:
        self.url = url
        self.set_up = set_up
        self.test = test
        self.test_async = test_async
        self.tear_down = tear_down
        self.reset_random = reset_random
        self._on_close = on_close
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Release the context. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        if self._on_close is not None:
            self._on_close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"ExecutionContext({self.url!r}, {state})"


class ContextFactory(ABC):
    """Opens execution contexts on behalf of the runner."""

    def available_screen(self) -> ScreenArea:
        """Screen space contexts may occupy."""
        return ScreenArea(width=1920, height=1080)

    @abstractmethod
    def open(
        self,
        url: str,
        placement: Placement,
        on_loaded: Callable[[], None],
    ) -> ExecutionContext | None:
        """Open a context for ``url`` and call ``on_loaded`` once it is ready.

        Returns:
            The live context, or None if the host refused to open it.

        Raises:
            ContextBlockedError: If the host refused to open the context.
            ContextLoadError: If the benchmark could not be loaded.
        """
        pass


class ModuleContextFactory(ContextFactory):
    """Loads each benchmark as a fresh Python module from ``base_dir``.

    The module is imported under a private name for the lifetime of the
    context and dropped from ``sys.modules`` when the context closes, so no
    state leaks between benchmarks.

    Example:
        >>> factory = ModuleContextFactory("suites/default")
        >>> runner = SuiteRunner(registry, factory)
    """

    def __init__(self, base_dir: str | Path) -> None:
        self.base_dir = Path(base_dir)
        self._counter = 0

    def open(
        self,
        url: str,
        placement: Placement,
        on_loaded: Callable[[], None],
    ) -> ExecutionContext:
        path_part, _, query = url.partition("?")
        path = self.base_dir / path_part
        log = Logger.component("runner.context")
        log.debug(
            f"Opening {path} ({placement.width}x{placement.height} at "
            f"{placement.left},{placement.top}, query '{query}')"
        )

        module_name = self._next_module_name(path)
        module = self._load_module(url, path, module_name)

        context = ExecutionContext(
            url,
            on_close=lambda: sys.modules.pop(module_name, None),
            **{name: getattr(module, name, None) for name in HOOK_NAMES},
        )
        on_loaded()
        return context

    def _next_module_name(self, path: Path) -> str:
        self._counter += 1
        return f"hornet_benchmark_{path.stem}_{self._counter}"

    def _load_module(self, url: str, path: Path, module_name: str) -> ModuleType:
        if not path.is_file():
            raise ContextLoadError(url, f"no such file: {path}")

        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise ContextLoadError(url, f"not an importable module: {path}")

        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except Exception as e:
            sys.modules.pop(module_name, None)
            raise ContextLoadError(url, f"{type(e).__name__}: {e}") from e
        return module
