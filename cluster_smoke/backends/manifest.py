"""Backend manifest definition for the plugin system."""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass

from pydantic import BaseModel


@dataclass(frozen=True, kw_only=True)
class BackendManifest[ConfigT: BaseModel, BackendT]:
    """Manifest describing a backend plugin.

    The manifest contains references to the configuration class and the
    backend factory function for lazy loading of backends based on their key.
    """

    config_cls: type[ConfigT]
    backend_factory: Callable[[ConfigT], AbstractAsyncContextManager[BackendT]]
