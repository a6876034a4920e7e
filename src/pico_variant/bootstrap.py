import inspect
from importlib import import_module
from types import ModuleType
from typing import TYPE_CHECKING, Any, Iterable, List, Union

from pico_ioc import init as _ioc_init

if TYPE_CHECKING:
    from pico_ioc import PicoContainer

import pico_variant

from .logging import get_logger

logger = get_logger(__name__)

_IOC_INIT_SIG = inspect.signature(_ioc_init)


def _to_module_list(modules: Union[Any, Iterable[Any]]) -> List[Any]:
    if isinstance(modules, Iterable) and not isinstance(modules, (str, bytes)):
        return list(modules)
    return [modules]


def _import_module_like(obj: Any) -> ModuleType:
    if isinstance(obj, ModuleType):
        return obj
    if isinstance(obj, str):
        return import_module(obj)
    module_name = getattr(obj, "__module__", None) or getattr(obj, "__name__", None)
    if not module_name:
        raise ImportError(f"Cannot determine module for object {obj!r}")
    return import_module(module_name)


def _normalize_modules(raw: Iterable[Any]) -> List[ModuleType]:
    seen: set[str] = set()
    result: List[ModuleType] = []
    for item in raw:
        m = _import_module_like(item)
        if m.__name__ not in seen:
            seen.add(m.__name__)
            result.append(m)
    return result


def init(*args: Any, **kwargs: Any) -> "PicoContainer":
    """Build a pico-ioc container that always includes ``pico_variant``.

    Accepts exactly the arguments of ``pico_ioc.init``.  The
    ``pico_variant`` package is prepended to ``modules`` so that
    ``VariantSelector`` and its collaborators can always be resolved.
    """
    bound = _IOC_INIT_SIG.bind(*args, **kwargs)
    bound.apply_defaults()

    raw = _to_module_list(bound.arguments["modules"])
    modules = _normalize_modules([pico_variant] + raw)
    logger.debug("Initializing container with modules: %s", [m.__name__ for m in modules])
    bound.arguments["modules"] = modules

    return _ioc_init(*bound.args, **bound.kwargs)


init.__signature__ = _IOC_INIT_SIG
