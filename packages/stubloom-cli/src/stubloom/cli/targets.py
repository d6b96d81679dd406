import importlib

from stubloom.common import bus
from stubloom.needle import L
from stubloom.spec import DescriptorRegistry


class TargetError(Exception):
    pass


def load_registry(target: str) -> DescriptorRegistry:
    """
    Resolve `module:attribute` to a DescriptorRegistry.

    The attribute may be the registry itself or a zero-argument callable
    returning one. Failures are reported on the bus before raising.
    """
    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        bus.error(L.cli.target.invalid, target=target)
        raise TargetError(target)

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        bus.error(L.cli.target.import_failed, module=module_name, error=e)
        raise TargetError(target) from e

    obj = module
    for part in attribute.split("."):
        if not hasattr(obj, part):
            bus.error(L.cli.target.missing_attribute, module=module_name, attribute=attribute)
            raise TargetError(target)
        obj = getattr(obj, part)

    if not isinstance(obj, DescriptorRegistry) and callable(obj):
        obj = obj()
    if not isinstance(obj, DescriptorRegistry):
        bus.error(L.cli.target.not_registry, target=target)
        raise TargetError(target)
    return obj
