from .registry import BlockRegistry, register_block, registry


def load_builtin_blocks() -> None:
    # import side-effects for registration
    from . import conditional  # noqa: F401
    from . import loop  # noqa: F401


__all__ = ["BlockRegistry", "register_block", "registry", "load_builtin_blocks"]
