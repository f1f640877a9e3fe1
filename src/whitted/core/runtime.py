"""Taichi runtime initialization.

The per-pixel kernels (see ``whitted.preview.canvas``) run on Taichi. Taichi
must be initialized exactly once per process: calling ``ti.init`` again
resets the runtime and invalidates every field allocated before it. All
code in this package goes through init_runtime() / ensure_runtime() so the
initialization happens once, lazily, on first kernel use.

Example:
    >>> from whitted.core.runtime import init_runtime
    >>> init_runtime("cpu")
"""

import logging

import taichi as ti

logger = logging.getLogger(__name__)

# Backend names accepted by init_runtime(), mapped to Taichi arch constants
ARCHES = {
    "cpu": ti.cpu,
    "gpu": ti.gpu,
    "cuda": ti.cuda,
    "vulkan": ti.vulkan,
    "metal": ti.metal,
}

_initialized_arch: str | None = None


def init_runtime(arch: str = "cpu") -> None:
    """Initialize Taichi on the requested backend, once per process.

    Repeated calls are no-ops, even with a different arch; the first backend
    wins for the lifetime of the process.

    Args:
        arch: One of the ARCHES keys. Default "cpu" because the canvas kernels
            use float64, which not every GPU backend supports.

    Raises:
        ValueError: If arch is not a known backend name.
    """
    global _initialized_arch
    if arch not in ARCHES:
        raise ValueError(f"Unknown Taichi arch {arch!r}; expected one of {sorted(ARCHES)}")
    if _initialized_arch is not None:
        if arch != _initialized_arch:
            logger.warning(
                "Taichi already initialized on %s; ignoring request for %s",
                _initialized_arch,
                arch,
            )
        return
    ti.init(arch=ARCHES[arch], default_fp=ti.f64, log_level=ti.WARN)
    _initialized_arch = arch
    logger.debug("Taichi runtime initialized (arch=%s)", arch)


def ensure_runtime() -> None:
    """Initialize Taichi with the default backend if nothing has yet."""
    if _initialized_arch is None:
        init_runtime()


def is_initialized() -> bool:
    return _initialized_arch is not None
