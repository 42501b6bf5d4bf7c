"""Logger lookup for blockscribe modules.

Every module logs under the ``blockscribe`` namespace so an application can
tune rendering output with a single logger. The library never attaches
handlers. Two messages are emitted today:

- DEBUG from ``blockscribe.renderers.text`` after each top-level render pass
- WARNING from ``blockscribe.scribe`` when a block trips ``max_depth``

Example:
    >>> import logging
    >>> logging.basicConfig()
    >>> logging.getLogger("blockscribe").setLevel(logging.DEBUG)
    >>> render(Block("plugins", [Line("id 'java'")]))
    DEBUG:blockscribe.renderers.text:Rendered 1 root element(s) into 22 chars
"""

from __future__ import annotations

import logging

_ROOT = "blockscribe"


def get_logger(name: str) -> logging.Logger:
    """Return the stdlib logger for ``name`` inside the blockscribe namespace.

    Module names already under ``blockscribe`` are used as-is; anything else
    is nested beneath it, so ``get_logger("fixtures")`` is
    ``blockscribe.fixtures``.
    """
    if name != _ROOT and not name.startswith(f"{_ROOT}."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
