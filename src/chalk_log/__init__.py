"""
chalk_log – structured log event formatting.

Import path convention::

    from chalk_log.observability.logging import Layout, Ambient, Level
    from chalk_log.config import LayoutSettings
    from chalk_log.observability.correlation import ActionContext
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
