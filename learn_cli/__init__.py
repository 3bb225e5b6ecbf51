"""learn-cli -- scaffolds a minimal React + webpack + Babel project.

Usage::

    learn-cli my-app
    python -m learn_cli my-app
"""

__version__ = "1.0.0"
